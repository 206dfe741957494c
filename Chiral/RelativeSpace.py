#!/usr/bin/env python3
"""
Relative LSJT basis for two nucleons.
  state: | n (L S) J T >  or  | Nr lr Nc lc (L S) J T >
  subspace: fixed (L, S, J, T, g), states labelled by n
  sector: pair of bra and ket subspaces connected by an operator (J0, G0, T0)
"""
import itertools
from collections import namedtuple

class RelativeStateLSJT(namedtuple("RelativeStateLSJT", ["n", "L", "S", "J", "T"])):
    __slots__ = ()
    representation = "relative"
    @property
    def N(self):
        return 2*self.n + self.L
    @property
    def g(self):
        return self.L%2

class RelativeCMStateLSJT(namedtuple("RelativeCMStateLSJT", ["Nr", "lr", "Nc", "lc", "L", "S", "J", "T"])):
    """
    Nr, lr: relative radial and orbital quantum numbers
    Nc, lc: center-of-mass radial and orbital quantum numbers
    L: lr and lc coupled
    """
    __slots__ = ()
    representation = "relative_cm"
    @property
    def N(self):
        return 2*self.Nr + self.lr + 2*self.Nc + self.lc
    @property
    def g(self):
        return (self.lr + self.lc)%2

def _triag(J1,J2,J3):
    b = True
    if(abs(J1-J2) <= J3 <= J1+J2): b = False
    return b

class RelativeSubspaceLSJT:
    def __init__(self,L=None,S=None,J=None,T=None,Nmax=None):
        self.L = L
        self.S = S
        self.J = J
        self.T = T
        self.g = None
        self.Nmax = Nmax
        self.states = []
        self.index_from_n = {}
        if( self.L != None and self.S != None and self.J != None and self.T != None and Nmax != None ):
            self._set_subspace()
    def _set_subspace(self):
        self.g = self.L%2
        for N in range(self.L, self.Nmax+1, 2):
            n = (N-self.L)//2
            self.states.append( RelativeStateLSJT(n, self.L, self.S, self.J, self.T) )
            self.index_from_n[n] = len(self.states)-1
    def get_number_states(self):
        return len(self.states)
    def get_state(self,idx):
        return self.states[idx]
    def get_index(self,n):
        return self.index_from_n[n]
    def get_state_from_N(self,N):
        return self.states[self.get_index((N-self.L)//2)]
    def get_labels(self):
        return self.L, self.S, self.J, self.T, self.g
    def size(self):
        return self.get_number_states()

class RelativeSpaceLSJT:
    """
    Antisymmetric relative states: L + S + T odd, N = 2n + L <= Nmax, J <= Jmax
    """
    def __init__(self,Nmax=None,Jmax=None):
        self.Nmax = Nmax
        self.Jmax = Jmax
        self.subspaces = []
        self.index_from_LSJT = {}
        if( Nmax == None or Jmax == None ): return
        for L in range(Nmax+1):
            for S, T in itertools.product([0,1], repeat=2):
                if( (L+S+T)%2 == 0 ): continue
                for J in range(abs(L-S), min(L+S,Jmax)+1):
                    subspace = RelativeSubspaceLSJT(L=L,S=S,J=J,T=T,Nmax=Nmax)
                    if( subspace.get_number_states() == 0): continue
                    self.subspaces.append( subspace )
                    self.index_from_LSJT[(L,S,J,T)] = len(self.subspaces)-1
    def get_number_subspaces(self):
        return len(self.subspaces)
    def get_subspace(self,idx):
        return self.subspaces[idx]
    def get_index(self,*LSJT):
        return self.index_from_LSJT[LSJT]
    def get_subspace_from_LSJT(self,*LSJT):
        return self.get_subspace( self.get_index(*LSJT) )
    def get_number_states(self):
        return sum([subspace.get_number_states() for subspace in self.subspaces])
    def print_subspaces(self):
        print("  Relative subspaces list ")
        print("  L,  S,  J,  T,  g, # of states")
        for subspace in self.subspaces:
            print("{:3d},{:3d},{:3d},{:3d},{:3d},{:12d}".format(*subspace.get_labels(), subspace.get_number_states()))

class RelativeSectorsLSJT:
    """
    Upper triangular sectors (bra index <= ket index) for operator labels J0, G0, T0.
    """
    def __init__(self,space=None,J0=0,G0=0,T0=0):
        self.space = space
        self.J0 = J0
        self.G0 = G0
        self.T0 = T0
        self.sectors = []
        self.index_from_indices = {}
        if( self.space == None ): return
        for ibra in range(space.get_number_subspaces()):
            bra = space.get_subspace(ibra)
            for iket in range(ibra, space.get_number_subspaces()):
                ket = space.get_subspace(iket)
                if( _triag( bra.J, ket.J, self.J0 )): continue
                if( _triag( bra.T, ket.T, self.T0 )): continue
                if( (bra.g + ket.g + self.G0)%2 == 1 ): continue
                self.sectors.append( (ibra,iket) )
                self.index_from_indices[(ibra,iket)] = len(self.sectors)-1
    def get_number_sectors(self):
        return len(self.sectors)
    def get_sector(self,idx):
        ibra, iket = self.sectors[idx]
        return self.space.get_subspace(ibra), self.space.get_subspace(iket)
    def get_index(self,ibra,iket):
        return self.index_from_indices[(ibra,iket)]
    def upper_triangular_entries(self):
        counter = 0
        for ibra, iket in self.sectors:
            nbra = self.space.get_subspace(ibra).get_number_states()
            nket = self.space.get_subspace(iket).get_number_states()
            if( ibra == iket ): counter += nbra*(nbra+1)//2
            else: counter += nbra*nket
        return counter

def main():
    space = RelativeSpaceLSJT(Nmax=4, Jmax=2)
    space.print_subspaces()
    sectors = RelativeSectorsLSJT(space, J0=1, G0=0, T0=1)
    print("sectors:", sectors.get_number_sectors(), "entries:", sectors.upper_triangular_entries())
if(__name__=="__main__"):
    main()
