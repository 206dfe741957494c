#!/usr/bin/env python3
"""
Two-body operator in the relative LSJT basis, stored as one block per sector
for each isospin transfer rank T0.
"""
import copy
import numpy as np
import pandas as pd
if(__package__==None or __package__==""):
    from RelativeSpace import RelativeSpaceLSJT, RelativeSectorsLSJT
else:
    from .RelativeSpace import RelativeSpaceLSJT, RelativeSectorsLSJT

class RelativeOperatorLSJT:
    def __init__(self, space=None, J0=0, G0=0, T0_min=0, T0_max=0, verbose=False):
        self.space = space
        self.J0 = J0
        self.G0 = G0
        self.T0_min = T0_min
        self.T0_max = T0_max
        self.verbose = verbose
        self.sectors = {}
        self.blocks = {}
        if( space != None ): self.allocate_operator( space )

    def allocate_operator(self, space):
        self.space = space
        for T0 in range(self.T0_min, self.T0_max+1):
            sectors = RelativeSectorsLSJT(space, J0=self.J0, G0=self.G0, T0=T0)
            self.sectors[T0] = sectors
            self.blocks[T0] = []
            for isector in range(sectors.get_number_sectors()):
                bra, ket = sectors.get_sector(isector)
                self.blocks[T0].append( np.zeros( (bra.get_number_states(), ket.get_number_states()) ) )

    def _check_labels(self, other):
        if(self.J0 != other.J0): raise ValueError("Operator rank mismatch")
        if(self.G0 != other.G0): raise ValueError("Operator parity mismatch")
        if(self.T0_min != other.T0_min or self.T0_max != other.T0_max): raise ValueError("Operator isospin rank mismatch")
        if(self.space.Nmax != other.space.Nmax or self.space.Jmax != other.space.Jmax): raise ValueError("Basis mismatch")

    def __add__(self, other):
        self._check_labels(other)
        target = copy.deepcopy(self)
        for T0 in target.blocks.keys():
            for isector in range(len(target.blocks[T0])):
                target.blocks[T0][isector] += other.blocks[T0][isector]
        return target

    def __sub__(self, other):
        return self + other * (-1.0)

    def __mul__(self, coef):
        target = copy.deepcopy(self)
        for T0 in target.blocks.keys():
            for isector in range(len(target.blocks[T0])):
                target.blocks[T0][isector] *= coef
        return target

    def set_me(self, T0, bra, ket, me):
        """
        bra, ket: RelativeStateLSJT
        """
        ibra = self.space.get_index(bra.L, bra.S, bra.J, bra.T)
        iket = self.space.get_index(ket.L, ket.S, ket.J, ket.T)
        if((ibra,iket) not in self.sectors[T0].index_from_indices): raise ValueError("Operator rank mismatch")
        isector = self.sectors[T0].get_index(ibra, iket)
        self.blocks[T0][isector][bra.n, ket.n] = me

    def get_me(self, T0, bra, ket):
        ibra = self.space.get_index(bra.L, bra.S, bra.J, bra.T)
        iket = self.space.get_index(ket.L, ket.S, ket.J, ket.T)
        if((ibra,iket) not in self.sectors[T0].index_from_indices): return 0.0
        isector = self.sectors[T0].get_index(ibra, iket)
        return self.blocks[T0][isector][bra.n, ket.n]

    def set_chiral_op(self, op, order, b, regularize=False, regulator=1.0, Abody=2):
        """
        op: ChiralOperator, b: OscillatorParameter
        """
        if(op.J0 != self.J0): raise ValueError("Operator rank mismatch")
        if(op.G0 != self.G0): raise ValueError("Operator parity mismatch")
        for T0 in range(self.T0_min, self.T0_max+1):
            sectors = self.sectors[T0]
            for isector in range(sectors.get_number_sectors()):
                bra_subspace, ket_subspace = sectors.get_sector(isector)
                block = self.blocks[T0][isector]
                for ibra, bra in enumerate(bra_subspace.states):
                    for iket, ket in enumerate(ket_subspace.states):
                        block[ibra,iket] = op.reduced_matrix_element(order, bra, ket, b, \
                                regularize=regularize, regulator=regulator, T0=T0, Abody=Abody)

    def allocated_entries(self, T0):
        return sum([block.size for block in self.blocks[T0]])

    def count_nonzero(self, T0):
        # count independent entries
        counter = 0
        sectors = self.sectors[T0]
        for isector, block in enumerate(self.blocks[T0]):
            ibra, iket = sectors.sectors[isector]
            for (i, j), me in np.ndenumerate(block):
                if(ibra==iket and j<i): continue
                if(abs(me) < 1.e-10): continue
                counter += 1
        return counter

    def print_summary(self):
        print("Truncation: Nmax {} Jmax {} T0_max {}".format(self.space.Nmax, self.space.Jmax, self.T0_max))
        line = "Matrix elements:"
        for T0 in range(self.T0_min, self.T0_max+1):
            line += " {}".format(self.sectors[T0].upper_triangular_entries())
        print(line)
        line = "Allocated:"
        for T0 in range(self.T0_min, self.T0_max+1):
            line += " {}".format(self.allocated_entries(T0))
        print(line)

    def _upper_triangular_rows(self):
        for T0 in range(self.T0_min, self.T0_max+1):
            sectors = self.sectors[T0]
            for isector in range(sectors.get_number_sectors()):
                ibra, iket = sectors.sectors[isector]
                bra_subspace, ket_subspace = sectors.get_sector(isector)
                block = self.blocks[T0][isector]
                for i, bra in enumerate(bra_subspace.states):
                    for j, ket in enumerate(ket_subspace.states):
                        if(ibra==iket and j<i): continue
                        yield T0, bra, ket, block[i,j]

    def to_DataFrame(self):
        tmp = []
        for T0, bra, ket, me in self._upper_triangular_rows():
            tmp.append({"T0":T0, "Np":bra.N, "Lp":bra.L, "Sp":bra.S, "Jp":bra.J, "Tp":bra.T, \
                    "N":ket.N, "L":ket.L, "S":ket.S, "J":ket.J, "T":ket.T, "ME":me})
        if(len(tmp)==0): return pd.DataFrame()
        df = pd.DataFrame(tmp)
        df = df.iloc[list(~df["ME"].eq(0)),:].reset_index(drop=True)
        return df

    def write_operator_file(self, filename):
        f = open(filename, "w")
        f.write("# RELATIVE LSJT\n")
        f.write("# version\n")
        f.write("1\n")
        f.write("# J0 g0 T0_min T0_max symmetry\n")
        f.write("{:3d} {:3d} {:3d} {:3d} {:3d}\n".format(self.J0, self.G0, self.T0_min, self.T0_max, 0))
        f.write("# Nmax Jmax\n")
        f.write("{:3d} {:3d}\n".format(self.space.Nmax, self.space.Jmax))
        f.write("# T0 N' L' S' J' T' N L S J T ME\n")
        for T0, bra, ket, me in self._upper_triangular_rows():
            f.write("{:3d} {:3d} {:3d} {:3d} {:3d} {:3d} {:3d} {:3d} {:3d} {:3d} {:3d} {:+16.8e}\n".format(\
                    T0, bra.N, bra.L, bra.S, bra.J, bra.T, ket.N, ket.L, ket.S, ket.J, ket.T, me))
        f.close()
        if(self.verbose): print("Written: " + filename)

    def read_operator_file(self, filename):
        f = open(filename, "r")
        lines = [line for line in f.readlines() if not line.startswith("#")]
        f.close()
        J0, G0, T0_min, T0_max, sym = [int(x) for x in lines[0].split()]
        Nmax, Jmax = [int(x) for x in lines[1].split()]
        self.J0, self.G0, self.T0_min, self.T0_max = J0, G0, T0_min, T0_max
        self.sectors = {}
        self.blocks = {}
        self.allocate_operator( RelativeSpaceLSJT(Nmax=Nmax, Jmax=Jmax) )
        for line in lines[2:]:
            data = line.split()
            if(len(data) != 12): continue
            T0, Np, Lp, Sp, Jp, Tp, N, L, S, J, T = [int(x) for x in data[:11]]
            bra = self.space.get_subspace_from_LSJT(Lp, Sp, Jp, Tp).get_state_from_N(Np)
            ket = self.space.get_subspace_from_LSJT(L, S, J, T).get_state_from_N(N)
            self.set_me(T0, bra, ket, float(data[11]))
