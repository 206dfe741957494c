#!/usr/bin/env python3
"""
Reduced matrix elements of spin, isospin, and orbital operators for two nucleons.

Normalization: the reduced matrix element is the matrix element of the q = 0
component between the stretched substates,
    < j' || T^k || j > = < j' m | T^k_0 | j m >,  m = min(j', j)
so that a diagonal rank-1 element is the moment itself, e.g.
    < 3S1 || (sigma_1 + sigma_2)/2 || 3S1 > = < 1 1 | S_z | 1 1 > = 1.
The stretched 3j symbol never vanishes when the triangle rule holds, so this is
a rescaling of the Edmonds reduced matrix element,
    < j' m | T^k_0 | j m > = (-1)**(j'-m) ( j' k j ; -m 0 m ) < j' || T^k || j >_Edmonds.
Internally the Edmonds normalization is used; the public functions convert.

Operators:
    S_sym  = (sigma_1 + sigma_2) / 2,  S_asym = (sigma_1 - sigma_2) / 2
    [sigma_1 sigma_2]^k
    C^k = sqrt(4 pi / (2k+1)) Y^k, acting on r (relative) or R (center of mass)
"""
import functools
import numpy as np
from sympy import Rational
from sympy.physics.wigner import wigner_3j, wigner_6j, wigner_9j
if(__package__==None or __package__==""):
    import Quadrature
else:
    from . import Quadrature

_half = Rational(1,2)
_sigma_rme = np.sqrt(6.0) # < 1/2 || sigma || 1/2 >_Edmonds

def _triag(J1,J2,J3):
    b = True
    if(abs(J1-J2) <= J3 <= J1+J2): b = False
    return b

def _hat(j):
    return np.sqrt(2*j+1)

@functools.lru_cache(maxsize=None)
def _threej(j1, j2, j3, m1, m2, m3):
    return float(wigner_3j(j1, j2, j3, m1, m2, m3))
@functools.lru_cache(maxsize=None)
def _sixj(j1, j2, j3, j4, j5, j6):
    return float(wigner_6j(j1, j2, j3, j4, j5, j6))
@functools.lru_cache(maxsize=None)
def _ninej(j1, j2, j3, j4, j5, j6, j7, j8, j9):
    return float(wigner_9j(j1, j2, j3, j4, j5, j6, j7, j8, j9))

def _stretched(jp, j, k, rme):
    """
    Edmonds reduced matrix element -> < j' m | T^k_0 | j m >, m = min(j', j)
    """
    if(_triag(jp, j, k)): return 0.0
    m = min(jp, j)
    return (-1)**(jp-m) * _threej(jp, k, j, -m, 0, m) * rme

def _unit_recoupling(j1p, j1, k1, j2p, j2, k2, Jp, J, k):
    """
    < (j1' j2') J' || [T^k1 U^k2]^k || (j1 j2) J > / ( < j1' || T || j1 > < j2' || U || j2 > ), Edmonds
    """
    if(_triag(j1p, j1, k1) or _triag(j2p, j2, k2) or _triag(Jp, J, k)): return 0.0
    return _hat(Jp) * _hat(J) * _hat(k) * _ninej(j1p, j1, k1, j2p, j2, k2, Jp, J, k)

def _orbital_C(lp, l, k):
    """
    < l' || C^k || l >, Edmonds
    """
    if(_triag(lp, l, k)): return 0.0
    if((lp+l+k)%2==1): return 0.0
    return (-1)**lp * _hat(lp) * _hat(l) * _threej(lp, k, l, 0, 0, 0)

def _spin_one(Sp, S):
    """
    < (1/2 1/2) S' || sigma_1 || (1/2 1/2) S > = (-1)**S X, and sigma_2 gives (-1)**S' X, Edmonds
    """
    if(_triag(Sp, S, 1)): return 0.0, 0.0
    x = _hat(Sp) * _hat(S) * _sixj(_half, Sp, _half, S, _half, 1) * _sigma_rme
    return (-1)**S * x, (-1)**Sp * x

def _symmetric(Sp, S):
    s1, s2 = _spin_one(Sp, S)
    return 0.5 * (s1 + s2)

def _antisymmetric(Sp, S):
    s1, s2 = _spin_one(Sp, S)
    return 0.5 * (s1 - s2)

def _pauli_product(Sp, S, k):
    if(_triag(Sp, S, k)): return 0.0
    return _hat(Sp) * _hat(S) * _hat(k) * _ninej(_half, _half, 1, _half, _half, 1, Sp, S, k) * _sigma_rme**2

def SpinSymmetricRME(Sp, S):
    """
    < S' || (sigma_1 + sigma_2)/2 || S >, also used for isospin
    """
    return _stretched(Sp, S, 1, _symmetric(Sp, S))

def SpinAntisymmetricRME(Sp, S):
    """
    < S' || (sigma_1 - sigma_2)/2 || S >, also used for isospin
    """
    return _stretched(Sp, S, 1, _antisymmetric(Sp, S))

def PauliProductRME(Sp, S, k):
    """
    < S' || [sigma_1 sigma_2]^k || S >, also used for isospin
    """
    return _stretched(Sp, S, k, _pauli_product(Sp, S, k))

def RelativeSpinSymmetricRME(Lp, L, Sp, S, Jp, J, kr, k):
    """
    < (L' S') J' || [C^kr(r) S_sym]^k || (L S) J >
    """
    rme = _unit_recoupling(Lp, L, kr, Sp, S, 1, Jp, J, k) * _orbital_C(Lp, L, kr) * _symmetric(Sp, S)
    return _stretched(Jp, J, k, rme)

def RelativeSpinAntisymmetricRME(Lp, L, Sp, S, Jp, J, kr, k):
    """
    < (L' S') J' || [C^kr(r) S_asym]^k || (L S) J >
    """
    rme = _unit_recoupling(Lp, L, kr, Sp, S, 1, Jp, J, k) * _orbital_C(Lp, L, kr) * _antisymmetric(Sp, S)
    return _stretched(Jp, J, k, rme)

def RelativePauliProductRME(Lp, L, Sp, S, Jp, J, kr, ks, k):
    """
    < (L' S') J' || [C^kr(r) [sigma_1 sigma_2]^ks]^k || (L S) J >
    """
    rme = _unit_recoupling(Lp, L, kr, Sp, S, ks, Jp, J, k) * _orbital_C(Lp, L, kr) * _pauli_product(Sp, S, ks)
    return _stretched(Jp, J, k, rme)

def _orbital_L(Lp, L, Sp, S, Jp, J):
    if(Lp != L or Sp != S): return 0.0
    if(_triag(Jp, J, 1)): return 0.0
    return (-1)**(L+S+J+1) * _hat(J) * _hat(Jp) * _sixj(L, Jp, S, J, L, 1) * np.sqrt(L*(L+1)*(2*L+1))

def RelativeLrelRME(Lp, L, Sp, S, Jp, J):
    """
    < (L' S') J' || L_rel || (L S) J >
    """
    return _stretched(Jp, J, 1, _orbital_L(Lp, L, Sp, S, Jp, J))

def _relative_cm_orbital(lrp, lr, lcp, lc, Lp, L, kr, kc, kL):
    return _unit_recoupling(lrp, lr, kr, lcp, lc, kc, Lp, L, kL) * _orbital_C(lrp, lr, kr) * _orbital_C(lcp, lc, kc)

def RelativeCMSpinSymmetricRME(lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J, kr, kc, kL, k):
    """
    < ((lr' lc') L' S') J' || [[C^kr(r) C^kc(R)]^kL S_sym]^k || ((lr lc) L S) J >
    """
    rme = _unit_recoupling(Lp, L, kL, Sp, S, 1, Jp, J, k) * \
            _relative_cm_orbital(lrp, lr, lcp, lc, Lp, L, kr, kc, kL) * _symmetric(Sp, S)
    return _stretched(Jp, J, k, rme)

def RelativeCMSpinAntisymmetricRME(lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J, kr, kc, kL, k):
    """
    < ((lr' lc') L' S') J' || [[C^kr(r) C^kc(R)]^kL S_asym]^k || ((lr lc) L S) J >
    """
    rme = _unit_recoupling(Lp, L, kL, Sp, S, 1, Jp, J, k) * \
            _relative_cm_orbital(lrp, lr, lcp, lc, Lp, L, kr, kc, kL) * _antisymmetric(Sp, S)
    return _stretched(Jp, J, k, rme)

def RelativeCMPauliProductRME(lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J, kr, kc, kL, ks, k):
    """
    < ((lr' lc') L' S') J' || [[C^kr(r) C^kc(R)]^kL [sigma_1 sigma_2]^ks]^k || ((lr lc) L S) J >
    """
    rme = _unit_recoupling(Lp, L, kL, Sp, S, ks, Jp, J, k) * \
            _relative_cm_orbital(lrp, lr, lcp, lc, Lp, L, kr, kc, kL) * _pauli_product(Sp, S, ks)
    return _stretched(Jp, J, k, rme)

def RelativeCMLsumRME(lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J):
    """
    < ((lr' lc') L' S') J' || L_rel + L_cm || ((lr lc) L S) J >
    """
    if(lrp != lr or lcp != lc): return 0.0
    return _stretched(Jp, J, 1, _orbital_L(Lp, L, Sp, S, Jp, J))

def _radius(np_, n, lp, l):
    if(_triag(lp, l, 1) or (lp+l+1)%2==1): return 0.0
    return _orbital_C(lp, l, 1) * Quadrature.radial_integral(np_, lp, n, l, 1)

def _gradient(np_, n, lp, l):
    # nabla = (a - a^+)/sqrt(2), r = (a + a^+)/sqrt(2)
    Np = 2*np_ + lp
    N = 2*n + l
    if(Np == N-1): return _radius(np_, n, lp, l)
    if(Np == N+1): return -_radius(np_, n, lp, l)
    return 0.0

def RadiusME(np_, n, lp, l):
    """
    < n' l' || rho || n l >, b = 1
    """
    return _stretched(lp, l, 1, _radius(np_, n, lp, l))

def GradientME(np_, n, lp, l):
    """
    < n' l' || nabla || n l >, b = 1
    With r = (a + a^+)/sqrt(2) and nabla = (a - a^+)/sqrt(2), nabla equals +r for
    de-excitation (N' = N-1) and -r for excitation (N' = N+1).
    """
    return _stretched(lp, l, 1, _gradient(np_, n, lp, l))

def _relative_cm_vector_product(rel, cm, lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J):
    """
    < ((lr' lc') L' S') J' || [[A(r) B(R)]^1 1_S]^1 || ((lr lc) L S) J >, Edmonds
    rel, cm: Edmonds reduced matrix elements of the rank-1 operators A and B
    """
    if(Sp != S): return 0.0
    orbital = _unit_recoupling(lrp, lr, 1, lcp, lc, 1, Lp, L, 1) * rel * cm
    return _unit_recoupling(Lp, L, 1, Sp, S, 0, Jp, J, 1) * orbital * _hat(S)

def RelativeCMGradientRadiusRME(nrp, nr, lrp, lr, ncp, nc, lcp, lc, Lp, L, Sp, S, Jp, J):
    """
    < Nr' lr' Nc' lc' (L' S') J' || [nabla(r) R]^1 || Nr lr Nc lc (L S) J >, b = 1
    """
    rme = _relative_cm_vector_product(_gradient(nrp, nr, lrp, lr), _radius(ncp, nc, lcp, lc), \
            lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J)
    return _stretched(Jp, J, 1, rme)

def RelativeCMRadiusGradientRME(nrp, nr, lrp, lr, ncp, nc, lcp, lc, Lp, L, Sp, S, Jp, J):
    """
    < Nr' lr' Nc' lc' (L' S') J' || [r nabla(R)]^1 || Nr lr Nc lc (L S) J >, b = 1
    """
    rme = _relative_cm_vector_product(_radius(nrp, nr, lrp, lr), _gradient(ncp, nc, lcp, lc), \
            lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J)
    return _stretched(Jp, J, 1, rme)

def main():
    print(SpinSymmetricRME(1, 1), SpinAntisymmetricRME(1, 0), PauliProductRME(1, 1, 0))
    print(RelativeSpinSymmetricRME(0, 0, 1, 1, 1, 1, 0, 1))
    print(RadiusME(0, 0, 1, 0), GradientME(0, 0, 1, 0))
if(__name__=="__main__"):
    main()
