#!/usr/bin/env python3
"""
Magnetic dipole (M1) operator in chiral EFT.

Under the LENPIC power counting:
    LO:   no contribution
    NLO:  one-body (impulse) current, T0 = 0 and 1
          two-body one-pion-exchange current, T0 = 1 only
    N2LO: no correction
    N3LO: two-body isoscalar current (d9 and L2 terms). The isovector two-body
          current at this order is not implemented yet.
    N4LO: no results available
Every evaluator returns 0 instead of NaN; some radial integrals are singular
for particular quantum numbers.
"""
import numpy as np
if(__package__==None or __package__==""):
    import Constants
    import Quadrature
    import AngularMomentum as am
    from Order import Order
    from ChiralOperator import ChiralOperator
else:
    from . import Constants
    from . import Quadrature
    from . import AngularMomentum as am
    from .Order import Order
    from .ChiralOperator import ChiralOperator

def _lec_prefactor_d18():
    """
    g_A m_pi**3 d18 / (12 pi mu_N F_pi**2)
    """
    lecp = Constants.gA * Constants.d18_fm * Constants.pion_mass_fm**3
    lecp /= 12 * Constants.pi * Constants.nuclear_magneton_fm * Constants.pion_decay_constant_fm**2
    return lecp

def _lec_prefactor_d9():
    """
    g_A m_pi**3 d9 / (sqrt(3) pi F_pi**2)
    """
    lecp = Constants.gA * Constants.d9_fm * Constants.pion_mass_fm**3
    lecp /= np.sqrt(3) * Constants.pi * Constants.pion_decay_constant_fm**2
    return lecp

#
# NLO, relative states | n (L S) J T >
#
def nlo_one_body_relative(bra, ket, b, regularize, regulator, T0):
    """
    impulse current, not regularized
    """
    nr, nrp = ket.n, bra.n
    L, Lp = ket.L, bra.L
    S, Sp = ket.S, bra.S
    J, Jp = ket.J, bra.J
    T, Tp = ket.T, bra.T
    if(T0 != 0 and T0 != 1): return 0.0
    if(nr != nrp or L != Lp): return 0.0

    symm_rme_spin = am.RelativeSpinSymmetricRME(Lp, L, Sp, S, Jp, J, 0, 1)
    asymm_rme_spin = am.RelativeSpinAntisymmetricRME(Lp, L, Sp, S, Jp, J, 0, 1)
    symm_rme_isospin = am.SpinSymmetricRME(Tp, T)
    asymm_rme_isospin = am.SpinAntisymmetricRME(Tp, T)
    oam_rme = am.RelativeLrelRME(Lp, L, Sp, S, Jp, J)
    delta_T = float(Tp == T)

    if(T0 == 0):
        spin_term = Constants.isoscalar_nucleon_magnetic_moment * symm_rme_spin * delta_T
        oam_term = 0.5 * oam_rme * delta_T
        result = spin_term + oam_term
    else:
        spin_symm_term = Constants.isovector_nucleon_magnetic_moment * symm_rme_spin * symm_rme_isospin
        spin_asymm_term = Constants.isovector_nucleon_magnetic_moment * asymm_rme_spin * asymm_rme_isospin
        oam_term = 0.5 * oam_rme * symm_rme_isospin
        result = spin_symm_term + spin_asymm_term + oam_term
    if(np.isnan(result)): result = 0.0
    return result

def nlo_two_body_relative(bra, ket, b, regularize, regulator, T0):
    """
    one-pion-exchange current, isovector
    """
    if(T0 != 1): return 0.0
    nr, nrp = ket.n, bra.n
    L, Lp = ket.L, bra.L
    S, Sp = ket.S, bra.S
    J, Jp = ket.J, bra.J
    T, Tp = ket.T, bra.T

    prel = Quadrature.scaled_parameters(nrp, Lp, nr, L, b.relative(), regularize, regulator)
    zpi_integral = Quadrature.normalized(Quadrature.integral_zpi_ypi_r, prel)
    tpi_integral = Quadrature.normalized(Quadrature.integral_tpi_ypi_r, prel)

    A6S1_rme = np.sqrt(10) * am.RelativePauliProductRME(Lp, L, Sp, S, Jp, J, 2, 1, 1)
    S1_rme = am.RelativePauliProductRME(Lp, L, Sp, S, Jp, J, 0, 1, 1)
    T1_rme = am.PauliProductRME(Tp, T, 1)

    result = A6S1_rme * zpi_integral + S1_rme * tpi_integral
    result *= _lec_prefactor_d18() * T1_rme
    if(np.isnan(result)): result = 0.0
    return result

#
# NLO, relative-CM states | Nr lr Nc lc (L S) J T >
#
def nlo_one_body_relative_cm(bra, ket, b, regularize, regulator, T0):
    nr, nrp = ket.Nr, bra.Nr
    lr, lrp = ket.lr, bra.lr
    nc, ncp = ket.Nc, bra.Nc
    lc, lcp = ket.lc, bra.lc
    L, Lp = ket.L, bra.L
    S, Sp = ket.S, bra.S
    J, Jp = ket.J, bra.J
    T, Tp = ket.T, bra.T
    if(T0 != 0 and T0 != 1): return 0.0

    delta_radial = float(nrp == nr and ncp == nc)
    symm_rme_spin = am.RelativeCMSpinSymmetricRME(lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J, 0, 0, 0, 1) * delta_radial
    asymm_rme_spin = am.RelativeCMSpinAntisymmetricRME(lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J, 0, 0, 0, 1) * delta_radial
    symm_rme_isospin = am.SpinSymmetricRME(Tp, T)
    asymm_rme_isospin = am.SpinAntisymmetricRME(Tp, T)
    delta_T = float(Tp == T)

    lsum_me = am.RelativeCMLsumRME(lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J) * delta_radial
    # sqrt( mu / 2 m_nucl )
    mass_ratio_sqrt = 0.5
    args = (nrp, nr, lrp, lr, ncp, nc, lcp, lc, Lp, L, Sp, S, Jp, J)
    rcm_prel_me = mass_ratio_sqrt * am.RelativeCMGradientRadiusRME(*args)
    rrel_pcm_me = am.RelativeCMRadiusGradientRME(*args) / mass_ratio_sqrt

    if(T0 == 0):
        spin_term = Constants.isoscalar_nucleon_magnetic_moment * symm_rme_spin * delta_T
        oam_term = 0.5 * lsum_me * delta_T
        result = spin_term + oam_term
    else:
        spin_symm_term = Constants.isovector_nucleon_magnetic_moment * symm_rme_spin * symm_rme_isospin
        spin_asymm_term = Constants.isovector_nucleon_magnetic_moment * asymm_rme_spin * asymm_rme_isospin
        oam_diagonal_term = 0.5 * lsum_me * symm_rme_isospin
        oam_cross_term = 0.5 * (2 * rcm_prel_me + 0.5 * rrel_pcm_me) * asymm_rme_isospin
        result = spin_symm_term + spin_asymm_term + oam_diagonal_term + oam_cross_term
    if(np.isnan(result)): result = 0.0
    return result

def nlo_two_body_relative_cm(bra, ket, b, regularize, regulator, T0):
    if(T0 != 1): return 0.0
    nr, nrp = ket.Nr, bra.Nr
    lr, lrp = ket.lr, bra.lr
    nc, ncp = ket.Nc, bra.Nc
    lc, lcp = ket.lc, bra.lc
    L, Lp = ket.L, bra.L
    S, Sp = ket.S, bra.S
    J, Jp = ket.J, bra.J
    T, Tp = ket.T, bra.T

    # CM radius, not regularized, in units of the CM oscillator length
    mpir_integral = Constants.pion_mass_fm * b.cm() * Quadrature.integral_mpi_r(ncp, nc, lcp, lc)
    prel = Quadrature.scaled_parameters(nrp, lrp, nr, lr, b.relative(), regularize, regulator)
    mpir_wpi_integral = Quadrature.normalized(Quadrature.integral_mpi_r_wpi_r_ypi_r, prel)

    args = (lrp, lr, lcp, lc, Lp, L, Sp, S, Jp, J)
    A1_rme = -np.sqrt(3) * am.RelativeCMPauliProductRME(*args, 1, 1, 1, 0, 1)
    A2_rme = np.sqrt(3.0/5.0) * am.RelativeCMPauliProductRME(*args, 1, 1, 1, 2, 1)
    A3_rme = np.sqrt(9.0/5.0) * am.RelativeCMPauliProductRME(*args, 1, 1, 2, 2, 1)
    A4_rme = np.sqrt(14.0/5.0) * am.RelativeCMPauliProductRME(*args, 3, 1, 2, 2, 1)
    A5_rme = np.sqrt(28.0/5.0) * am.RelativeCMPauliProductRME(*args, 3, 1, 3, 2, 1)
    T1_rme = am.PauliProductRME(Tp, T, 1)

    api_r = A1_rme + mpir_wpi_integral * (A2_rme + A3_rme + A4_rme + A5_rme)
    relative_cm = mpir_integral * api_r
    relative = 0.0
    if(ncp == nc and lcp == lc):
        A6S1_rme = np.sqrt(10) * am.RelativeCMPauliProductRME(*args, 2, 0, 2, 1, 1)
        S1_rme = am.RelativeCMPauliProductRME(*args, 0, 0, 0, 1, 1)
        zpi_integral = Quadrature.normalized(Quadrature.integral_zpi_ypi_r, prel)
        tpi_integral = Quadrature.normalized(Quadrature.integral_tpi_ypi_r, prel)
        relative = zpi_integral * A6S1_rme + tpi_integral * S1_rme
    result = _lec_prefactor_d18() * T1_rme * (relative_cm + relative)
    if(np.isnan(result)): result = 0.0
    return result

#
# N3LO, two-body isoscalar
#
def n3lo_d9_relative(bra, ket, b, regularize, regulator):
    nr, nrp = ket.n, bra.n
    L, Lp = ket.L, bra.L
    S, Sp = ket.S, bra.S
    J, Jp = ket.J, bra.J
    T, Tp = ket.T, bra.T
    prel = Quadrature.scaled_parameters(nrp, Lp, nr, L, b.relative(), regularize, regulator)
    ypi_integral = Quadrature.normalized(Quadrature.integral_ypi_r, prel)
    wpi_integral = Quadrature.normalized(Quadrature.integral_wpi_r_ypi_r, prel)
    S_rme = am.RelativeSpinSymmetricRME(Lp, L, Sp, S, Jp, J, 0, 1)
    A6S_rme = np.sqrt(10) * am.RelativeSpinSymmetricRME(Lp, L, Sp, S, Jp, J, 2, 1)
    T0_rme = am.PauliProductRME(Tp, T, 0)
    return _lec_prefactor_d9() * T0_rme * (wpi_integral * A6S_rme - ypi_integral * S_rme)

def n3lo_l2_contact_relative(bra, ket, b, regularize, regulator):
    """
    contact term, S-waves only
    """
    if(bra.L != 0 or ket.L != 0 or bra.T != ket.T): return 0.0
    brel = b.relative()
    prel = Quadrature.scaled_parameters(bra.n, bra.L, ket.n, ket.L, brel, regularize, regulator)
    S_rme = am.RelativeSpinSymmetricRME(bra.L, ket.L, bra.S, ket.S, bra.J, ket.J, 0, 1)
    delta_integral = Quadrature.normalized(Quadrature.integral_regularized_delta, prel) / brel**3
    return 2 * Constants.L2_fm * S_rme * delta_integral

def n3lo_two_body_isoscalar_relative(bra, ket, b, regularize, regulator, T0):
    if(T0 != 0): return 0.0
    result = n3lo_d9_relative(bra, ket, b, regularize, regulator) + \
            n3lo_l2_contact_relative(bra, ket, b, regularize, regulator)
    result *= 2 * Constants.nucleon_mass_fm
    if(np.isnan(result)): result = 0.0
    return result

def n3lo_two_body_isoscalar_relative_cm(bra, ket, b, regularize, regulator, T0):
    # TODO: relative-CM form of the d9 and L2 currents; zero until it is derived.
    return 0.0

class M1Operator(ChiralOperator):
    name = "M1"
    terms = {
            (Order.nlo, "relative", 1): (nlo_one_body_relative,),
            (Order.nlo, "relative", 2): (nlo_one_body_relative, nlo_two_body_relative),
            (Order.nlo, "relative_cm", 1): (nlo_one_body_relative_cm,),
            (Order.nlo, "relative_cm", 2): (nlo_one_body_relative_cm, nlo_two_body_relative_cm),
            (Order.n3lo, "relative", 2): (n3lo_two_body_isoscalar_relative,),
            (Order.n3lo, "relative_cm", 2): (n3lo_two_body_isoscalar_relative_cm,),
            }
    def __init__(self, order=Order.lo):
        ChiralOperator.__init__(self, order=order, J0=1, G0=0, T0=1, T0_min=0)

    def lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return 0.0

    def nlo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return self._sum_terms(Order.nlo, bra, ket, b, regularize, regulator, T0, Abody)

    def n2lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return 0.0

    def n3lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return self._sum_terms(Order.n3lo, bra, ket, b, regularize, regulator, T0, Abody)

    def n4lo_matrix_element(self, bra, ket, b, regularize, regulator, T0, Abody):
        return 0.0
