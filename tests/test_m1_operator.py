import numpy as np
import pytest

from Chiral import AngularMomentum, Constants, Quadrature
from Chiral.M1Operator import (
    M1Operator,
    nlo_one_body_relative,
    nlo_two_body_relative,
    nlo_one_body_relative_cm,
    nlo_two_body_relative_cm,
    n3lo_l2_contact_relative,
)
from Chiral.ChiralOperator import create_operator, UnrecognizedOperatorError
from Chiral.Order import Order, ORDERS
from Chiral.OscillatorParameter import OscillatorParameter
from Chiral.RelativeSpace import RelativeStateLSJT, RelativeCMStateLSJT


@pytest.fixture
def op():
    return create_operator("M1")


def test_factory_builds_m1(op):
    assert isinstance(op, M1Operator)
    assert (op.J0, op.G0, op.T0, op.T0_min) == (1, 0, 1, 0)
    assert create_operator("M1") is not op


def test_factory_rejects_unknown_names():
    with pytest.raises(UnrecognizedOperatorError):
        create_operator("E2")
    # still a ValueError for callers that do not know the subclass
    with pytest.raises(ValueError):
        create_operator("")


@pytest.mark.parametrize("order", [Order.lo, Order.n2lo, Order.n4lo])
def test_orders_without_contribution_vanish(op, deuteron, b20, order):
    for T0 in [0, 1]:
        assert op.reduced_matrix_element(order, deuteron, deuteron, b20, regularize=True, T0=T0) == 0.0


def test_deuteron_isoscalar_moment(op, deuteron, b20):
    # the orbital term vanishes for L = 0
    me = op.reduced_matrix_element(Order.nlo, deuteron, deuteron, b20, T0=0)
    assert me == pytest.approx(Constants.isoscalar_nucleon_magnetic_moment, rel=1e-12)


def test_deuteron_moment_does_not_depend_on_basis_or_regulator(op, deuteron):
    ref = op.reduced_matrix_element(Order.nlo, deuteron, deuteron, OscillatorParameter(20.0), T0=0)
    for hw in [10.0, 40.0]:
        for regulator in [0.5, 2.0]:
            me = op.reduced_matrix_element(Order.nlo, deuteron, deuteron, OscillatorParameter(hw), \
                    regularize=True, regulator=regulator, T0=0)
            assert me == pytest.approx(ref)


def test_one_body_is_diagonal_in_radial_and_orbital_labels(deuteron, b20):
    excited = RelativeStateLSJT(1, 0, 1, 1, 0)
    assert nlo_one_body_relative(excited, deuteron, b20, False, 1.0, 0) == 0.0
    d_wave = RelativeStateLSJT(0, 2, 1, 1, 0)
    assert nlo_one_body_relative(d_wave, deuteron, b20, False, 1.0, 0) == 0.0


def test_one_body_vanishes_beyond_isovector(deuteron, b20):
    assert nlo_one_body_relative(deuteron, deuteron, b20, False, 1.0, 2) == 0.0


def test_two_body_nlo_is_purely_isovector(b20):
    bra = RelativeStateLSJT(0, 0, 1, 1, 0)
    ket = RelativeStateLSJT(0, 0, 0, 0, 1)
    assert nlo_two_body_relative(bra, ket, b20, True, 1.0, 0) == 0.0
    assert nlo_two_body_relative(bra, ket, b20, True, 1.0, 2) == 0.0
    assert nlo_two_body_relative(bra, ket, b20, True, 1.0, 1) != 0.0


def test_nan_integrals_are_replaced_by_zero(monkeypatch, b20):
    bra = RelativeStateLSJT(0, 0, 1, 1, 0)
    ket = RelativeStateLSJT(0, 0, 0, 0, 1)
    monkeypatch.setattr(Quadrature, "integral_zpi_ypi_r", lambda p: np.nan)
    assert nlo_two_body_relative(bra, ket, b20, True, 1.0, 1) == 0.0


def test_one_body_only_when_Abody_is_one(op, b20):
    bra = RelativeStateLSJT(0, 0, 1, 1, 0)
    ket = RelativeStateLSJT(0, 0, 0, 0, 1)
    one_body = op.reduced_matrix_element(Order.nlo, bra, ket, b20, regularize=True, T0=1, Abody=1)
    full = op.reduced_matrix_element(Order.nlo, bra, ket, b20, regularize=True, T0=1, Abody=2)
    two_body = nlo_two_body_relative(bra, ket, b20, True, 1.0, 1)
    assert full == pytest.approx(one_body + two_body)


def test_l2_contact_needs_s_waves_and_equal_isospin(deuteron, b20):
    d_wave = RelativeStateLSJT(0, 2, 1, 1, 0)
    assert n3lo_l2_contact_relative(d_wave, d_wave, b20, True, 1.0) == 0.0
    assert n3lo_l2_contact_relative(d_wave, deuteron, b20, True, 1.0) == 0.0
    singlet = RelativeStateLSJT(0, 0, 0, 0, 1)
    assert n3lo_l2_contact_relative(deuteron, singlet, b20, True, 1.0) == 0.0
    assert n3lo_l2_contact_relative(deuteron, deuteron, b20, True, 1.0) != 0.0


def test_n3lo_is_isoscalar_two_body(op, deuteron, b20):
    assert op.reduced_matrix_element(Order.n3lo, deuteron, deuteron, b20, regularize=True, T0=1) == 0.0
    assert op.reduced_matrix_element(Order.n3lo, deuteron, deuteron, b20, regularize=True, T0=0, Abody=1) == 0.0
    me = op.reduced_matrix_element(Order.n3lo, deuteron, deuteron, b20, regularize=True, T0=0)
    assert np.isfinite(me)
    assert me != 0.0


def test_n3lo_with_zero_regulator_stays_finite(op, deuteron, b20):
    me = op.reduced_matrix_element(Order.n3lo, deuteron, deuteron, b20, regularize=True, regulator=0.0, T0=0)
    assert me == 0.0


def test_n3lo_relative_cm_is_not_available(op, b20):
    s = RelativeCMStateLSJT(0, 0, 0, 0, 0, 1, 1, 0)
    assert op.reduced_matrix_element(Order.n3lo, s, s, b20, regularize=True, T0=0) == 0.0


def test_relative_cm_deuteron_matches_relative(op, deuteron, b20):
    s = RelativeCMStateLSJT(0, 0, 0, 0, 0, 1, 1, 0)
    rel = op.reduced_matrix_element(Order.nlo, deuteron, deuteron, b20, T0=0)
    cm = op.reduced_matrix_element(Order.nlo, s, s, b20, T0=0)
    assert cm == pytest.approx(rel)


def test_full_sums_all_orders(op, deuteron, b20):
    kwargs = dict(regularize=True, regulator=1.0, T0=0)
    full = op.reduced_matrix_element(Order.full, deuteron, deuteron, b20, **kwargs)
    total = sum([op.reduced_matrix_element(o, deuteron, deuteron, b20, **kwargs) for _, o in ORDERS])
    assert full == pytest.approx(total)


def test_repeated_evaluation_is_identical(op, b20):
    bra = RelativeStateLSJT(1, 0, 1, 1, 0)
    ket = RelativeStateLSJT(0, 2, 1, 1, 0)
    first = op.reduced_matrix_element(Order.n3lo, bra, ket, b20, regularize=True, T0=0)
    second = op.reduced_matrix_element(Order.n3lo, bra, ket, b20, regularize=True, T0=0)
    assert first == second


def test_relative_cm_one_body_cross_terms(b20):
    # isovector orbital current between 3S1 (T=0) and lr=1, lc=1 (T=1)
    ket = RelativeCMStateLSJT(0, 0, 0, 0, 0, 1, 1, 0)
    bra = RelativeCMStateLSJT(0, 1, 0, 1, 1, 1, 1, 1)
    assert nlo_one_body_relative_cm(bra, ket, b20, False, 1.0, 1) != 0.0
    assert nlo_one_body_relative_cm(bra, ket, b20, False, 1.0, 0) == 0.0
    assert nlo_one_body_relative_cm(bra, ket, b20, False, 1.0, 2) == 0.0


def test_relative_cm_one_body_obeys_rank_one_triangle(b20):
    ket = RelativeCMStateLSJT(0, 0, 0, 1, 1, 1, 0, 0)
    bra = RelativeCMStateLSJT(0, 1, 0, 2, 3, 1, 4, 1)
    assert nlo_one_body_relative_cm(bra, ket, b20, False, 1.0, 1) == 0.0


@pytest.fixture
def cm_pair():
    # 1S0 (T=1) -> lr=1, lc=1, L=1, S=0, J=1, T=0 through the A1 channel
    ket = RelativeCMStateLSJT(0, 0, 0, 0, 0, 0, 0, 1)
    bra = RelativeCMStateLSJT(0, 1, 0, 1, 1, 0, 1, 0)
    return bra, ket


def test_relative_cm_two_body_is_purely_isovector(cm_pair, b20):
    bra, ket = cm_pair
    assert nlo_two_body_relative_cm(bra, ket, b20, True, 1.0, 1) != 0.0
    assert nlo_two_body_relative_cm(bra, ket, b20, True, 1.0, 0) == 0.0
    assert nlo_two_body_relative_cm(bra, ket, b20, True, 1.0, 2) == 0.0


def test_relative_cm_two_body_reduces_to_relative_for_cm_s_waves(b20):
    bra_cm = RelativeCMStateLSJT(0, 0, 0, 0, 0, 1, 1, 0)
    ket_cm = RelativeCMStateLSJT(0, 0, 0, 0, 0, 0, 0, 1)
    bra = RelativeStateLSJT(0, 0, 1, 1, 0)
    ket = RelativeStateLSJT(0, 0, 0, 0, 1)
    rel = nlo_two_body_relative(bra, ket, b20, True, 1.0, 1)
    assert rel != 0.0
    assert nlo_two_body_relative_cm(bra_cm, ket_cm, b20, True, 1.0, 1) == pytest.approx(rel)


def test_relative_cm_nan_is_replaced_by_zero(monkeypatch, cm_pair, b20):
    bra, ket = cm_pair
    monkeypatch.setattr(Quadrature, "integral_mpi_r_wpi_r_ypi_r", lambda p: np.nan)
    assert nlo_two_body_relative_cm(bra, ket, b20, True, 1.0, 1) == 0.0

    ket = RelativeCMStateLSJT(0, 0, 0, 0, 0, 1, 1, 0)
    bra = RelativeCMStateLSJT(0, 1, 0, 1, 1, 1, 1, 1)
    monkeypatch.setattr(AngularMomentum, "RelativeCMGradientRadiusRME", lambda *args: np.nan)
    assert nlo_one_body_relative_cm(bra, ket, b20, False, 1.0, 1) == 0.0
