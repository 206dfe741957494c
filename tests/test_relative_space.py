import pytest

from Chiral.RelativeSpace import (
    RelativeStateLSJT,
    RelativeCMStateLSJT,
    RelativeSpaceLSJT,
    RelativeSectorsLSJT,
)


def test_state_labels():
    s = RelativeStateLSJT(2, 1, 1, 2, 1)
    assert s.N == 5
    assert s.g == 1
    assert s.representation == "relative"
    cm = RelativeCMStateLSJT(1, 0, 0, 1, 1, 0, 1, 1)
    assert cm.N == 3
    assert cm.g == 1
    assert cm.representation == "relative_cm"


def test_smallest_space_has_a_single_1S0_state():
    space = RelativeSpaceLSJT(Nmax=0, Jmax=0)
    assert space.get_number_subspaces() == 1
    assert space.get_subspace(0).get_labels() == (0, 0, 0, 1, 0)
    assert space.get_number_states() == 1


def test_space_is_antisymmetric_and_truncated():
    space = RelativeSpaceLSJT(Nmax=4, Jmax=2)
    for subspace in space.subspaces:
        L, S, J, T, g = subspace.get_labels()
        assert (L + S + T) % 2 == 1
        assert abs(L - S) <= J <= min(L + S, 2)
        for state in subspace.states:
            assert state.N <= 4
            assert subspace.get_state_from_N(state.N) == state
    # 3S1 channel: N = 0, 2, 4
    assert space.get_subspace_from_LSJT(0, 1, 1, 0).get_number_states() == 3
    with pytest.raises(KeyError):
        space.get_index(0, 0, 0, 0)


def test_sectors_follow_selection_rules():
    space = RelativeSpaceLSJT(Nmax=2, Jmax=2)
    sectors = RelativeSectorsLSJT(space, J0=1, G0=0, T0=1)
    assert sectors.get_number_sectors() > 0
    for ibra, iket in sectors.sectors:
        assert ibra <= iket
        bra, ket = space.get_subspace(ibra), space.get_subspace(iket)
        assert abs(bra.J - ket.J) <= 1 <= bra.J + ket.J
        assert abs(bra.T - ket.T) <= 1 <= bra.T + ket.T
        assert bra.g == ket.g


def test_upper_triangular_entries_for_diagonal_sector():
    space = RelativeSpaceLSJT(Nmax=4, Jmax=0)
    sectors = RelativeSectorsLSJT(space, J0=0, G0=0, T0=0)
    # 1S0 (3 states) and 3P0 (2 states), both diagonal only
    assert sectors.get_number_sectors() == 2
    assert sectors.upper_triangular_entries() == 3 * 4 // 2 + 2 * 3 // 2
