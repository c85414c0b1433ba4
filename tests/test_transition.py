"""
Tests for the strand transition rule.
"""

import numpy as np
import pytest

from counting_components.core.permutation import SignedPermutation
from counting_components.core.strand import Strand, strand_space, strand_to_index, index_to_strand
from counting_components.topology.transition import get_next_major_strand, successor_table, is_bijective


T = Strand.transverse
P = Strand.permutation_direction

PERMS = [
    SignedPermutation([0]),
    SignedPermutation([0], [0]),
    SignedPermutation([0, 1]),
    SignedPermutation([1, 0], [0]),
    SignedPermutation([1, 2, 0], [1]),
    SignedPermutation([2, 0, 3, 1], [0, 3]),
]

MN = [(1, 1), (1, 2), (2, 1), (2, 3), (3, 2), (4, 1), (1, 5), (3, 0)]


class TestTransitionRule:
    def test_identity_orbit_path(self):
        perm = SignedPermutation([0, 1])

        assert get_next_major_strand(perm, 1, 1, T(0)) == (P(0, 0), 0)
        assert get_next_major_strand(perm, 1, 1, P(0, 0)) == (P(1, 0), 0)
        assert get_next_major_strand(perm, 1, 1, P(1, 0)) == (T(0), 0)

    def test_flip_reported(self):
        perm = SignedPermutation([0, 1], [0])

        assert get_next_major_strand(perm, 1, 1, P(0, 0)) == (P(1, 0), 1)
        assert get_next_major_strand(perm, 1, 1, P(1, 0)) == (T(0), 0)

    def test_flip_reverses_copy(self):
        # j=0 flipped, m=3: copy 0 -> 2, then absolute 2 + n=1 -> P(1, 0)
        perm = SignedPermutation([0, 1], [0])
        assert get_next_major_strand(perm, 3, 1, P(0, 0)) == (P(1, 0), 1)

    def test_transverse_to_transverse(self):
        perm = SignedPermutation([0])

        assert get_next_major_strand(perm, 1, 3, T(0)) == (T(1), 0)
        assert get_next_major_strand(perm, 1, 3, T(1)) == (T(2), 0)
        assert get_next_major_strand(perm, 1, 3, T(2)) == (P(0, 0), 0)
        assert get_next_major_strand(perm, 1, 3, P(0, 0)) == (T(0), 0)

    def test_uses_permutation_image(self):
        perm = SignedPermutation([1, 0])
        # P(0, 0) -> image 1, absolute 1, 1 + 1 < 2 fails -> T(0)
        assert get_next_major_strand(perm, 1, 1, P(0, 0)) == (T(0), 0)
        # P(1, 0) -> image 0, absolute 0 + 1 -> P(1, 0)
        assert get_next_major_strand(perm, 1, 1, P(1, 0)) == (P(1, 0), 0)

    def test_non_involution(self):
        # [1, 2, 0] is stored as 0 -> 2, 1 -> 0, 2 -> 1
        perm = SignedPermutation([1, 2, 0], [2])

        assert get_next_major_strand(perm, 1, 2, T(0)) == (P(1, 0), 0)
        assert get_next_major_strand(perm, 1, 2, T(1)) == (P(0, 0), 0)
        assert get_next_major_strand(perm, 1, 2, P(0, 0)) == (T(0), 0)
        assert get_next_major_strand(perm, 1, 2, P(1, 0)) == (P(2, 0), 0)
        assert get_next_major_strand(perm, 1, 2, P(2, 0)) == (T(1), 1)

    def test_m_zero_rejected(self):
        perm = SignedPermutation([0, 1])
        with pytest.raises(ValueError):
            get_next_major_strand(perm, 0, 1, T(0))


@pytest.mark.parametrize("perm", PERMS, ids=repr)
@pytest.mark.parametrize("m,n", MN)
class TestBijectivity:
    def test_successors_cover_space(self, perm, m, n):
        space = strand_space(len(perm), m, n)
        successors = [get_next_major_strand(perm, m, n, s)[0] for s in space]

        assert len(set(successors)) == len(space)
        assert set(successors) == set(space)

    def test_table_matches_rule(self, perm, m, n):
        succ, flips = successor_table(perm, m, n)

        assert succ.shape == (len(perm) * m + n,)
        assert is_bijective(succ)
        for index in range(succ.size):
            nxt, flipped = get_next_major_strand(perm, m, n, index_to_strand(index, m, n))
            assert succ[index] == strand_to_index(nxt, m, n)
            assert flips[index] == flipped


class TestIsBijective:
    def test_collision(self):
        assert not is_bijective(np.array([0, 0, 1]))

    def test_out_of_range(self):
        assert not is_bijective(np.array([1, 2]))

    def test_empty(self):
        assert is_bijective(np.zeros(0, dtype=np.int64))
