"""
Tests for strands and the strand space.
"""

import pytest

from counting_components.core.errors import InvalidStrandType
from counting_components.core.strand import (
    Strand,
    StrandType,
    strand_space,
    strand_to_index,
    index_to_strand,
)


class TestStrand:
    def test_from_tag(self):
        assert Strand.from_tag("t", 3) == Strand.transverse(3)
        assert Strand.from_tag("p", 1, 2) == Strand.permutation_direction(1, 2)

    def test_invalid_tag(self):
        with pytest.raises(InvalidStrandType):
            Strand.from_tag("x", 0)

    def test_transverse_ignores_second_index(self):
        assert Strand.from_tag("t", 1, 5) == Strand.transverse(1)

    def test_repr(self):
        assert repr(Strand.transverse(0)) == "Transverse(0)"
        assert repr(Strand.permutation_direction(1, 0)) == "PermutationDirection(1, 0)"

    def test_order(self):
        assert Strand.transverse(7) < Strand.permutation_direction(0, 0)
        assert Strand.transverse(0) < Strand.transverse(1)
        assert Strand.permutation_direction(0, 5) < Strand.permutation_direction(1, 0)
        assert Strand.permutation_direction(1, 0) < Strand.permutation_direction(1, 1)

    def test_kind(self):
        assert Strand.transverse(0).kind == StrandType.TRANSVERSE
        assert Strand.transverse(0).is_transverse
        assert not Strand.permutation_direction(0, 0).is_transverse

    def test_hashable(self):
        assert len({Strand.transverse(0), Strand.transverse(0), Strand.permutation_direction(0, 0)}) == 2


class TestStrandSpace:
    def test_size_and_order(self):
        space = strand_space(3, 2, 4)

        assert len(space) == 3 * 2 + 4
        assert space == sorted(space)
        assert len(set(space)) == len(space)
        assert space[0] == Strand.transverse(0)
        assert space[-1] == Strand.permutation_direction(2, 1)

    def test_no_transverse(self):
        space = strand_space(2, 1, 0)
        assert space == [Strand.permutation_direction(0, 0), Strand.permutation_direction(1, 0)]

    def test_index_matches_position(self):
        m, n = 3, 2
        space = strand_space(2, m, n)

        for pos, strand in enumerate(space):
            assert strand_to_index(strand, m, n) == pos
            assert index_to_strand(pos, m, n) == strand
