"""
counting_components/core/strand.py

Strands of the surgered multicurve.

For a permutation of length L and parameters (m, n) the strand space holds
n transverse strands and L*m permutation-direction strands (m parallel
copies of every permutation strand). Strands are totally ordered:
transverse strands first, then lexicographic on the indices.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List

from counting_components.core.errors import InvalidStrandType


class StrandType(IntEnum):
    """Strand variant; the value orders transverse before permutation strands."""
    TRANSVERSE = 0
    PERMUTATION_DIRECTION = 1


TAGS = {
    "t": StrandType.TRANSVERSE,
    "p": StrandType.PERMUTATION_DIRECTION,
}


@dataclass(frozen=True, order=True, repr=False)
class Strand:
    """
    A single strand.

    Attributes:
        kind: Transverse or permutation direction
        index: Transverse index i, or permutation index j
        copy: Parallel copy k (always 0 for transverse strands)
    """
    kind: StrandType
    index: int
    copy: int = 0

    @classmethod
    def transverse(cls, i: int) -> "Strand":
        return cls(StrandType.TRANSVERSE, i, 0)

    @classmethod
    def permutation_direction(cls, j: int, k: int) -> "Strand":
        return cls(StrandType.PERMUTATION_DIRECTION, j, k)

    @classmethod
    def from_tag(cls, tag: str, m: int, n: int = 0) -> "Strand":
        """
        Build a strand from a type tag.

        Args:
            tag: 't' for Transverse(m), 'p' for PermutationDirection(m, n)
            m, n: Strand indices

        Raises:
            InvalidStrandType: for any other tag
        """
        kind = TAGS.get(tag)
        if kind is None:
            raise InvalidStrandType()
        if kind == StrandType.TRANSVERSE:
            return cls.transverse(m)
        return cls.permutation_direction(m, n)

    @property
    def is_transverse(self) -> bool:
        return self.kind == StrandType.TRANSVERSE

    def __repr__(self) -> str:
        if self.is_transverse:
            return f"Transverse({self.index})"
        return f"PermutationDirection({self.index}, {self.copy})"


def strand_space(length: int, m: int, n: int) -> List[Strand]:
    """All L*m + n strands in sorted order."""
    out = [Strand.transverse(i) for i in range(n)]
    for j in range(length):
        for k in range(m):
            out.append(Strand.permutation_direction(j, k))
    return out


def strand_to_index(strand: Strand, m: int, n: int) -> int:
    """Order-preserving position of a strand in range(L*m + n)."""
    if strand.is_transverse:
        return strand.index
    return n + strand.index * m + strand.copy


def index_to_strand(index: int, m: int, n: int) -> Strand:
    """Inverse of strand_to_index."""
    if index < n:
        return Strand.transverse(index)
    j, k = divmod(index - n, m)
    return Strand.permutation_direction(j, k)
