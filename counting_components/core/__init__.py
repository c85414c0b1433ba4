"""
Core data: signed permutations, strands and errors.
"""

from counting_components.core.errors import (
    PermutationError,
    InvalidPermutation,
    InvalidFlipset,
    InvalidStrandType,
)
from counting_components.core.permutation import SignedPermutation
from counting_components.core.strand import (
    Strand,
    StrandType,
    strand_space,
    strand_to_index,
    index_to_strand,
)

__all__ = [
    "PermutationError",
    "InvalidPermutation",
    "InvalidFlipset",
    "InvalidStrandType",
    "SignedPermutation",
    "Strand",
    "StrandType",
    "strand_space",
    "strand_to_index",
    "index_to_strand",
]
