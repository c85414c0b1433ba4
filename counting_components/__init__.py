"""
Counting Components: surgery of signed permutations with transverse strands

Counts the connected components of the multicurve obtained by surgering m
parallel copies of a signed permutation with n transverse strands, and
classifies each component as two-sided or one-sided.

Key components:
- core: Signed permutations, strands and errors
- topology: Transition rule, orbit decomposition, sparse and graph views
- runtime: Parallel enumeration over coprime (m, n) pairs
"""

__version__ = "1.0.0"
__author__ = "Counting Components Team"

from counting_components.core.errors import (
    PermutationError,
    InvalidPermutation,
    InvalidFlipset,
    InvalidStrandType,
)
from counting_components.core.permutation import SignedPermutation
from counting_components.core.strand import Strand, StrandType
from counting_components.topology.transition import get_next_major_strand
from counting_components.topology.orbits import (
    Orbit,
    has_one_component,
    orbit_decomposition,
    count_components_with_orientability,
)
from counting_components.topology.sparse import count_components_sparse
from counting_components.runtime.enumeration import (
    count_components_upto_complexity,
    two_sided_multicurves_upto_complexity,
    EnumerationResult,
    enumerate_components,
)

__all__ = [
    # Errors
    "PermutationError",
    "InvalidPermutation",
    "InvalidFlipset",
    "InvalidStrandType",
    # Data
    "SignedPermutation",
    "Strand",
    "StrandType",
    # Decomposition
    "get_next_major_strand",
    "Orbit",
    "has_one_component",
    "orbit_decomposition",
    "count_components_with_orientability",
    "count_components_sparse",
    # Enumeration
    "count_components_upto_complexity",
    "two_sided_multicurves_upto_complexity",
    "EnumerationResult",
    "enumerate_components",
]
