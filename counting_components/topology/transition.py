"""
counting_components/topology/transition.py

The strand transition rule.

Following a strand of the surgered multicurve leads to exactly one next
strand. A permutation strand (j, k) is carried to copy k of strand
permutation[j] (copy m-k-1 if j is flipped) and then shifted n places; if the
shift runs past the last permutation copy it exits into a transverse strand.
A transverse strand i is shifted L*m places, re-entering the permutation
copies when it runs past the last transverse strand.

For fixed (perm, m, n) the rule is a bijection on the strand space, so the
space splits into disjoint cycles (orbits), one per curve component.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from counting_components.core.permutation import SignedPermutation
from counting_components.core.strand import Strand, StrandType


def check_parameters(m: int, n: int) -> None:
    """Reject (m, n) outside the domain of the transition rule."""
    if m < 1:
        raise ValueError(f"m must be at least 1, got {m}")
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")


def step(perm: SignedPermutation, m: int, n: int, strand: Strand) -> Tuple[Strand, int]:
    """Transition rule without parameter checks; m >= 1 is assumed."""
    images = perm.images
    size = len(images) * m

    if strand.kind == StrandType.PERMUTATION_DIRECTION:
        copy_index = strand.copy
        flipped = 0
        if strand.index in perm.flip_set:
            copy_index = m - copy_index - 1
            flipped = 1

        absolute = m * images[strand.index] + copy_index
        if absolute + n < size:
            j, k = divmod(absolute + n, m)
            return Strand.permutation_direction(j, k), flipped
        return Strand.transverse(size - absolute - 1), flipped

    # Transverse strands never flip
    if strand.index + size < n:
        return Strand.transverse(strand.index + size), 0
    j, k = divmod(n - strand.index - 1, m)
    return Strand.permutation_direction(j, k), 0


def get_next_major_strand(
    perm: SignedPermutation,
    m: int,
    n: int,
    strand: Strand
) -> Tuple[Strand, int]:
    """
    Return the strand following `strand` and whether the step flipped.

    Args:
        perm: Signed permutation
        m: Number of parallel copies of the permutation (m >= 1)
        n: Number of transverse strands
        strand: Current strand, a member of the (perm, m, n) strand space

    Returns:
        (next_strand, flip_bit) with flip_bit in {0, 1}

    Raises:
        ValueError: if m < 1 or n < 0
    """
    check_parameters(m, n)
    return step(perm, m, n, strand)


def successor_table(perm: SignedPermutation, m: int, n: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Vectorized transition rule over strand indices.

    Strand indices follow strand_to_index: transverse i -> i,
    PermutationDirection(j, k) -> n + j*m + k.

    Returns:
        (succ, flips): succ[s] is the index of the strand after s and
        flips[s] its flip bit, both int64 arrays of length L*m + n
    """
    check_parameters(m, n)
    size = len(perm) * m

    # Permutation region
    p = np.arange(size, dtype=np.int64)
    j = p // m
    k = p % m
    flipped = perm.flip_mask()[j]
    k_out = np.where(flipped, m - k - 1, k)
    absolute = m * perm.as_array()[j] + k_out
    inside = absolute + n < size
    succ_p = np.where(inside, n + absolute + n, size - absolute - 1)

    # Transverse region
    i = np.arange(n, dtype=np.int64)
    stay = i + size < n
    succ_t = np.where(stay, i + size, n + (n - i - 1))

    succ = np.concatenate([succ_t, succ_p]).astype(np.int64)
    flips = np.concatenate([np.zeros(n, dtype=np.int64), flipped.astype(np.int64)])
    return succ, flips


def is_bijective(succ: np.ndarray) -> bool:
    """True if every index appears exactly once as a successor."""
    if succ.size == 0:
        return True
    if succ.min() < 0 or succ.max() >= succ.size:
        return False
    return bool(np.all(np.bincount(succ, minlength=succ.size) == 1))
