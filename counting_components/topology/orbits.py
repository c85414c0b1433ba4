"""
counting_components/topology/orbits.py

Orbit decomposition of the strand space.

Each orbit of the transition rule is one connected component of the
surgered multicurve. Its parity (number of flipped steps mod 2) decides
whether the component is two-sided (even) or one-sided (odd).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from counting_components.core.permutation import SignedPermutation
from counting_components.core.strand import Strand, strand_space
from counting_components.topology.transition import check_parameters, step


@dataclass(frozen=True)
class Orbit:
    """
    A closed cycle of strands.

    Attributes:
        origin: Strand the traversal started from
        length: Number of distinct strands in the cycle
        parity: Flip count around the cycle mod 2
    """
    origin: Strand
    length: int
    parity: int

    @property
    def two_sided(self) -> bool:
        return self.parity == 0


def has_one_component(perm: SignedPermutation, m: int, n: int) -> Tuple[bool, int]:
    """
    Check whether the orbit of Transverse(0) covers the whole strand space.

    Args:
        perm: Signed permutation
        m: Number of parallel copies (m >= 1)
        n: Number of transverse strands (n >= 1, Transverse(0) must exist)

    Returns:
        (single_component, parity) where parity is the flip parity of the
        orbit through Transverse(0)

    Raises:
        ValueError: if m < 1 or n < 1
    """
    check_parameters(m, n)
    if n < 1:
        raise ValueError(f"has_one_component needs at least one transverse strand, got n={n}")

    expected_length = m * len(perm) + n
    start = Strand.transverse(0)

    strand, parity = step(perm, m, n, start)
    length = 1
    while strand != start:
        if length >= expected_length:
            raise RuntimeError(f"orbit of {start} did not close within {expected_length} steps")
        strand, flipped = step(perm, m, n, strand)
        parity ^= flipped
        length += 1

    return length == expected_length, parity


def orbit_strands(perm: SignedPermutation, m: int, n: int, origin: Strand) -> List[Strand]:
    """Strands of the orbit through `origin`, in traversal order."""
    check_parameters(m, n)
    out = [origin]
    strand, _ = step(perm, m, n, origin)
    while strand != origin:
        out.append(strand)
        strand, _ = step(perm, m, n, strand)
    return out


def orbit_decomposition(
    perm: SignedPermutation,
    m: int,
    n: int,
    origins: Optional[Iterable[Strand]] = None
) -> List[Orbit]:
    """
    Partition the strand space into orbits.

    Origins are taken in order, skipping strands already visited; by default
    this is the sorted strand space, so each orbit starts from the minimum
    strand not yet covered.

    Args:
        perm: Signed permutation
        m: Number of parallel copies (m >= 1)
        n: Number of transverse strands
        origins: Optional order in which to try origins; must cover the
            whole strand space

    Returns:
        List of Orbit, in discovery order
    """
    check_parameters(m, n)
    space = strand_space(len(perm), m, n)
    remaining = set(space)
    if origins is None:
        origins = space

    orbits: List[Orbit] = []
    for origin in origins:
        if origin not in remaining:
            continue
        remaining.discard(origin)

        strand, parity = step(perm, m, n, origin)
        length = 1
        while strand != origin:
            # A strand seen twice means the rule is not a bijection
            if strand not in remaining:
                raise RuntimeError(f"{strand} reached twice while walking from {origin}")
            remaining.discard(strand)
            strand, flipped = step(perm, m, n, strand)
            parity ^= flipped
            length += 1

        orbits.append(Orbit(origin=origin, length=length, parity=parity))

    if remaining:
        raise ValueError(f"origins left {len(remaining)} strands unvisited, starting with {min(remaining)}")
    return orbits


def count_components_with_orientability(
    perm: SignedPermutation,
    m: int,
    n: int,
    origins: Optional[Iterable[Strand]] = None
) -> Tuple[int, int]:
    """
    Count two-sided and one-sided components.

    Returns:
        (two_sided, one_sided)
    """
    orbits = orbit_decomposition(perm, m, n, origins=origins)
    two_sided = sum(1 for o in orbits if o.two_sided)
    return two_sided, len(orbits) - two_sided
