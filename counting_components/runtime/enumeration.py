"""
counting_components/runtime/enumeration.py

Enumeration of coprime (m, n) pairs up to a complexity bound.

For every k in [2, complexity) and every n in [1, k) with gcd(k, n) = 1 the
multicurve with m = k - n copies and n transverse strands is decomposed.
Each k is an independent task run on a process pool; the signed
permutation is only read, and results are merged after the pool joins.
"""

from __future__ import annotations

import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from math import gcd
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from counting_components.core.permutation import SignedPermutation
from counting_components.topology.orbits import count_components_with_orientability
from counting_components.topology.sparse import count_components_sparse


Pair = Tuple[int, int]
Counts = Tuple[int, int]

METHODS: Dict[str, Callable[[SignedPermutation, int, int], Counts]] = {
    "traverse": count_components_with_orientability,
    "sparse": count_components_sparse,
}


def resolve_method(method: str) -> Callable[[SignedPermutation, int, int], Counts]:
    try:
        return METHODS[method]
    except KeyError:
        raise ValueError(f"Unknown method {method!r}, expected one of {sorted(METHODS)}") from None


def coprime_pairs(complexity: int) -> Iterator[Pair]:
    """Yield (m, n) with m, n >= 1, m + n < complexity and gcd(m + n, n) = 1."""
    for k in range(2, complexity):
        for n in range(1, k):
            if gcd(k, n) == 1:
                yield k - n, n


def _count_for_total(perm: SignedPermutation, k: int, method: str) -> List[Tuple[Pair, Counts]]:
    """Worker task: all coprime pairs with m + n = k."""
    count = resolve_method(method)
    out = []
    for n in range(1, k):
        if gcd(k, n) == 1:
            m = k - n
            out.append(((m, n), count(perm, m, n)))
    return out


def _run_tasks(
    perm: SignedPermutation,
    complexity: int,
    workers: Optional[int],
    method: str,
    progress: Optional[Callable[[int, int], None]] = None,
) -> List[Tuple[Pair, Counts]]:
    if complexity < 0:
        raise ValueError(f"complexity must be non-negative, got {complexity}")
    resolve_method(method)

    totals = list(range(2, complexity))
    if workers is None:
        workers = os.cpu_count() or 1
    workers = min(workers, len(totals))

    results: List[Tuple[Pair, Counts]] = []
    if workers <= 1:
        for k in totals:
            results.extend(_count_for_total(perm, k, method))
            if progress is not None:
                progress(k, len(results))
    else:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_count_for_total, perm, k, method) for k in totals]
            # result() re-raises a worker failure and aborts the whole run
            for k, future in zip(totals, futures):
                results.extend(future.result())
                if progress is not None:
                    progress(k, len(results))

    results.sort()
    return results


def count_components_upto_complexity(
    perm: SignedPermutation,
    complexity: int,
    *,
    workers: Optional[int] = None,
    method: str = "traverse",
) -> List[Tuple[Pair, Counts]]:
    """
    Component counts for every coprime (m, n) with m + n < complexity.

    Args:
        perm: Signed permutation, shared read-only by all tasks
        complexity: Exclusive bound on m + n
        workers: Pool size (default: os.cpu_count()); 1 runs in process
        method: "traverse" or "sparse"

    Returns:
        List of ((m, n), (two_sided, one_sided)) sorted by (m, n)
    """
    return _run_tasks(perm, complexity, workers, method)


def two_sided_multicurves_upto_complexity(
    perm: SignedPermutation,
    complexity: int,
    *,
    workers: Optional[int] = None,
    method: str = "traverse",
) -> List[Pair]:
    """(m, n) pairs with m + n < complexity whose components are all two-sided."""
    return [pair for pair, (_, one_sided) in _run_tasks(perm, complexity, workers, method) if one_sided == 0]


@dataclass
class EnumerationResult:
    """Counts for every enumerated pair."""
    complexity: int
    components: Dict[Pair, Counts] = field(default_factory=dict)

    def two_sided_pairs(self) -> List[Pair]:
        return sorted(p for p, (_, one) in self.components.items() if one == 0)

    def connected_pairs(self) -> List[Pair]:
        """Pairs whose multicurve has exactly one component."""
        return sorted(p for p, (two, one) in self.components.items() if two + one == 1)

    def items(self) -> List[Tuple[Pair, Counts]]:
        return sorted(self.components.items())


def enumerate_components(
    perm: SignedPermutation,
    complexity: int,
    *,
    workers: Optional[int] = None,
    method: str = "traverse",
    progress: Optional[Callable[[int, int], None]] = None,
) -> EnumerationResult:
    """
    Run the enumeration and collect it into an EnumerationResult.

    Args:
        progress: Optional callback progress(k, pairs_done) after each k
    """
    results = _run_tasks(perm, complexity, workers, method, progress=progress)
    return EnumerationResult(complexity=complexity, components=dict(results))
