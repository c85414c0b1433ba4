"""
Runtime module: parallel enumeration over (m, n) pairs.
"""

from counting_components.runtime.enumeration import (
    METHODS,
    coprime_pairs,
    count_components_upto_complexity,
    two_sided_multicurves_upto_complexity,
    EnumerationResult,
    enumerate_components,
)

__all__ = [
    "METHODS",
    "coprime_pairs",
    "count_components_upto_complexity",
    "two_sided_multicurves_upto_complexity",
    "EnumerationResult",
    "enumerate_components",
]
