"""
counting_components/core/errors.py

Errors raised while building signed permutations and strands.
"""

from __future__ import annotations


class PermutationError(ValueError):
    """Base class for invalid permutation, flip set or strand input."""

    default_message = "Invalid permutation data"

    def __init__(self, message: str = None):
        super().__init__(message or self.default_message)


class InvalidPermutation(PermutationError):
    """Not a valid permutation on {0, 1, ..., L-1}, or an index out of range."""

    default_message = "Invalid permutation"


class InvalidFlipset(PermutationError):
    """Flip set is not a subset of {0, 1, ..., L-1}."""

    default_message = "Invalid flip set"


class InvalidStrandType(PermutationError):
    """Strand tag must be 't' (transverse) or 'p' (permutation direction)."""

    default_message = "Invalid strand type: only 't' and 'p' allowed"
