"""
counting_components/core/permutation.py

Signed permutations: a bijection on {0, ..., L-1} plus a set of indices
whose strands reverse orientation when they pass through the permutation.
"""

from __future__ import annotations

import operator
from typing import FrozenSet, Iterable, Sequence, Tuple

import numpy as np

from counting_components.core.errors import InvalidFlipset, InvalidPermutation


def _as_index(value, error, what: str) -> int:
    """Integer value of `value`, raising `error` for non-integers."""
    try:
        return operator.index(value)
    except TypeError:
        raise error(f"{what}: {value!r} is not an integer") from None


class SignedPermutation:
    """
    Immutable permutation with flip data.

    The input sequence lists, for every position, the strand arriving there:
    permutation[i] = v means v is carried to i. The stored map is therefore
    the inverse of the sequence, images[v] = i. Flip indices refer to the
    stored map: a strand leaving a flipped index is reversed.

    Validation is done once, here; decomposition code trusts the stored
    images and flip set.

    Attributes:
        images: images[i] is the image of index i
        flip_set: Indices whose strands are flipped
    """

    __slots__ = ("_images", "_flip_set")

    def __init__(self, permutation: Sequence[int], flips: Iterable[int] = ()):
        sequence = [_as_index(v, InvalidPermutation, "Invalid permutation") for v in permutation]
        length = len(sequence)

        images = [length] * length
        for index, value in enumerate(sequence):
            if value < 0 or value >= length:
                raise InvalidPermutation(f"Invalid permutation: value {value} out of range for length {length}")
            if images[value] != length:
                raise InvalidPermutation(f"Invalid permutation: value {value} appears twice")
            images[value] = index

        flip_set = set()
        for value in flips:
            value = _as_index(value, InvalidFlipset, "Invalid flip set")
            if value < 0 or value >= length:
                raise InvalidFlipset(f"Invalid flip set: index {value} out of range for length {length}")
            flip_set.add(value)

        object.__setattr__(self, "_images", tuple(images))
        object.__setattr__(self, "_flip_set", frozenset(flip_set))

    def __setattr__(self, name, value):
        raise AttributeError("SignedPermutation is immutable")

    def __getstate__(self):
        return (self._images, self._flip_set)

    def __setstate__(self, state):
        images, flip_set = state
        object.__setattr__(self, "_images", images)
        object.__setattr__(self, "_flip_set", flip_set)

    @property
    def images(self) -> Tuple[int, ...]:
        return self._images

    @property
    def flip_set(self) -> FrozenSet[int]:
        return self._flip_set

    def __len__(self) -> int:
        return len(self._images)

    def __call__(self, index: int) -> Tuple[int, int]:
        """Return (image, flip_bit) for an index."""
        if index < 0 or index >= len(self._images):
            raise InvalidPermutation(f"Invalid permutation: index {index} out of range for length {len(self)}")
        return self._images[index], int(index in self._flip_set)

    def is_flipped(self, index: int) -> bool:
        return index in self._flip_set

    @property
    def sequence(self) -> Tuple[int, ...]:
        """The sequence this permutation was built from (inverse of images)."""
        seq = [0] * len(self._images)
        for index, image in enumerate(self._images):
            seq[image] = index
        return tuple(seq)

    def as_array(self) -> np.ndarray:
        """Images as an int64 array."""
        return np.asarray(self._images, dtype=np.int64)

    def flip_mask(self) -> np.ndarray:
        """Boolean array, True at flipped indices."""
        mask = np.zeros(len(self._images), dtype=bool)
        if self._flip_set:
            mask[list(self._flip_set)] = True
        return mask

    def __eq__(self, other) -> bool:
        if not isinstance(other, SignedPermutation):
            return NotImplemented
        return self._images == other._images and self._flip_set == other._flip_set

    def __hash__(self) -> int:
        return hash((self._images, self._flip_set))

    def __repr__(self) -> str:
        parts = []
        for index, image in enumerate(self._images):
            sign = "-" if index in self._flip_set else ""
            parts.append(f"{index} -> {sign}{image}")
        return "[" + ", ".join(parts) + "]"
