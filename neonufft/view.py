"""Index arithmetic for column-major, strided multi-dimensional views.

The first dimension is the fastest varying one and its stride is always 1.
"""

from __future__ import annotations

from typing import Sequence

from neonufft.errors import InternalError

__all__ = [
    "view_size",
    "view_index",
    "all_less",
    "all_equal",
    "is_contiguous",
]


def _same_length(left: Sequence[int], right: Sequence[int]) -> None:
    if len(left) != len(right):
        raise InternalError("View: index arrays differ in dimension.")


def view_size(shape: Sequence[int]) -> int:
    """Number of elements addressed by ``shape``; zero for an empty shape."""
    if not shape:
        return 0
    size = 1
    for extent in shape:
        size *= int(extent)
    return size


def view_index(indices: Sequence[int], strides: Sequence[int]) -> int:
    """Linear offset of ``indices`` in a view with the given ``strides``.

    The stride of the first dimension is taken to be 1.
    """
    _same_length(indices, strides)
    if not indices:
        raise InternalError("View: index arrays must have at least one dimension.")
    offset = int(indices[0])
    for index, stride in zip(indices[1:], strides[1:]):
        offset += int(index) * int(stride)
    return offset


def all_less(left: Sequence[int], right: Sequence[int]) -> bool:
    """True if every entry of ``left`` is below the matching entry of ``right``."""
    _same_length(left, right)
    return all(a < b for a, b in zip(left, right))


def all_equal(left: Sequence[int], right: Sequence[int]) -> bool:
    """True if ``left`` and ``right`` agree entry by entry."""
    _same_length(left, right)
    return all(a == b for a, b in zip(left, right))


def is_contiguous(shape: Sequence[int], strides: Sequence[int]) -> bool:
    """True if the strides leave no gap between consecutive slices."""
    _same_length(shape, strides)
    if len(shape) <= 1:
        return True
    return all(
        strides[i + 1] == shape[i] * strides[i] for i in range(len(shape) - 1)
    )