"""Z-order (Morton order) comparison of points in the unit cube."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from neonufft.errors import InputError

__all__ = [
    "Point",
    "PartitionGroup",
    "convert_to_key",
    "less_msb",
    "less_0_1",
    "zorder_key",
]

_KEY_TYPES = {
    np.dtype(np.float32): (np.uint32, 32),
    np.dtype(np.float64): (np.uint64, 64),
}


@dataclass
class Point:
    """A non-uniform point together with its original position in the input."""

    coord: tuple[float, ...] = ()
    index: int = 0


@dataclass
class PartitionGroup:
    """A contiguous run of points: ``size`` entries starting at ``begin``."""

    begin: int = 0
    size: int = 0

    @property
    def end(self) -> int:
        return self.begin + self.size


def _key_type(dtype) -> tuple[type, int]:
    try:
        return _KEY_TYPES[np.dtype(dtype)]
    except (KeyError, TypeError) as exc:
        raise InputError("z-order: only float32 and float64 are supported") from exc


def convert_to_key(x: float, dtype=np.float64) -> int:
    """Return the raw bit pattern of ``x`` stored as ``dtype``."""
    uint, _ = _key_type(dtype)
    return int(np.array(x, dtype=dtype).view(uint))


def less_msb(x: int, y: int) -> bool:
    """True if the most significant set bit of ``x`` is below that of ``y``."""
    return x < y and x < (x ^ y)


def _keys(point: Sequence[float], dtype) -> list[int]:
    if not 1 <= len(point) <= 3:
        raise InputError("z-order: points must have 1 to 3 dimensions")
    keys = []
    for value in point:
        if not 0 <= value <= 1:
            raise InputError("z-order: coordinates must lie in [0, 1]")
        keys.append(convert_to_key(value, dtype))
    return keys


def less_0_1(lhs: Sequence[float], rhs: Sequence[float], dtype=np.float64) -> bool:
    """Z-order comparison of two points whose coordinates lie in [0, 1]."""
    if len(lhs) != len(rhs):
        raise InputError("z-order: points differ in dimension")
    left = _keys(lhs, dtype)
    right = _keys(rhs, dtype)

    ms_idx = 0
    for d in range(1, len(left)):
        if less_msb(left[ms_idx] ^ right[ms_idx], left[d] ^ right[d]):
            ms_idx = d
    return left[ms_idx] < right[ms_idx]


def zorder_key(point: Union[Point, Sequence[float]], dtype=np.float64) -> int:
    """Interleaved bit key whose ordering matches :func:`less_0_1`."""
    coords = point.coord if isinstance(point, Point) else point
    keys = _keys(coords, dtype)
    _, width = _key_type(dtype)
    result = 0
    for bit in reversed(range(width)):
        for key in keys:
            result = (result << 1) | ((key >> bit) & 1)
    return result