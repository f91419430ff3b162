"""Aligned, padded host arrays with column-major layout, and copying between views."""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np

from neonufft.errors import InputError, InternalError, MemoryAllocError
from neonufft.view import all_equal, is_contiguous, view_size

__all__ = [
    "ALIGNMENT",
    "MAX_VEC_LENGTH",
    "HostArray",
    "aligned_alloc_size",
    "padding_for_vectorization",
    "copy",
]

# Covers all vector register sizes and cache line sizes, in bytes.
ALIGNMENT = 128
# Must be a multiple of ALIGNMENT.
MAX_VEC_LENGTH = 128


def aligned_alloc_size(size: int) -> int:
    """Round a byte count up to the next multiple of the alignment."""
    overhang = size % ALIGNMENT
    return size + (ALIGNMENT - overhang if overhang > 0 else 0)


def padding_for_vectorization(type_size: int, size: int) -> int:
    """Number of extra elements appended so that vectorised loops may overrun."""
    size_in_bytes = type_size * size
    overhang = size_in_bytes % MAX_VEC_LENGTH
    padding_in_bytes = 2 * MAX_VEC_LENGTH - overhang if overhang > 0 else MAX_VEC_LENGTH
    return padding_in_bytes // type_size


def _normalize_shape(shape: Union[int, Sequence[int]]) -> tuple[int, ...]:
    dims = (int(shape),) if isinstance(shape, (int, np.integer)) else tuple(int(s) for s in shape)
    if not dims:
        raise InputError("HostArray: shape must have at least one dimension.")
    if any(extent < 0 for extent in dims):
        raise InputError("HostArray: shape must not be negative.")
    return dims


def _shape_to_strides(shape: tuple[int, ...], itemsize: int) -> tuple[int, ...]:
    if len(shape) == 1:
        return (1,)
    strides = [1, shape[0] + padding_for_vectorization(itemsize, shape[0])]
    for i in range(2, len(shape)):
        strides.append(shape[i - 1] * strides[i - 1])
    return tuple(strides)


def _allocate(shape: tuple[int, ...], dtype: np.dtype) -> np.ndarray:
    if view_size(shape) == 0:
        return np.zeros(shape, dtype=dtype, order="F")

    padded = list(shape)
    padded[0] += padding_for_vectorization(dtype.itemsize, shape[0])
    count = view_size(padded)
    nbytes = count * dtype.itemsize
    try:
        raw = np.zeros(aligned_alloc_size(nbytes) + ALIGNMENT, dtype=np.uint8)
    except MemoryError as exc:
        raise MemoryAllocError() from exc

    offset = (-raw.ctypes.data) % ALIGNMENT
    buffer = raw[offset : offset + nbytes].view(dtype).reshape(padded, order="F")
    return buffer[(slice(0, shape[0]),) + (slice(None),) * (len(shape) - 1)]


class HostArray:
    """An owning, zero-initialised array.

    The layout is column-major: the first dimension varies fastest and is
    padded so that every inner slice starts on an aligned boundary.
    """

    def __init__(self, shape: Union[int, Sequence[int]], dtype=np.complex128) -> None:
        self._dtype = np.dtype(dtype)
        self._allocate(_normalize_shape(shape))

    def _allocate(self, shape: tuple[int, ...]) -> None:
        itemsize = self._dtype.itemsize
        if itemsize > MAX_VEC_LENGTH or (len(shape) > 1 and MAX_VEC_LENGTH % itemsize):
            raise InputError("HostArray: element type does not fit the vector length.")
        self._shape = shape
        self._strides = _shape_to_strides(shape, itemsize)
        self._data = _allocate(shape, self._dtype)

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def ndim(self) -> int:
        return len(self._shape)

    def shape(self) -> tuple[int, ...]:
        """Extent of each dimension."""
        return self._shape

    def strides(self) -> tuple[int, ...]:
        """Distance in elements between neighbours along each dimension."""
        return self._strides

    def size(self) -> int:
        """Number of addressable elements."""
        return view_size(self._shape)

    def is_contiguous(self) -> bool:
        """True if no padding lies between consecutive slices."""
        return is_contiguous(self._shape, self._strides)

    def view(self) -> np.ndarray:
        """A numpy view of the elements, sharing memory with this array."""
        return self._data

    def reset(self, shape: Union[int, Sequence[int]]) -> None:
        """Resize to ``shape`` and set every element to zero."""
        new_shape = _normalize_shape(shape)
        if len(new_shape) == len(self._shape) and all_equal(new_shape, self._shape):
            self.zero()
        else:
            self._allocate(new_shape)

    def zero(self) -> None:
        """Set every element to zero."""
        self._data[...] = 0

    def slice_view(self, outer_index: int) -> np.ndarray:
        """View of the slice at ``outer_index`` along the last dimension."""
        if not 0 <= outer_index < self._shape[-1]:
            raise InternalError("HostArray: slice index out of range.")
        return self._data[..., outer_index]

    def sub_view(self, offset: Sequence[int], shape: Sequence[int]) -> np.ndarray:
        """View of the block of ``shape`` elements starting at ``offset``."""
        offset = tuple(int(o) for o in offset)
        shape = tuple(int(s) for s in shape)
        if len(offset) != self.ndim or len(shape) != self.ndim:
            raise InternalError("HostArray: sub view dimension mismatch.")
        if any(o < 0 or s < 0 or o + s > full for o, s, full in zip(offset, shape, self._shape)):
            raise InternalError("HostArray: sub view out of range.")
        return self._data[tuple(slice(o, o + s) for o, s in zip(offset, shape))]

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value) -> None:
        self._data[index] = value

    def __repr__(self) -> str:
        return f"HostArray(shape={self._shape}, dtype={self._dtype})"


def _as_array(view: Union[HostArray, np.ndarray]) -> np.ndarray:
    return view.view() if isinstance(view, HostArray) else np.asarray(view)


def copy(source: Union[HostArray, np.ndarray], dest: Union[HostArray, np.ndarray]) -> None:
    """Copy all elements of ``source`` into ``dest``; their shapes must match."""
    src = _as_array(source)
    dst = dest.view() if isinstance(dest, HostArray) else dest
    if src.shape != dst.shape:
        raise InternalError("Host view copy: shapes do not match.")
    if src.size == 0:
        return
    dst[...] = src