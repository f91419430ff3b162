"""A padded uniform grid with an in-place, unnormalised multi-dimensional DFT."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from neonufft.errors import InputError
from neonufft.memory import HostArray

__all__ = ["FFTGrid"]

_COMPLEX_TYPES = {
    np.dtype(np.float32): np.dtype(np.complex64),
    np.dtype(np.float64): np.dtype(np.complex128),
    np.dtype(np.complex64): np.dtype(np.complex64),
    np.dtype(np.complex128): np.dtype(np.complex128),
}


class FFTGrid:
    """A uniform grid surrounded by padding, transformable in place.

    ``sign`` selects the exponent sign of the transform: ``-1`` computes
    ``sum x_j exp(-2 pi i j k / n)`` and ``+1`` the same with a positive
    exponent. Neither direction is normalised.
    """

    def __init__(
        self,
        num_threads: int,
        shape: Sequence[int],
        sign: int,
        padding: Optional[Sequence[int]] = None,
        dtype=np.float64,
    ) -> None:
        shape = tuple(int(s) for s in shape)
        if not 1 <= len(shape) <= 3:
            raise InputError("FFTGrid: dimension must be 1, 2 or 3.")
        padding = (0,) * len(shape) if padding is None else tuple(int(p) for p in padding)
        if len(padding) != len(shape) or any(p < 0 for p in padding):
            raise InputError("FFTGrid: invalid padding.")
        if sign not in (-1, 1):
            raise InputError("FFTGrid: sign must be -1 or 1.")
        try:
            complex_dtype = _COMPLEX_TYPES[np.dtype(dtype)]
        except (KeyError, TypeError) as exc:
            raise InputError("FFTGrid: only single and double precision are supported.") from exc

        self.num_threads = num_threads
        self.sign = sign
        self._padding = padding
        padded_shape = tuple(s + 2 * p for s, p in zip(shape, padding))
        self._padded_grid = HostArray(padded_shape, complex_dtype)
        self._grid = self._padded_grid.sub_view(padding, shape)

    def view(self) -> np.ndarray:
        """The inner grid, without padding."""
        return self._grid

    def padded_view(self) -> np.ndarray:
        """The whole grid, padding included."""
        return self._padded_grid.view()

    def shape(self) -> tuple[int, ...]:
        """Extent of the inner grid."""
        return self._grid.shape

    def padding(self) -> tuple[int, ...]:
        """Padding on each side, per dimension."""
        return self._padding

    def transform(self) -> None:
        """Replace the inner grid by its unnormalised DFT."""
        if self._grid.size == 0:
            return
        if self.sign < 0:
            result = np.fft.fftn(self._grid, norm="backward")
        else:
            result = np.fft.ifftn(self._grid, norm="forward")
        self._grid[...] = result