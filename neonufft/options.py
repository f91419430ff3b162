"""Enumerations and the options that configure a transform plan."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

import numpy as np

__all__ = ["INT_DTYPE", "ModeOrder", "KernelType", "Options"]

# Integer type used for sizes, indices and strides.
INT_DTYPE = np.dtype(np.int64)


class ModeOrder(IntEnum):
    """Ordering of Fourier modes in uniform grids."""

    FFT = 0
    CMCL = 1


class KernelType(IntEnum):
    """Spreading kernel family."""

    ES = 0


@dataclass
class Options:
    """Tuning parameters of a plan."""

    tol: float = 0.001
    upsampfac: float = 2.0
    recenter_threshold: float = 0.1
    num_threads: int = 0
    sort_input: bool = True
    sort_output: bool = True
    kernel_approximation: bool = False
    order: ModeOrder = ModeOrder.CMCL
    kernel_type: KernelType = KernelType.ES