"""Parameters of the exponential-of-semicircle spreading kernel."""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = ["PI", "KernelParameters", "spread_padding"]

PI = 3.14159265358979323846

_MIN_SPREAD = 2
_MAX_SPREAD = 16


def spread_padding(n_spread: int) -> int:
    """Padding, in grid points, needed on each side of a spreading grid."""
    return n_spread // 2 + 2


@dataclass
class KernelParameters:
    """Width and shape parameters of the spreading kernel."""

    es_halfwidth: float = 0.0
    es_c: float = 0.0
    es_beta: float = 0.0
    n_spread: int = 0
    upsampfac: float = 2.0
    approximation: bool = True

    @classmethod
    def from_tolerance(
        cls, tol: float, upsampfac: float, kernel_approximation: bool
    ) -> "KernelParameters":
        """Derive the kernel parameters for a requested tolerance."""
        if upsampfac == 2.0:
            n_spread = math.ceil(-math.log10(tol / 10.0))
        else:
            n_spread = math.ceil(-math.log(tol) / (PI * math.sqrt(1.0 - 1.0 / upsampfac)))
        n_spread = min(_MAX_SPREAD, max(_MIN_SPREAD, n_spread))

        beta_fac = {2: 2.20, 3: 2.26, 4: 2.38}.get(n_spread, 2.30)
        if upsampfac != 2.0:
            gamma = 0.97
            beta_fac = gamma * PI * (1.0 - 1.0 / (2 * upsampfac))

        return cls(
            es_halfwidth=n_spread / 2.0,
            es_c=4.0 / (n_spread * n_spread),
            es_beta=beta_fac * n_spread,
            n_spread=n_spread,
            upsampfac=upsampfac,
            approximation=kernel_approximation,
        )