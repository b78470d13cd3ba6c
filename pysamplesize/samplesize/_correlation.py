"""Closed-form sample size for testing a Pearson correlation against zero."""

from __future__ import annotations

import numpy as np


def _fisher_z(r: float) -> float:
    """Fisher's z-transformation ``0.5 ln((1 + r) / (1 - r))``.

    ``r = 1`` gives ``inf``, ``r = -1`` gives ``-inf``, ``|r| > 1`` gives ``nan``.
    """
    r = np.float64(r)
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(0.5 * np.log((1.0 + r) / (1.0 - r)))


def _correlation_n(r: float, z_a: float, z_b: float) -> float:
    """Total n: ``(z_a + z_b)^2 / z_r^2 + 3``."""
    z_r = np.float64(_fisher_z(r))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(z_a + z_b) ** 2 / z_r ** 2 + 3.0)
