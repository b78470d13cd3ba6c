"""Closed-form sample sizes for t-tests (two-sample, paired).

Normal approximation: the noncentral t is replaced by the standard normal,
so the result slightly undershoots the exact requirement for small n.
"""

from __future__ import annotations

import numpy as np


def _two_sample_n(d: float, z_a: float, z_b: float) -> float:
    """Per-group n for a two-sample t-test with Cohen's d.

    ``n = 2 (z_a + z_b)^2 / d^2``. ``d = 0`` gives ``inf``.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(2.0 * np.float64(z_a + z_b) ** 2 / np.float64(d) ** 2)


def _paired_n(d: float, z_a: float, z_b: float) -> float:
    """Number of pairs for a paired t-test, d being the standardized mean difference."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(z_a + z_b) ** 2 / np.float64(d) ** 2)
