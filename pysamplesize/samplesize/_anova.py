"""Closed-form sample size for one-way ANOVA, plus the F-critical lookup."""

from __future__ import annotations

import numpy as np

# (alpha, df1) -> F critical value. df2 is taken as effectively infinite.
_F_CRITICAL_TABLE = {
    (0.05, 1): 3.84,
    (0.01, 1): 6.63,
}
_F_CRITICAL_FALLBACK = 3.84


def _anova_n(f_effect: float, z_a: float, z_b: float, k: int) -> float:
    """Per-group n for a balanced one-way ANOVA.

    Parameters
    ----------
    f_effect : float
        Cohen's f effect size.
    z_a, z_b : float
        Significance and power quantiles.
    k : int
        Number of groups.

    Returns
    -------
    float
        ``2 (z_a + z_b)^2 / (k f^2)``, unrounded.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(2.0 * np.float64(z_a + z_b) ** 2 / (k * np.float64(f_effect) ** 2))


def _f_critical(alpha: float, df1: int, df2: float) -> float:
    """Tabulated F critical value for display.

    Only ``df1 = 1`` at alpha 0.05 / 0.01 is tabulated (the chi-square(1)
    limits); every other combination reports 3.84. ``df2`` is accepted for
    the call signature but does not change the lookup. The value is never
    used to compute a sample size.
    """
    return _F_CRITICAL_TABLE.get((alpha, df1), _F_CRITICAL_FALLBACK)
