"""Power actually delivered by a given sample size.

The closed-form sizes use normal quantiles throughout. This module evaluates
the power of a chosen n under the exact sampling distributions (noncentral
t and noncentral F) so the approximation can be audited.
"""

from __future__ import annotations

import math

from scipy.stats import f as f_dist
from scipy.stats import nct, ncf, norm
from scipy.stats import t as t_dist

from pysamplesize.samplesize._correlation import _fisher_z
from pysamplesize.samplesize._families import TestFamily, normalize_test_type
from pysamplesize.samplesize._proportions import _BASELINE_P


# ---------------------------------------------------------------------------
# Per-family power
# ---------------------------------------------------------------------------

def _normal_power(shift: float, alpha: float) -> float:
    """Two-sided power when the test statistic is N(shift, 1) under H1."""
    z_crit = norm.ppf(1.0 - alpha / 2.0)
    return float(norm.sf(z_crit - shift) + norm.cdf(-z_crit - shift))


def _t_power(n: float, d: float, alpha: float, paired: bool) -> float:
    if paired:
        ncp = abs(d) * math.sqrt(n)
        df = n - 1.0
    else:
        ncp = abs(d) * math.sqrt(n / 2.0)
        df = 2.0 * n - 2.0

    t_crit = t_dist.ppf(1.0 - alpha / 2.0, df)
    pwr = float(nct.sf(t_crit, df, ncp) + nct.cdf(-t_crit, df, ncp))

    # scipy's nct can return NaN for large noncentrality
    if math.isnan(pwr):
        pwr = _normal_power(ncp, alpha)
    return pwr


def _anova_power(n: float, f_effect: float, k: int, alpha: float) -> float:
    df1 = k - 1
    df2 = k * (n - 1.0)
    ncp = n * k * f_effect ** 2
    f_crit = f_dist.ppf(1.0 - alpha, df1, df2)
    pwr = float(ncf.sf(f_crit, df1, df2, ncp))

    if math.isnan(pwr):
        pwr = 1.0 if ncp > 50.0 else 0.0
    return pwr


def _proportion_power(n: float, diff: float, alpha: float) -> float:
    """Unpooled-alternative normal approximation (Fleiss) with p1 = 0.5."""
    p1 = _BASELINE_P
    p2 = p1 + diff
    p_bar = (p1 + p2) / 2.0
    z_crit = norm.ppf(1.0 - alpha / 2.0)
    sd_null = math.sqrt(2.0 * p_bar * (1.0 - p_bar))
    sd_alt = math.sqrt(p1 * (1.0 - p1) + p2 * (1.0 - p2))
    return float(norm.cdf((abs(diff) * math.sqrt(n) - z_crit * sd_null) / sd_alt))


def _correlation_power(n: float, r: float, alpha: float) -> float:
    return _normal_power(abs(_fisher_z(r)) * math.sqrt(n - 3.0), alpha)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def achieved_power(
    test_type: str,
    n: int,
    effect_size: float,
    alpha: float = 0.05,
    groups: int = 2,
) -> float:
    """Two-sided power of a design with *n* subjects per group.

    Parameters
    ----------
    test_type : str
        Any name accepted by :func:`calculate_sample_size`; unknown names
        are evaluated as a two-sample t-test.
    n : int
        Per-group size (pairs for the paired design, total for the
        correlation test), e.g. ``SampleSizeResult.sample_size``.
    effect_size : float
        Same meaning as in :class:`SampleSizeParams`.
    alpha : float
        Significance level.
    groups : int
        Number of groups (ANOVA only).

    Returns
    -------
    float
        Power in [0, 1].

    Raises
    ------
    ValueError
        If *alpha* is outside (0, 1), *effect_size* is not finite, or *n* is
        too small for the design.

    Examples
    --------
    >>> round(achieved_power("two-sample t-test", 64, 0.5), 3)
    0.801
    """
    if not (0.0 < alpha < 1.0):
        raise ValueError(f"alpha must be in (0, 1), got {alpha}")
    if not math.isfinite(effect_size):
        raise ValueError(f"effect_size must be finite, got {effect_size}")

    family = normalize_test_type(test_type)

    if family is TestFamily.CORRELATION:
        if n < 4:
            raise ValueError(f"n must be >= 4 for the correlation test, got {n}")
        if not (-1.0 < effect_size < 1.0):
            raise ValueError(f"effect_size must be in (-1, 1) for correlation, got {effect_size}")
        return _correlation_power(float(n), effect_size, alpha)

    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")

    if family is TestFamily.ANOVA:
        if groups < 2:
            raise ValueError(f"groups must be >= 2 for ANOVA, got {groups}")
        return _anova_power(float(n), effect_size, groups, alpha)
    if family is TestFamily.PROPORTION:
        if not (0.0 < _BASELINE_P + effect_size < 1.0):
            raise ValueError(
                f"effect_size must keep p2 = {_BASELINE_P} + effect_size in (0, 1), "
                f"got {effect_size}"
            )
        return _proportion_power(float(n), effect_size, alpha)
    return _t_power(float(n), effect_size, alpha, paired=family is TestFamily.PAIRED)
