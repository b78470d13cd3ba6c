"""Sample size dispatcher and dropout adjustment."""

from __future__ import annotations

import math
import warnings

from pysamplesize.samplesize._anova import _anova_n, _f_critical
from pysamplesize.samplesize._common import (
    DROPOUT_FACTOR,
    SampleSizeParams,
    SampleSizeResult,
    _ceil_size,
    _check_params,
)
from pysamplesize.samplesize._correlation import _correlation_n
from pysamplesize.samplesize._families import TestFamily, is_paired_design, normalize_test_type
from pysamplesize.samplesize._means import _paired_n, _two_sample_n
from pysamplesize.samplesize._proportions import _proportion_n
from pysamplesize.samplesize._zscore import z_alpha, z_beta


# ---------------------------------------------------------------------------
# Internal stages
# ---------------------------------------------------------------------------

def _raw_sample_size(
    family: TestFamily,
    effect_size: float,
    z_a: float,
    z_b: float,
    groups: int,
) -> float:
    """Unrounded per-group n for the given family."""
    if family is TestFamily.PAIRED:
        return _paired_n(effect_size, z_a, z_b)
    if family is TestFamily.ANOVA:
        return _anova_n(effect_size, z_a, z_b, groups)
    if family is TestFamily.PROPORTION:
        return _proportion_n(effect_size, z_a, z_b)
    if family is TestFamily.CORRELATION:
        return _correlation_n(effect_size, z_a, z_b)
    # TWO_SAMPLE and DEFAULT
    return _two_sample_n(effect_size, z_a, z_b)


def _adjust(
    sample_size: int | float,
    groups: int,
    paired: bool,
) -> tuple[int | float, int | float]:
    """Apply the group multiplier and dropout inflation.

    Returns ``(total_sample_size, adjusted_sample_size)``.
    """
    total = sample_size if paired else sample_size * groups
    adjusted = _ceil_size(total * DROPOUT_FACTOR)
    return total, adjusted


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def calculate_sample_size(params: SampleSizeParams) -> SampleSizeResult:
    """Minimum sample size for a two-sided test at the given alpha and power.

    Parameters
    ----------
    params : SampleSizeParams
        Test type, effect size, power, alpha and group count.

    Returns
    -------
    SampleSizeResult
        Per-group, total and dropout-adjusted sizes together with the
        formula and assumptions of the selected test family.

    Raises
    ------
    ValueError
        If *params* is structurally invalid (see ``_check_params``).
        Numerically degenerate inputs do not raise; they produce ``inf`` or
        ``nan`` sizes and a ``RuntimeWarning``.

    Examples
    --------
    >>> r = calculate_sample_size(SampleSizeParams("paired t-test", 0.5, 0.80, 0.05))
    >>> r.sample_size, r.total_sample_size, r.adjusted_sample_size
    (32, 32, 39)
    """
    _check_params(params)

    family = normalize_test_type(params.test_type)
    z_a = z_alpha(params.alpha)
    z_b = z_beta(params.power)

    raw = _raw_sample_size(family, params.effect_size, z_a, z_b, params.groups)
    sample_size = _ceil_size(raw)

    f_crit = None
    if family is TestFamily.ANOVA:
        df1 = params.groups - 1
        df2 = params.groups * (sample_size - 1)
        f_crit = _f_critical(params.alpha, df1, df2)

    total, adjusted = _adjust(sample_size, params.groups, is_paired_design(params.test_type))

    if not math.isfinite(sample_size):
        warnings.warn(
            f"Sample size is not finite ({sample_size}) for {family.label} with "
            f"effect_size={params.effect_size}, power={params.power}, alpha={params.alpha}.",
            RuntimeWarning,
            stacklevel=2,
        )

    return SampleSizeResult(
        sample_size=sample_size,
        total_sample_size=total,
        adjusted_sample_size=adjusted,
        formula=family.formula,
        assumptions=family.assumptions,
        test_family=family,
        z_alpha=z_a,
        z_beta=z_b,
        f_critical=f_crit,
    )
