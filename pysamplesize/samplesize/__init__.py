"""
Closed-form sample size calculations for study planning.

Given a test family, an effect size, alpha and power, answers "how many
subjects per group do we need?", then applies the group multiplier and a
fixed 20% dropout allowance.

Supported families: two-sample t-test, paired t-test, one-way ANOVA,
proportion (chi-square) test, correlation test. Unknown test types fall back
to the two-sample t-test.
"""

from pysamplesize.samplesize._common import DROPOUT_FACTOR, SampleSizeParams, SampleSizeResult
from pysamplesize.samplesize._families import (
    TEST_TYPES,
    TestFamily,
    is_paired_design,
    normalize_test_type,
)
from pysamplesize.samplesize._zscore import (
    ALPHA_Z_TABLE,
    POWER_Z_TABLE,
    inverse_normal_cdf,
    z_alpha,
    z_beta,
)
from pysamplesize.samplesize._calculate import calculate_sample_size
from pysamplesize.samplesize._achieved import achieved_power

__all__ = [
    "SampleSizeParams",
    "SampleSizeResult",
    "DROPOUT_FACTOR",
    "TestFamily",
    "TEST_TYPES",
    "normalize_test_type",
    "is_paired_design",
    "ALPHA_Z_TABLE",
    "POWER_Z_TABLE",
    "inverse_normal_cdf",
    "z_alpha",
    "z_beta",
    "calculate_sample_size",
    "achieved_power",
]
