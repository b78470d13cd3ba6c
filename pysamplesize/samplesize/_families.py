"""Test families: alias normalization, display formulas and assumptions."""

from __future__ import annotations

from enum import Enum


class TestFamily(Enum):
    """Hypothesis-test families with a closed-form sample size formula.

    ``DEFAULT`` is the fallback for unrecognized test types; it uses the
    two-sample t-test formula with a shorter assumption list.
    """

    __test__ = False  # not a pytest test class

    TWO_SAMPLE = "two-sample t-test"
    PAIRED = "paired t-test"
    ANOVA = "one-way anova"
    PROPORTION = "proportion test"
    CORRELATION = "correlation test"
    DEFAULT = "default"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def formula(self) -> str:
        return _FORMULAS[self]

    @property
    def assumptions(self) -> tuple[str, ...]:
        return _ASSUMPTIONS[self]


# Lower-cased test type -> family. Matching is exact after lower-casing.
_ALIASES = {
    "two-sample t-test": TestFamily.TWO_SAMPLE,
    "independent t-test": TestFamily.TWO_SAMPLE,
    "paired t-test": TestFamily.PAIRED,
    "dependent t-test": TestFamily.PAIRED,
    "one-way anova": TestFamily.ANOVA,
    "proportion test": TestFamily.PROPORTION,
    "chi-square test": TestFamily.PROPORTION,
    "correlation test": TestFamily.CORRELATION,
}

_LABELS = {
    TestFamily.TWO_SAMPLE: "Two-sample t-test",
    TestFamily.PAIRED: "Paired t-test",
    TestFamily.ANOVA: "One-way ANOVA",
    TestFamily.PROPORTION: "Proportion test",
    TestFamily.CORRELATION: "Correlation test",
    TestFamily.DEFAULT: "Two-sample t-test (default)",
}

_TWO_SAMPLE_FORMULA = "n = 2 × (z_α/2 + z_β)² / δ²"

_FORMULAS = {
    TestFamily.TWO_SAMPLE: _TWO_SAMPLE_FORMULA,
    TestFamily.PAIRED: "n = (z_α/2 + z_β)² / δ²",
    TestFamily.ANOVA: "n = λ / (k × f²) where λ is noncentrality parameter",
    TestFamily.PROPORTION: "n = 2 × p̄(1-p̄) × (z_α/2 + z_β)² / (p₂-p₁)²",
    TestFamily.CORRELATION: "n = (z_α/2 + z_β)² / z_r² + 3",
    TestFamily.DEFAULT: _TWO_SAMPLE_FORMULA,
}

_ASSUMPTIONS = {
    TestFamily.TWO_SAMPLE: (
        "Normal distribution",
        "Equal variances",
        "Independent observations",
        "Continuous outcome variable",
    ),
    TestFamily.PAIRED: (
        "Normal distribution of differences",
        "Paired observations",
        "Continuous outcome variable",
    ),
    TestFamily.ANOVA: (
        "Normal distribution within groups",
        "Equal variances (homoscedasticity)",
        "Independent observations",
        "Continuous outcome variable",
    ),
    TestFamily.PROPORTION: (
        "Binary outcome variable",
        "Independent observations",
        "Adequate expected frequencies (≥5 per cell)",
    ),
    TestFamily.CORRELATION: (
        "Bivariate normal distribution",
        "Linear relationship",
        "Independent observations",
        "Continuous variables",
    ),
    TestFamily.DEFAULT: (
        "Normal distribution",
        "Equal variances",
        "Independent observations",
    ),
}

TEST_TYPES = tuple(_ALIASES)


def normalize_test_type(test_type: str) -> TestFamily:
    """Map a user-supplied test type onto a :class:`TestFamily`.

    Case-insensitive; unknown names map to ``TestFamily.DEFAULT``.

    Examples
    --------
    >>> normalize_test_type("Paired T-Test")
    <TestFamily.PAIRED: 'paired t-test'>
    >>> normalize_test_type("regression")
    <TestFamily.DEFAULT: 'default'>
    """
    return _ALIASES.get(test_type.lower(), TestFamily.DEFAULT)


def is_paired_design(test_type: str) -> bool:
    """Whether the total sample size should skip the group multiplier.

    Decided on the raw test type text (``"paired"`` anywhere in it), not on
    the resolved family.
    """
    return "paired" in test_type.lower()
