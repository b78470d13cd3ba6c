"""Shared parameter/result types and helpers for sample size calculations."""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass

from pysamplesize.samplesize._families import TestFamily

# Fixed attrition allowance applied to every total sample size.
DROPOUT_FACTOR = 1.2

# Caller-boundary keys (camelCase, as sent by the request layer) -> field names.
_PARAM_KEYS = {
    "testType": "test_type",
    "effectSize": "effect_size",
    "power": "power",
    "alpha": "alpha",
    "groups": "groups",
}
_REQUIRED = ("test_type", "effect_size", "power", "alpha")


@dataclass(frozen=True)
class SampleSizeParams:
    """Inputs to :func:`calculate_sample_size`.

    ``effect_size`` is interpreted per test family: Cohen's d for t-tests,
    Cohen's f for one-way ANOVA, a difference in proportions for the
    proportion test and the correlation coefficient r for the correlation
    test. No range checks are applied to ``effect_size``, ``power`` or
    ``alpha``; degenerate values produce non-finite sample sizes.
    """

    test_type: str
    effect_size: float
    power: float
    alpha: float
    groups: int = 2

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> SampleSizeParams:
        """Build parameters from a request-style mapping.

        Accepts camelCase keys (``testType``, ``effectSize``, ...) as well as
        the snake_case field names. ``groups`` is optional.

        Raises
        ------
        ValueError
            If a required key is missing or a value has the wrong type.
        """
        values: dict[str, object] = {}
        for key, value in data.items():
            name = _PARAM_KEYS.get(key, key)
            if name in _PARAM_KEYS.values():
                values[name] = value

        missing = [name for name in _REQUIRED if values.get(name) is None]
        if missing:
            raise ValueError(
                "All parameters are required for sample size calculation "
                f"(missing: {', '.join(missing)})"
            )
        if values.get("groups") is None:
            values.pop("groups", None)

        params = cls(**values)  # type: ignore[arg-type]
        _check_params(params)
        return params


@dataclass(frozen=True)
class SampleSizeResult:
    """Result of a sample size calculation.

    ``sample_size`` is per group (per condition for ANOVA, per pair for the
    paired design, total for the correlation test). Sizes are ``int`` when
    finite; degenerate inputs (zero effect, correlation of +/-1, ...) yield
    ``float('inf')`` or ``float('nan')`` instead of raising.
    """

    sample_size: int | float
    total_sample_size: int | float
    adjusted_sample_size: int | float
    formula: str
    assumptions: tuple[str, ...]
    test_family: TestFamily
    z_alpha: float
    z_beta: float
    f_critical: float | None = None  # ANOVA only, display-only lookup

    @property
    def is_finite(self) -> bool:
        """True when all three reported sizes are finite numbers."""
        return all(
            math.isfinite(v)
            for v in (self.sample_size, self.total_sample_size, self.adjusted_sample_size)
        )

    def summary(self) -> str:
        """Human-readable summary of the calculation."""
        lines = [
            f"Sample size calculation ({self.test_family.label})",
            "",
            f"     n per group = {self.sample_size}",
            f"         total N = {self.total_sample_size}",
            f"    +20% dropout = {self.adjusted_sample_size}",
            f"         z_alpha = {self.z_alpha:.6f}",
            f"          z_beta = {self.z_beta:.6f}",
        ]
        if self.f_critical is not None:
            lines.append(f"      F critical = {self.f_critical}")
        lines.append("")
        lines.append(f"Formula: {self.formula}")
        lines.append(f"Assumptions: {', '.join(self.assumptions)}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, object]:
        """Mapping in the shape returned to the request layer."""
        return {
            "sampleSize": self.sample_size,
            "totalSampleSize": self.total_sample_size,
            "adjustedSampleSize": self.adjusted_sample_size,
            "formula": self.formula,
            "assumptions": list(self.assumptions),
            "testFamily": self.test_family.value,
            "zAlpha": self.z_alpha,
            "zBeta": self.z_beta,
            "fCritical": self.f_critical,
        }


# ---------------------------------------------------------------------------
# Shared validation
# ---------------------------------------------------------------------------

def _is_real(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_params(params: SampleSizeParams) -> None:
    """Reject structurally invalid parameters.

    Rules
    -----
    - *test_type* must be a string.
    - *effect_size*, *power* and *alpha* must be real numbers.
    - *groups* must be an integer >= 1.

    Numeric ranges are deliberately not checked.

    Raises
    ------
    ValueError
        On any validation failure.
    """
    if not isinstance(params.test_type, str):
        raise ValueError(f"test_type must be a string, got {type(params.test_type).__name__}")

    for name in ("effect_size", "power", "alpha"):
        value = getattr(params, name)
        if not _is_real(value):
            raise ValueError(f"{name} must be a real number, got {value!r}")

    groups = params.groups
    if not isinstance(groups, numbers.Integral) or isinstance(groups, bool):
        raise ValueError(f"groups must be an integer, got {groups!r}")
    if groups < 1:
        raise ValueError(f"groups must be >= 1, got {groups}")


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def _ceil_size(value: float) -> int | float:
    """Round a raw sample size up to an integer; pass ``inf``/``nan`` through."""
    value = float(value)
    if not math.isfinite(value):
        return value
    return math.ceil(value)
