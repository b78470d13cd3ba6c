"""Closed-form sample size for comparing two proportions."""

from __future__ import annotations

import numpy as np

# Reference proportion the effect is measured against.
_BASELINE_P = 0.5


def _proportion_n(diff: float, z_a: float, z_b: float) -> float:
    """Per-group n to detect ``p2 - p1 = diff`` with ``p1 = 0.5``.

    Uses the pooled variance ``p̄ (1 - p̄)`` with ``p̄ = (p1 + p2) / 2``.
    ``diff`` is not range-checked, so ``p2`` may leave [0, 1].
    """
    p1 = np.float64(_BASELINE_P)
    p2 = p1 + np.float64(diff)
    p_bar = (p1 + p2) / 2.0
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(
            2.0 * p_bar * (1.0 - p_bar) * np.float64(z_a + z_b) ** 2 / (p2 - p1) ** 2
        )
