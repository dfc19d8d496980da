"""Resonance scoring: how close is the water level to a resonance?

The score is a Gaussian of the length error measured in units of a
tolerance width:

    strength = exp(-(|L_obs - L_res| / τ)²)

1.0 at exact resonance, ~0.37 one tolerance away, effectively zero beyond
three. The strength drives the quality label shown next to each trial and
the accept/reject decision that feeds the statistics.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum

from resonance_lab.physics.formulas import clamp

# ── Constants ────────────────────────────────────────────

DEFAULT_SCORE_TOLERANCE_M = 0.02
DEFAULT_ACCEPTANCE_THRESHOLD = 0.75

# Evaluated top-down; each bound is inclusive.
_QUALITY_LADDER: tuple[tuple[float, str], ...] = (
    (0.90, "Excellent"),
    (0.75, "Good"),
    (0.50, "Fair"),
)


# ── Types ────────────────────────────────────────────────


class QualityLabel(StrEnum):
    """Discrete resonance quality shown to the student."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


@dataclass(frozen=True)
class ResonanceScore:
    """Strength, label and acceptance derived from a single strength value."""

    strength: float
    quality: QualityLabel
    accepted: bool


# ── Scoring ──────────────────────────────────────────────


def resonance_strength(
    observed_length_m: float,
    resonant_length_m: float,
    tolerance_m: float | None = None,
) -> float:
    """Gaussian proximity score in [0, 1].

    Args:
        observed_length_m: Current air-column length.
        resonant_length_m: Predicted resonant length.
        tolerance_m: Width τ of the Gaussian. Non-positive or missing
            values fall back to DEFAULT_SCORE_TOLERANCE_M.
    """
    tolerance = tolerance_m if tolerance_m is not None and tolerance_m > 0 else DEFAULT_SCORE_TOLERANCE_M
    normalized = abs(observed_length_m - resonant_length_m) / tolerance
    return clamp(math.exp(-(normalized * normalized)), 0.0, 1.0)


def quality_label(strength: float) -> QualityLabel:
    """Map a strength onto the Excellent/Good/Fair/Poor ladder."""
    for lower_bound, label in _QUALITY_LADDER:
        if strength >= lower_bound:
            return QualityLabel(label)
    return QualityLabel.POOR


def is_accepted(strength: float, threshold: float = DEFAULT_ACCEPTANCE_THRESHOLD) -> bool:
    """True when a trial is good enough to count towards the statistics."""
    return strength >= threshold


def score_length(
    observed_length_m: float,
    resonant_length_m: float,
    tolerance_m: float | None = None,
    threshold: float = DEFAULT_ACCEPTANCE_THRESHOLD,
) -> ResonanceScore:
    """Score a length once and derive label + acceptance from that one value."""
    strength = resonance_strength(observed_length_m, resonant_length_m, tolerance_m)
    return ResonanceScore(
        strength=strength,
        quality=quality_label(strength),
        accepted=is_accepted(strength, threshold),
    )
