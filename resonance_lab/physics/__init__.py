"""PHYSICS — Quarter-wave resonance formulas and proximity scoring.

Modules:
  formulas: closed-form tube equations (speed, length, frequency, period)
  scoring: Gaussian resonance strength, quality ladder, acceptance
"""

from resonance_lab.physics.formulas import (
    END_CORRECTION_FACTOR,
    clamp,
    four_times_length,
    frequency_from_length,
    period,
    resonant_length,
    resonant_length_for_mode,
    speed_of_sound,
)
from resonance_lab.physics.scoring import (
    DEFAULT_ACCEPTANCE_THRESHOLD,
    DEFAULT_SCORE_TOLERANCE_M,
    QualityLabel,
    ResonanceScore,
    is_accepted,
    quality_label,
    resonance_strength,
    score_length,
)

__all__ = [
    "END_CORRECTION_FACTOR",
    "clamp",
    "four_times_length",
    "frequency_from_length",
    "period",
    "resonant_length",
    "resonant_length_for_mode",
    "speed_of_sound",
    "DEFAULT_ACCEPTANCE_THRESHOLD",
    "DEFAULT_SCORE_TOLERANCE_M",
    "QualityLabel",
    "ResonanceScore",
    "is_accepted",
    "quality_label",
    "resonance_strength",
    "score_length",
]
