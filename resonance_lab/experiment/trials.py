"""One frozen trial record per press of "Record Trial"."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from resonance_lab.errors import InvalidArgument
from resonance_lab.physics import formulas
from resonance_lab.physics.scoring import (
    DEFAULT_ACCEPTANCE_THRESHOLD,
    QualityLabel,
    is_accepted,
    quality_label,
    score_length,
)


@dataclass(frozen=True)
class TrialRecord:
    """A recorded (frequency, length) pair plus everything derived from it.

    Quality and acceptance are checked against the stored strength, so a
    record can never claim to be accepted with a Poor score. 4L and T
    must match the stored length and frequency.
    """

    id: int
    frequency_hz: float
    length_m: float
    strength: float
    quality: QualityLabel
    accepted: bool
    four_l: float
    period: float
    speed_estimate: float
    acceptance_threshold: float = DEFAULT_ACCEPTANCE_THRESHOLD

    def __post_init__(self) -> None:
        if self.id < 1:
            raise InvalidArgument("Trial id must be >= 1.")
        formulas.require_positive(self.frequency_hz, "Frequency must be greater than zero.")
        formulas.require_non_negative(self.length_m, "Air-column length cannot be negative.")
        if not math.isclose(self.four_l, formulas.four_times_length(self.length_m), rel_tol=1e-9, abs_tol=1e-12):
            raise InvalidArgument(f"4L {self.four_l} does not match length {self.length_m}.")
        if not math.isclose(self.period, formulas.period(self.frequency_hz), rel_tol=1e-9):
            raise InvalidArgument(f"Period {self.period} does not match frequency {self.frequency_hz}.")
        if self.quality != quality_label(self.strength):
            raise InvalidArgument(
                f"Quality {self.quality} does not match strength {self.strength:.3f}."
            )
        if self.accepted != is_accepted(self.strength, self.acceptance_threshold):
            raise InvalidArgument(
                f"Acceptance flag does not match strength {self.strength:.3f} "
                f"at threshold {self.acceptance_threshold}."
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "frequency_hz": self.frequency_hz,
            "length_m": self.length_m,
            "strength": self.strength,
            "quality": str(self.quality),
            "accepted": self.accepted,
            "four_l": self.four_l,
            "period": self.period,
            "speed_estimate": self.speed_estimate,
        }


def record_trial(
    trial_id: int,
    frequency_hz: float,
    length_m: float,
    resonant_length_m: float,
    diameter_m: float,
    tolerance_m: float | None = None,
    threshold: float = DEFAULT_ACCEPTANCE_THRESHOLD,
) -> TrialRecord:
    """Score a length against its resonant length and freeze the result.

    Raises:
        InvalidArgument: frequency <= 0, negative length or diameter.
    """
    score = score_length(length_m, resonant_length_m, tolerance_m, threshold)
    return TrialRecord(
        id=trial_id,
        frequency_hz=frequency_hz,
        length_m=length_m,
        strength=score.strength,
        quality=score.quality,
        accepted=score.accepted,
        four_l=formulas.four_times_length(length_m),
        period=formulas.period(frequency_hz),
        speed_estimate=formulas.speed_of_sound(frequency_hz, length_m, diameter_m),
        acceptance_threshold=threshold,
    )
