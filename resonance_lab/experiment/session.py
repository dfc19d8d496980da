"""Experiment session — the resonance-tube bench without the screen.

Holds what a student changes on the bench (tuning fork, fine frequency
knob, water level) plus the trials recorded so far, and calls into the
stateless physics/analysis/assessment functions. One session per student;
not thread-safe.
"""

from __future__ import annotations

from typing import Any

import numpy as np
import structlog

from resonance_lab.analysis.aggregate import AggregateStats, accepted_stats
from resonance_lab.analysis.fit import FitResult, linear_fit, trial_points
from resonance_lab.assessment.challenge import (
    AssessmentChallenge,
    ChallengeKind,
    GradeResult,
    generate_challenge,
    grade_answer,
)
from resonance_lab.config import Settings, settings as default_settings
from resonance_lab.errors import InvalidArgument
from resonance_lab.experiment.trials import TrialRecord, record_trial
from resonance_lab.physics.formulas import clamp, resonant_length
from resonance_lab.physics.scoring import ResonanceScore, score_length

logger = structlog.get_logger()


class ExperimentSession:
    """In-memory bench state for one student."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or default_settings
        self.preset_frequency: float = float(self.settings.default_preset_hz)
        self.fine_adjust: float = 0.0
        self.frequency_hz: float = self.preset_frequency
        self.length_m: float = 0.0
        self._trials: list[TrialRecord] = []
        self.fit_result: FitResult | None = None
        self.challenge: AssessmentChallenge | None = None

        self._update_frequency()
        self.set_length(self.settings.initial_length_m)

    # ── Frequency ──────────────────────────────────────────

    def _update_frequency(self) -> None:
        self.frequency_hz = clamp(
            self.preset_frequency + self.fine_adjust,
            self.settings.min_frequency_hz,
            self.settings.max_frequency_hz,
        )

    def select_preset(self, frequency_hz: float) -> float:
        """Pick a tuning fork. Returns the resulting driving frequency."""
        if frequency_hz not in self.settings.preset_frequencies:
            logger.warning("session.unknown_preset", frequency_hz=frequency_hz)
            raise InvalidArgument(
                f"{frequency_hz} Hz is not one of the presets {list(self.settings.preset_frequencies)}."
            )
        self.preset_frequency = float(frequency_hz)
        self._update_frequency()
        return self.frequency_hz

    def set_fine_adjust(self, offset_hz: float) -> float:
        """Offset from the selected fork; the sum is clamped to the allowed band."""
        self.fine_adjust = float(offset_hz)
        self._update_frequency()
        return self.frequency_hz

    # ── Water Level ────────────────────────────────────────

    def set_length(self, length_m: float) -> float:
        self.length_m = clamp(length_m, self.settings.min_length_m, self.settings.max_length_m)
        return self.length_m

    def nudge_length(self, steps: int = 1) -> float:
        """Move the water level by whole slider steps (negative = shorter column)."""
        return self.set_length(self.length_m + steps * self.settings.length_step_m)

    # ── Scoring ────────────────────────────────────────────

    def resonant_length(self) -> float:
        return resonant_length(
            self.settings.reference_speed_ms,
            self.frequency_hz,
            self.settings.tube_diameter_m,
        )

    def current_resonance(self) -> tuple[float, ResonanceScore]:
        """Resonant length for the current frequency and how close we are to it."""
        target = self.resonant_length()
        score = score_length(
            self.length_m,
            target,
            self.settings.score_tolerance_m,
            self.settings.acceptance_threshold,
        )
        return target, score

    # ── Trials ─────────────────────────────────────────────

    @property
    def trials(self) -> tuple[TrialRecord, ...]:
        return tuple(self._trials)

    def record_trial(self) -> TrialRecord:
        """Freeze the current bench reading as the next trial."""
        trial = record_trial(
            trial_id=len(self._trials) + 1,
            frequency_hz=self.frequency_hz,
            length_m=self.length_m,
            resonant_length_m=self.resonant_length(),
            diameter_m=self.settings.tube_diameter_m,
            tolerance_m=self.settings.score_tolerance_m,
            threshold=self.settings.acceptance_threshold,
        )
        self._trials.append(trial)
        self.fit_result = None
        logger.info(
            "session.trial_recorded",
            trial_id=trial.id,
            frequency_hz=trial.frequency_hz,
            length_m=round(trial.length_m, 4),
            quality=str(trial.quality),
            accepted=trial.accepted,
        )
        return trial

    def clear_trials(self) -> None:
        logger.info("session.trials_cleared", count=len(self._trials))
        self._trials.clear()
        self.fit_result = None

    def fit(self) -> FitResult | None:
        """Fit 4L against T over the accepted trials and keep the result."""
        self.fit_result = linear_fit(trial_points(self._trials))
        return self.fit_result

    def stats(self) -> AggregateStats:
        return accepted_stats(self._trials)

    # ── Assessment ─────────────────────────────────────────

    def new_challenge(
        self,
        kind: ChallengeKind | str | None,
        rng: np.random.Generator,
    ) -> AssessmentChallenge:
        self.challenge = generate_challenge(kind, rng)
        return self.challenge

    def check_answer(self, guess: Any) -> GradeResult:
        return grade_answer(self.challenge, guess)

    def to_dict(self) -> dict[str, Any]:
        target, score = self.current_resonance()
        return {
            "frequency_hz": self.frequency_hz,
            "length_m": self.length_m,
            "resonant_length_m": target,
            "strength": score.strength,
            "quality": str(score.quality),
            "trials": [t.to_dict() for t in self._trials],
            "stats": self.stats().to_dict(),
            "fit": self.fit_result.to_dict() if self.fit_result else None,
        }
