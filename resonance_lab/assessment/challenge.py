"""Self-check challenges — predict L from f, or f from L.

Challenges are inverse problems built from the same formulas the bench
uses, so a student who understands 4·f·(L + k·d) = v can solve them by
hand. Randomness always comes from a caller-supplied numpy Generator;
nothing here touches global random state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from numbers import Real
from typing import Any

import numpy as np
import structlog

from resonance_lab.errors import InvalidArgument
from resonance_lab.physics.formulas import frequency_from_length, resonant_length

logger = structlog.get_logger()

# ── Constants ────────────────────────────────────────────

PRESET_FREQUENCIES: tuple[int, ...] = (256, 288, 320, 341, 384, 426, 480)
FREQUENCY_JITTER_HZ = 3          # preset ± integer in [-3, 3]
REFERENCE_SPEED_MS = 343.0
TUBE_DIAMETER_M = 0.05
LENGTH_RANGE_M = (0.2, 1.0)
LENGTH_DECIMALS = 3

LENGTH_TOLERANCE_M = 0.015
FREQUENCY_TOLERANCE_HZ = 8.0

RANDOM_KIND = "random"


# ── Types ────────────────────────────────────────────────


class ChallengeKind(StrEnum):
    """Which quantity the student has to predict."""

    LENGTH_FROM_FREQUENCY = "length_from_frequency"
    FREQUENCY_FROM_LENGTH = "frequency_from_length"


class GradeStatus(StrEnum):
    CORRECT = "correct"
    INCORRECT = "incorrect"
    INVALID_INPUT = "invalid_input"
    NO_CHALLENGE = "no_challenge"


@dataclass(frozen=True)
class AssessmentChallenge:
    """One question. Replaced, never mutated, by the next challenge."""

    kind: ChallengeKind
    given: float       # value shown in the prompt (f in Hz or L in m)
    answer: float
    tolerance: float
    unit: str          # "m" or "Hz"
    prompt: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": str(self.kind),
            "given": self.given,
            "answer": self.answer,
            "tolerance": self.tolerance,
            "unit": self.unit,
            "prompt": self.prompt,
        }


@dataclass(frozen=True)
class GradeResult:
    """Outcome of grading a guess.

    `correct` is False and `error` is None for the invalid-input and
    no-challenge outcomes.
    """

    status: GradeStatus
    correct: bool
    error: float | None
    feedback: str


# ── Generation ───────────────────────────────────────────


def _resolve_kind(kind: ChallengeKind | str | None, rng: np.random.Generator) -> ChallengeKind:
    if kind is None or kind == RANDOM_KIND:
        if rng.random() < 0.5:
            return ChallengeKind.LENGTH_FROM_FREQUENCY
        return ChallengeKind.FREQUENCY_FROM_LENGTH
    try:
        return ChallengeKind(kind)
    except ValueError as e:
        raise InvalidArgument(f"Unknown challenge kind: {kind!r}") from e


def _length_from_frequency(rng: np.random.Generator) -> AssessmentChallenge:
    preset = int(rng.choice(PRESET_FREQUENCIES))
    jitter = int(rng.integers(-FREQUENCY_JITTER_HZ, FREQUENCY_JITTER_HZ + 1))
    frequency = float(preset + jitter)
    answer = resonant_length(REFERENCE_SPEED_MS, frequency, TUBE_DIAMETER_M)
    return AssessmentChallenge(
        kind=ChallengeKind.LENGTH_FROM_FREQUENCY,
        given=frequency,
        answer=answer,
        tolerance=LENGTH_TOLERANCE_M,
        unit="m",
        prompt=f"Given frequency f = {frequency:.1f} Hz, predict first-harmonic resonant L (m).",
    )


def _frequency_from_length(rng: np.random.Generator) -> AssessmentChallenge:
    low, high = LENGTH_RANGE_M
    # Round before solving so the prompt shows exactly the value used.
    length = round(float(low + rng.random() * (high - low)), LENGTH_DECIMALS)
    answer = frequency_from_length(REFERENCE_SPEED_MS, length, TUBE_DIAMETER_M)
    return AssessmentChallenge(
        kind=ChallengeKind.FREQUENCY_FROM_LENGTH,
        given=length,
        answer=answer,
        tolerance=FREQUENCY_TOLERANCE_HZ,
        unit="Hz",
        prompt=f"Given resonant length L = {length:.3f} m, predict frequency f (Hz).",
    )


def generate_challenge(
    kind: ChallengeKind | str | None,
    rng: np.random.Generator,
) -> AssessmentChallenge:
    """Create a new challenge.

    Args:
        kind: A ChallengeKind, or None / "random" for a fair coin flip.
        rng: Source of randomness, e.g. np.random.default_rng(seed).

    Raises:
        InvalidArgument: kind is not a known challenge kind.
    """
    resolved = _resolve_kind(kind, rng)
    if resolved is ChallengeKind.LENGTH_FROM_FREQUENCY:
        challenge = _length_from_frequency(rng)
    else:
        challenge = _frequency_from_length(rng)

    logger.debug(
        "challenge.generated",
        kind=str(challenge.kind),
        given=challenge.given,
        answer=round(challenge.answer, 4),
    )
    return challenge


# ── Grading ──────────────────────────────────────────────


def _parse_guess(guess: Any) -> float | None:
    """Finite float from a number or raw text input, else None."""
    if isinstance(guess, bool):
        return None
    if isinstance(guess, str):
        text = guess.strip()
        # "1_0" is a Python literal, not a number a student typed
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    elif isinstance(guess, Real):
        value = float(guess)
    else:
        return None
    return value if math.isfinite(value) else None


def _format_answer(challenge: AssessmentChallenge) -> str:
    digits = 3 if challenge.unit == "m" else 1
    return f"{challenge.answer:.{digits}f}"


def grade_answer(challenge: AssessmentChallenge | None, guess: Any) -> GradeResult:
    """Compare a guess with the challenge answer.

    Side-effect free: grading the same guess twice gives the same result
    and leaves the challenge usable.
    """
    if challenge is None:
        return GradeResult(
            status=GradeStatus.NO_CHALLENGE,
            correct=False,
            error=None,
            feedback="Create a challenge first.",
        )

    value = _parse_guess(guess)
    if value is None:
        return GradeResult(
            status=GradeStatus.INVALID_INPUT,
            correct=False,
            error=None,
            feedback="Enter a numeric prediction first.",
        )

    error = abs(value - challenge.answer)
    if error <= challenge.tolerance:
        return GradeResult(
            status=GradeStatus.CORRECT,
            correct=True,
            error=error,
            feedback=f"Correct range. Error: {error:.3f} {challenge.unit}.",
        )

    return GradeResult(
        status=GradeStatus.INCORRECT,
        correct=False,
        error=error,
        feedback=(
            f"Not yet. Error: {error:.3f} {challenge.unit}. "
            f"Target: {_format_answer(challenge)} {challenge.unit}."
        ),
    )
