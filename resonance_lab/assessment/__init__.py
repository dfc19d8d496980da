"""ASSESSMENT — Randomized inverse-problem challenges and grading."""

from resonance_lab.assessment.challenge import (
    RANDOM_KIND,
    AssessmentChallenge,
    ChallengeKind,
    GradeResult,
    GradeStatus,
    generate_challenge,
    grade_answer,
)

__all__ = [
    "RANDOM_KIND",
    "AssessmentChallenge",
    "ChallengeKind",
    "GradeResult",
    "GradeStatus",
    "generate_challenge",
    "grade_answer",
]
