"""Resonance Lab — virtual resonance-tube experiment.

Layers:
  physics: quarter-wave formulas, resonance scoring
  analysis: accepted-trial statistics, OLS fit of 4L vs T
  assessment: randomized self-check challenges
  experiment: trial records and the bench session
"""

from resonance_lab.analysis import (
    AggregateStats,
    FitResult,
    MeasurementPoint,
    accepted_stats,
    linear_fit,
    trial_points,
)
from resonance_lab.assessment import (
    AssessmentChallenge,
    ChallengeKind,
    GradeResult,
    GradeStatus,
    generate_challenge,
    grade_answer,
)
from resonance_lab.errors import InvalidArgument, ResonanceLabError
from resonance_lab.experiment import ExperimentSession, TrialRecord, record_trial
from resonance_lab.physics import (
    QualityLabel,
    ResonanceScore,
    four_times_length,
    frequency_from_length,
    is_accepted,
    period,
    quality_label,
    resonance_strength,
    resonant_length,
    resonant_length_for_mode,
    score_length,
    speed_of_sound,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "AggregateStats",
    "FitResult",
    "MeasurementPoint",
    "accepted_stats",
    "linear_fit",
    "trial_points",
    "AssessmentChallenge",
    "ChallengeKind",
    "GradeResult",
    "GradeStatus",
    "generate_challenge",
    "grade_answer",
    "InvalidArgument",
    "ResonanceLabError",
    "ExperimentSession",
    "TrialRecord",
    "record_trial",
    "QualityLabel",
    "ResonanceScore",
    "four_times_length",
    "frequency_from_length",
    "is_accepted",
    "period",
    "quality_label",
    "resonance_strength",
    "resonant_length",
    "resonant_length_for_mode",
    "score_length",
    "speed_of_sound",
]
