"""ANALYSIS — Statistics over recorded trials.

Modules:
  aggregate: accepted-trial counts and mean speed of sound
  fit: ordinary least-squares line through (T, 4L) points
"""

from resonance_lab.analysis.aggregate import AggregateStats, accepted_stats
from resonance_lab.analysis.fit import (
    FitResult,
    MeasurementPoint,
    linear_fit,
    trial_points,
)

__all__ = [
    "AggregateStats",
    "accepted_stats",
    "FitResult",
    "MeasurementPoint",
    "linear_fit",
    "trial_points",
]
