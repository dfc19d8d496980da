"""Acceptance counts and mean speed of sound over recorded trials."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import Any

import numpy as np


@dataclass(frozen=True)
class AggregateStats:
    """Summary over a trial list. mean_speed is None when nothing qualified."""

    accepted_count: int
    total_count: int
    mean_speed: float | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "accepted_count": self.accepted_count,
            "total_count": self.total_count,
            "mean_speed": self.mean_speed,
        }


def _field(trial: Any, name: str) -> Any:
    """Read a field from a TrialRecord or from a plain mapping."""
    if isinstance(trial, Mapping):
        return trial.get(name)
    return getattr(trial, name, None)


def _finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _as_list(trials: Any) -> list[Any]:
    if trials is None or isinstance(trials, (str, bytes, Mapping)):
        return []
    if not isinstance(trials, Iterable):
        return []
    return list(trials)


def accepted_stats(trials: Any) -> AggregateStats:
    """Count accepted trials and average their speed estimates.

    Unaccepted trials and trials without a finite speed_estimate are left
    out of the mean but still count towards total_count. Never raises:
    None or non-sequence input is treated as an empty list.
    """
    items = _as_list(trials)
    speeds = [
        float(_field(trial, "speed_estimate"))
        for trial in items
        if bool(_field(trial, "accepted")) and _finite_number(_field(trial, "speed_estimate"))
    ]

    if not speeds:
        return AggregateStats(accepted_count=0, total_count=len(items), mean_speed=None)

    return AggregateStats(
        accepted_count=len(speeds),
        total_count=len(items),
        mean_speed=float(np.mean(speeds)),
    )
