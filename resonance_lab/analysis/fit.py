"""Linear fit engine — ordinary least squares over (T, 4L) points.

For a closed tube 4·(L + k·d) = v·T, so plotting 4L against the period T
gives a straight line whose slope is the speed of sound and whose
intercept is -4·k·d. The fit is plain OLS:

    slope     = (nΣxy − ΣxΣy) / (nΣx² − (Σx)²)
    intercept = (Σy − slope·Σx) / n
    r²        = 1 − SS_res / SS_tot        (1.0 when SS_tot == 0)

Returns None instead of raising when the data cannot support a line.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from numbers import Real
from typing import TYPE_CHECKING, Any

import numpy as np
import structlog

if TYPE_CHECKING:
    from resonance_lab.experiment.trials import TrialRecord

logger = structlog.get_logger()

# ── Constants ────────────────────────────────────────────

MIN_FIT_POINTS = 2
DENOMINATOR_EPSILON = 1e-12  # below this the x values are effectively identical


# ── Types ────────────────────────────────────────────────


@dataclass(frozen=True)
class MeasurementPoint:
    """One graph point: x = period T (s), y = 4L (m)."""

    x: float
    y: float


@dataclass(frozen=True)
class FitResult:
    """Fitted line y = slope·x + intercept over `count` valid points."""

    slope: float
    intercept: float
    r2: float
    count: int

    @property
    def speed_of_sound(self) -> float:
        """Slope of 4L vs T, in m/s."""
        return self.slope

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept

    def to_dict(self) -> dict[str, Any]:
        return {
            "slope": self.slope,
            "intercept": self.intercept,
            "r2": self.r2,
            "count": self.count,
        }


# ── Point Extraction ─────────────────────────────────────


def _finite(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def _coerce_point(point: Any) -> tuple[float, float] | None:
    """Accept MeasurementPoint, (x, y) pairs and {"x": .., "y": ..} mappings."""
    if isinstance(point, Mapping):
        x, y = point.get("x"), point.get("y")
    elif isinstance(point, (tuple, list)):
        if len(point) != 2:
            return None
        x, y = point
    else:
        x, y = getattr(point, "x", None), getattr(point, "y", None)

    if not (_finite(x) and _finite(y)):
        return None
    return float(x), float(y)


def trial_points(trials: Iterable[TrialRecord]) -> list[MeasurementPoint]:
    """Graph series for the fit: accepted trials as (period, 4L)."""
    return [MeasurementPoint(x=t.period, y=t.four_l) for t in trials if t.accepted]


# ── Fit ──────────────────────────────────────────────────


def linear_fit(points: Any) -> FitResult | None:
    """Ordinary least-squares line through the finite points.

    Args:
        points: Iterable of points. Entries with a missing or non-finite
            coordinate are dropped.

    Returns:
        FitResult, or None when fewer than two valid points remain or all
        x values coincide.
    """
    if points is None or isinstance(points, (str, bytes, Mapping)) or not isinstance(points, Iterable):
        return None

    valid = [p for p in (_coerce_point(point) for point in points) if p is not None]
    n = len(valid)
    if n < MIN_FIT_POINTS:
        logger.debug("linear_fit.insufficient_points", count=n)
        return None

    xs = np.array([p[0] for p in valid], dtype=np.float64)
    ys = np.array([p[1] for p in valid], dtype=np.float64)

    # Centred sums: n·Σdx² equals nΣx² − (Σx)² without squaring raw values.
    # Overflow on huge inputs surfaces as inf/NaN and is rejected below.
    with np.errstate(over="ignore", invalid="ignore"):
        mean_x = float(np.mean(xs))
        mean_y = float(np.mean(ys))
        dx = xs - mean_x
        dy = ys - mean_y
        s_xx = float(np.sum(dx * dx))
        s_xy = float(np.sum(dx * dy))

        denominator = n * s_xx
        if math.isfinite(denominator) and abs(denominator) < DENOMINATOR_EPSILON:
            logger.debug("linear_fit.degenerate", count=n, denominator=denominator)
            return None

        slope = s_xy / s_xx if math.isfinite(denominator) else math.nan
        intercept = mean_y - slope * mean_x

        residuals = ys - (slope * xs + intercept)
        ss_residual = float(np.sum(residuals * residuals))
        ss_total = float(np.sum(dy * dy))

    # Identical y values: the flat line is a perfect fit. Compare the values
    # directly since the mean can round away from the common value.
    flat = ss_total == 0 or bool(np.all(ys == ys[0]))
    r2 = 1.0 if flat else 1 - ss_residual / ss_total

    if not all(math.isfinite(v) for v in (slope, intercept, r2)):
        logger.debug("linear_fit.non_finite", count=n)
        return None

    logger.debug("linear_fit.done", count=n, slope=round(slope, 4), r2=round(r2, 5))
    return FitResult(slope=slope, intercept=intercept, r2=r2, count=n)
