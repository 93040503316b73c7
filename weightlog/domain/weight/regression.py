"""Least-squares trend over dated weight samples."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.samples import WeightSample
from ...models.statistics import LinearRegressionResult, RegressionForecast
from .normalize import days_after, require_series, window_cutoff

STABLE_SLOPE = 1e-8


def linear_regression(samples: Sequence[WeightSample]) -> Optional[LinearRegressionResult]:
    """Fit weight against days elapsed since the first sample."""

    ordered = sorted(require_series(samples), key=lambda s: s.date)
    if len(ordered) < 2:
        return None

    start = ordered[0].date
    xs = [float((s.date - start).days) for s in ordered]
    ys = [s.weight_kg for s in ordered]
    n = len(xs)
    x_mean = sum(xs) / n
    y_mean = sum(ys) / n
    numerator = sum((x - x_mean) * (y - y_mean) for x, y in zip(xs, ys))
    denominator = sum((x - x_mean) ** 2 for x in xs)
    slope = numerator / denominator if denominator else 0.0
    intercept = y_mean - slope * x_mean
    ss_tot = sum((y - y_mean) ** 2 for y in ys)
    ss_res = sum((y - (slope * x + intercept)) ** 2 for x, y in zip(xs, ys))
    r2 = 1 - ss_res / ss_tot if ss_tot else 0.0
    return LinearRegressionResult(slope=slope, intercept=intercept, r2=r2)


def regression_projection(
    series: Sequence[WeightSample],
    *,
    window_days: int = 30,
    horizon_days: int = 30,
    min_samples: int = 5,
) -> RegressionForecast:
    """Project the fitted trend ``horizon_days`` past the newest sample."""

    ordered = require_series(series)
    if not ordered:
        return RegressionForecast()

    newest = ordered[0].date
    cutoff = window_cutoff(newest, window_days)
    recent = [s for s in ordered if s.date >= cutoff]
    if len(recent) < min_samples:
        return RegressionForecast(sample_count=len(recent))

    regression = linear_regression(recent)
    if regression is None:
        return RegressionForecast(sample_count=len(recent))

    x = (newest - recent[-1].date).days + horizon_days
    if abs(regression.slope) < STABLE_SLOPE:
        trend = "stable"
    elif regression.slope > 0:
        trend = "gaining"
    else:
        trend = "losing"

    return RegressionForecast(
        has_data=True,
        sample_count=len(recent),
        regression=regression,
        projected_date=days_after(newest, horizon_days),
        projected_weight=regression.slope * x + regression.intercept,
        trend=trend,
    )
