"""Trailing-window weight change calculations."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ...models.samples import WeightSample
from ...models.statistics import PeriodAverageResult
from .errors import InvalidArgumentError
from .normalize import require_series, window_cutoff

DEFAULT_WINDOWS = (7, 14, 30)


def _require_window(window_days: int) -> int:
    if isinstance(window_days, bool) or not isinstance(window_days, int):
        raise InvalidArgumentError(
            f"window_days must be an int, got {type(window_days).__name__}"
        )
    if window_days < 1:
        raise InvalidArgumentError(f"window_days must be at least 1, got {window_days}")
    return window_days


def period_average(series: Sequence[WeightSample], window_days: int) -> PeriodAverageResult:
    """Compare the oldest and newest samples of the last ``window_days`` days.

    The window is anchored on the newest sample rather than today, so a gap
    since the last measurement does not shrink the window.
    """

    window_days = _require_window(window_days)
    ordered = require_series(series)
    if len(ordered) < 2:
        return PeriodAverageResult(window_days=window_days, sample_count=len(ordered))

    cutoff = window_cutoff(ordered[0].date, window_days)
    recent = [sample for sample in ordered if sample.date >= cutoff]
    if len(recent) < 2:
        return PeriodAverageResult(window_days=window_days, sample_count=len(recent))

    newest = recent[0]
    oldest = recent[-1]
    days_between = max(1, (newest.date - oldest.date).days)
    total_change = newest.weight_kg - oldest.weight_kg

    return PeriodAverageResult(
        window_days=window_days,
        has_data=True,
        start_weight=oldest.weight_kg,
        end_weight=newest.weight_kg,
        total_change=total_change,
        daily_rate=total_change / days_between,
        window_start=oldest.date,
        window_end=newest.date,
        sample_count=len(recent),
    )


def period_averages(
    series: Sequence[WeightSample], windows: Iterable[int] = DEFAULT_WINDOWS
) -> List[PeriodAverageResult]:
    """Return one :func:`period_average` per window."""

    return [period_average(series, window) for window in windows]
