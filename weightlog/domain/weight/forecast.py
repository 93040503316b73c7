"""Goal date projection from the recent weight trend."""

from __future__ import annotations

import math
from typing import Optional, Sequence

from ...models.samples import WeightSample
from ...models.statistics import ForecastResult, GoalProgress
from .averages import period_average
from .bmi import require_number
from .normalize import days_after, require_series

INSUFFICIENT_DATA = "insufficient data"
NO_TREND = "no trend"
GAINING_WHILE_LOSING = "gaining while goal is loss"
LOSING_WHILE_GAINING = "losing while goal is gain"
TOO_SLOW = "trend too slow to reach goal"


def _trend(daily_rate: float) -> str:
    if daily_rate < 0:
        return "losing"
    if daily_rate > 0:
        return "gaining"
    return "stable"


def _direction(difference: float) -> str:
    if difference < 0:
        return "lose"
    if difference > 0:
        return "gain"
    return "maintain"


def forecast_goal(
    series: Sequence[WeightSample],
    goal_weight: float,
    *,
    trend_window_days: int = 7,
) -> ForecastResult:
    """Estimate when ``goal_weight`` is reached at the current daily rate.

    This is straight linear extrapolation of the boundary rate over the trend
    window. Noisy single-day readings feed directly into the rate.
    """

    goal_weight = require_number(goal_weight, "goal_weight")
    ordered = require_series(series)
    trend = period_average(ordered, trend_window_days)
    if not trend.has_data:
        return ForecastResult(reason=INSUFFICIENT_DATA, goal_weight=goal_weight)

    latest = ordered[0]
    current = latest.weight_kg
    difference = goal_weight - current
    daily_rate = trend.daily_rate or 0.0

    result = ForecastResult(
        has_data=True,
        current_weight=current,
        goal_weight=goal_weight,
        distance_to_goal=abs(difference),
        daily_rate=daily_rate,
        weekly_rate=abs(daily_rate) * 7,
        trend=_trend(daily_rate),
        direction=_direction(difference),
    )

    if difference == 0:
        return result.model_copy(
            update={"is_possible": True, "days_to_goal": 0, "target_date": latest.date}
        )
    if daily_rate == 0:
        return result.model_copy(update={"reason": NO_TREND})
    if (difference < 0) != (daily_rate < 0):
        reason = GAINING_WHILE_LOSING if difference < 0 else LOSING_WHILE_GAINING
        return result.model_copy(update={"reason": reason})

    days = abs(difference) / abs(daily_rate)
    if not math.isfinite(days):
        return result.model_copy(update={"reason": TOO_SLOW})
    days_to_goal = math.floor(days + 0.5)
    target_date = days_after(latest.date, days_to_goal)
    if target_date is None:
        return result.model_copy(update={"reason": TOO_SLOW})
    return result.model_copy(
        update={
            "is_possible": True,
            "days_to_goal": days_to_goal,
            "target_date": target_date,
        }
    )


def goal_progress(
    start_weight: float, current_weight: float, goal_weight: float
) -> GoalProgress:
    """Share of the start-to-goal distance already covered, clamped to 0-100."""

    start_weight = require_number(start_weight, "start_weight")
    current_weight = require_number(current_weight, "current_weight")
    goal_weight = require_number(goal_weight, "goal_weight")

    remaining = abs(goal_weight - current_weight)
    total = goal_weight - start_weight
    percentage: Optional[float] = None
    if total != 0:
        covered = (current_weight - start_weight) / total * 100
        percentage = round(min(100.0, max(0.0, covered)), 1)
    return GoalProgress(distance_to_goal=remaining, percentage_complete=percentage)
