from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..domain.weight.averages import DEFAULT_WINDOWS, period_averages
from ..domain.weight.chart import build_chart
from ..domain.weight.distribution import weight_distribution
from ..domain.weight.forecast import forecast_goal, goal_progress
from ..domain.weight.regression import regression_projection
from ..domain.weight.summary import summarize_series
from ..models.profile import UserProfile
from ..models.samples import WeightSample
from ..models.statistics import (
    ChartData,
    DistributionResult,
    ForecastResult,
    GoalForecastResponse,
    PeriodAveragesResponse,
    SeriesSummary,
)
from ..notion.application.ports import ProfileRepository, SampleRepository

NO_GOAL_WEIGHT = "no goal weight"

AveragesCalculator = Callable[[Sequence[WeightSample], Iterable[int]], list]
DistributionBinner = Callable[..., DistributionResult]
SummaryBuilder = Callable[[Sequence[WeightSample], Optional[UserProfile]], SeriesSummary]
ChartBuilder = Callable[..., ChartData]


async def _samples_and_profile(
    samples: SampleRepository, profiles: ProfileRepository, user_id: str
) -> Tuple[List[WeightSample], UserProfile]:
    series, profile = await asyncio.gather(
        samples.list_samples(user_id), profiles.get_profile(user_id)
    )
    return series, profile


@dataclass
class GetPeriodAveragesUseCase:
    repository: SampleRepository
    calculator: AveragesCalculator = period_averages

    async def __call__(
        self, user_id: str, windows: Iterable[int] = DEFAULT_WINDOWS
    ) -> PeriodAveragesResponse:
        series = await self.repository.list_samples(user_id)
        return PeriodAveragesResponse(averages=self.calculator(series, windows))


@dataclass
class GetDistributionUseCase:
    repository: SampleRepository
    binner: DistributionBinner = weight_distribution
    include_empty: bool = False

    async def __call__(
        self, user_id: str, include_empty: Optional[bool] = None
    ) -> DistributionResult:
        series = await self.repository.list_samples(user_id)
        if include_empty is None:
            include_empty = self.include_empty
        return self.binner(series, include_empty=include_empty)


@dataclass
class GetGoalForecastUseCase:
    """Combine the rate forecast, goal progress and the regression projection.

    The goal falls back to the stored profile when the caller omits it.
    """

    samples: SampleRepository
    profiles: ProfileRepository
    trend_window_days: int = 7

    async def __call__(
        self, user_id: str, goal_weight: Optional[float] = None
    ) -> GoalForecastResponse:
        series, profile = await _samples_and_profile(self.samples, self.profiles, user_id)
        projection = regression_projection(series)

        goal = goal_weight if goal_weight is not None else profile.goal_weight_kg
        if goal is None:
            return GoalForecastResponse(
                forecast=ForecastResult(reason=NO_GOAL_WEIGHT), projection=projection
            )

        forecast = forecast_goal(series, goal, trend_window_days=self.trend_window_days)
        progress = None
        if forecast.current_weight is not None and profile.start_weight_kg is not None:
            progress = goal_progress(profile.start_weight_kg, forecast.current_weight, goal)
        return GoalForecastResponse(
            forecast=forecast, progress=progress, projection=projection
        )


@dataclass
class GetSeriesSummaryUseCase:
    samples: SampleRepository
    profiles: ProfileRepository
    builder: SummaryBuilder = summarize_series

    async def __call__(self, user_id: str) -> SeriesSummary:
        series, profile = await _samples_and_profile(self.samples, self.profiles, user_id)
        return self.builder(series, profile)


@dataclass
class GetChartUseCase:
    samples: SampleRepository
    profiles: ProfileRepository
    builder: ChartBuilder = build_chart

    async def __call__(self, user_id: str, window: int = 7) -> ChartData:
        series, profile = await _samples_and_profile(self.samples, self.profiles, user_id)
        return self.builder(series, profile=profile, window=window)


__all__ = [
    "GetChartUseCase",
    "GetDistributionUseCase",
    "GetGoalForecastUseCase",
    "GetPeriodAveragesUseCase",
    "GetSeriesSummaryUseCase",
    "NO_GOAL_WEIGHT",
]
