from __future__ import annotations

import datetime as dt
from datetime import date
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class PeriodAverageResult(BaseModel):
    """Weight change between the boundary samples of a trailing window."""

    window_days: int
    has_data: bool = False
    start_weight: Optional[float] = Field(
        None, description="Weight of the oldest sample inside the window"
    )
    end_weight: Optional[float] = Field(
        None, description="Weight of the newest sample inside the window"
    )
    total_change: Optional[float] = Field(
        None, description="end_weight - start_weight, negative means loss"
    )
    daily_rate: Optional[float] = Field(
        None, description="Average change per day in kilograms"
    )
    window_start: Optional[date] = None
    window_end: Optional[date] = None
    sample_count: int = 0


class PeriodAveragesResponse(BaseModel):
    averages: List[PeriodAverageResult]


class DistributionResult(BaseModel):
    """Histogram of weights in fixed 0.5 kg bins."""

    ranges: List[str] = Field(default_factory=list)
    counts: List[int] = Field(default_factory=list)


class ForecastResult(BaseModel):
    """Linear projection of the current trend towards a goal weight."""

    has_data: bool = False
    is_possible: bool = False
    reason: Optional[str] = None
    current_weight: Optional[float] = None
    goal_weight: Optional[float] = None
    distance_to_goal: Optional[float] = None
    daily_rate: Optional[float] = None
    weekly_rate: Optional[float] = None
    days_to_goal: Optional[int] = None
    target_date: Optional[date] = None
    trend: Optional[Literal["losing", "gaining", "stable"]] = None
    direction: Optional[Literal["lose", "gain", "maintain"]] = None


class GoalProgress(BaseModel):
    """How far the current weight has moved from start towards goal."""

    distance_to_goal: float
    percentage_complete: Optional[float] = Field(
        None, description="Share of the start-to-goal distance covered, 0-100"
    )


class LinearRegressionResult(BaseModel):
    slope: float = Field(..., description="Change in kilograms per day")
    intercept: float
    r2: float


class RegressionForecast(BaseModel):
    """Least-squares projection of weight a fixed horizon ahead."""

    has_data: bool = False
    sample_count: int = 0
    regression: Optional[LinearRegressionResult] = None
    projected_date: Optional[date] = None
    projected_weight: Optional[float] = None
    trend: Optional[Literal["losing", "gaining", "stable"]] = None


class GoalForecastResponse(BaseModel):
    forecast: ForecastResult
    progress: Optional[GoalProgress] = None
    projection: RegressionForecast


class BmiCategory(BaseModel):
    label: Literal["Underweight", "Healthy", "Overweight", "Obese", ""] = ""
    severity: Literal["warning", "ok", "danger", ""] = ""


class BmiResult(BaseModel):
    bmi: Optional[float] = None
    category: BmiCategory = Field(default_factory=BmiCategory)


class ChartPoint(BaseModel):
    date: dt.date
    weight_kg: float
    moving_average: Optional[float] = Field(
        None, description="Trailing moving average of the last samples"
    )


class ChartData(BaseModel):
    points: List[ChartPoint]
    start_weight: Optional[float] = None
    goal_weight: Optional[float] = None


class SeriesSummary(BaseModel):
    """Headline numbers shown above the charts."""

    entry_count: int = 0
    first_date: Optional[date] = None
    last_date: Optional[date] = None
    min_weight: Optional[float] = None
    max_weight: Optional[float] = None
    current_weight: Optional[float] = None
    last_change: Optional[float] = Field(
        None, description="Newest weight minus the previous sample"
    )
    total_change: Optional[float] = Field(
        None, description="Newest weight minus the profile start weight"
    )
    bmi: BmiResult = Field(default_factory=BmiResult)
