from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..application.statistics import (
    GetChartUseCase,
    GetDistributionUseCase,
    GetGoalForecastUseCase,
    GetPeriodAveragesUseCase,
    GetSeriesSummaryUseCase,
)
from ..domain.weight.averages import DEFAULT_WINDOWS
from ..domain.weight.bmi import bmi_result
from ..domain.weight.errors import InvalidArgumentError
from ..models.statistics import (
    BmiResult,
    ChartData,
    DistributionResult,
    GoalForecastResponse,
    PeriodAveragesResponse,
    SeriesSummary,
)
from ..platform.security import current_user_id
from ..platform.wiring import (
    get_chart_use_case,
    get_distribution_use_case,
    get_goal_forecast_use_case,
    get_period_averages_use_case,
    get_series_summary_use_case,
)

router: APIRouter = APIRouter()


@router.get("/weight-stats/averages", response_model=PeriodAveragesResponse)
async def get_period_averages(
    windows: List[int] = Query(
        list(DEFAULT_WINDOWS), description="Trailing window lengths in days."
    ),
    user_id: str = Depends(current_user_id),
    use_case: GetPeriodAveragesUseCase = Depends(get_period_averages_use_case),
) -> PeriodAveragesResponse:
    """Weight change and daily rate over trailing windows."""
    try:
        return await use_case(user_id, windows)
    except InvalidArgumentError as exc:
        raise HTTPException(status_code=422, detail={"error": str(exc)}) from exc


@router.get("/weight-stats/distribution", response_model=DistributionResult)
async def get_distribution(
    include_empty: Optional[bool] = Query(
        None, description="Keep 0.5 kg bins that hold no samples."
    ),
    user_id: str = Depends(current_user_id),
    use_case: GetDistributionUseCase = Depends(get_distribution_use_case),
) -> DistributionResult:
    return await use_case(user_id, include_empty)


@router.get("/weight-stats/forecast", response_model=GoalForecastResponse)
async def get_goal_forecast(
    goal_weight: Optional[float] = Query(
        None, gt=0, description="Target weight in kg; defaults to the profile goal."
    ),
    user_id: str = Depends(current_user_id),
    use_case: GetGoalForecastUseCase = Depends(get_goal_forecast_use_case),
) -> GoalForecastResponse:
    """Estimate when the goal weight is reached."""
    return await use_case(user_id, goal_weight)


@router.get("/weight-stats/summary", response_model=SeriesSummary)
async def get_series_summary(
    user_id: str = Depends(current_user_id),
    use_case: GetSeriesSummaryUseCase = Depends(get_series_summary_use_case),
) -> SeriesSummary:
    return await use_case(user_id)


@router.get("/weight-stats/chart", response_model=ChartData)
async def get_chart(
    window: int = Query(7, ge=1, description="Moving average window in samples."),
    user_id: str = Depends(current_user_id),
    use_case: GetChartUseCase = Depends(get_chart_use_case),
) -> ChartData:
    return await use_case(user_id, window)


@router.get("/bmi", response_model=BmiResult)
async def calculate_bmi_endpoint(
    weight_kg: float = Query(..., description="Body weight in kilograms."),
    height_cm: float = Query(..., description="Body height in centimeters."),
) -> BmiResult:
    """Stateless BMI calculator; non-positive inputs yield an empty result."""
    return bmi_result(weight_kg, height_cm)
