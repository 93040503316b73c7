"""Stateless weight statistics."""

from .averages import DEFAULT_WINDOWS, period_average, period_averages
from .bmi import bmi_category, bmi_result, calculate_bmi
from .chart import build_chart
from .csv_io import samples_from_csv, samples_to_csv
from .distribution import weight_distribution
from .errors import InvalidArgumentError
from .forecast import forecast_goal, goal_progress
from .normalize import DateOrder, normalize_samples, parse_sample_date, parse_weight
from .regression import linear_regression, regression_projection
from .summary import summarize_series

__all__ = [
    "DEFAULT_WINDOWS",
    "DateOrder",
    "InvalidArgumentError",
    "bmi_category",
    "bmi_result",
    "build_chart",
    "calculate_bmi",
    "forecast_goal",
    "goal_progress",
    "linear_regression",
    "normalize_samples",
    "parse_sample_date",
    "parse_weight",
    "period_average",
    "period_averages",
    "regression_projection",
    "samples_from_csv",
    "samples_to_csv",
    "summarize_series",
    "weight_distribution",
]
