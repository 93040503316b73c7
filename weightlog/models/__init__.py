from .profile import UserProfile
from .responses import OperationStatus
from .samples import (
    CsvImportResult,
    ImportSummary,
    NormalizationResult,
    WeightSample,
    WeightSampleCreate,
    WeightSampleUpdate,
)
from .share import ShareLink, ShareSnapshot
from .statistics import (
    BmiCategory,
    BmiResult,
    ChartData,
    ChartPoint,
    DistributionResult,
    ForecastResult,
    GoalForecastResponse,
    GoalProgress,
    LinearRegressionResult,
    PeriodAverageResult,
    PeriodAveragesResponse,
    RegressionForecast,
    SeriesSummary,
)

__all__ = [
    'WeightSample',
    'WeightSampleCreate',
    'WeightSampleUpdate',
    'NormalizationResult',
    'CsvImportResult',
    'ImportSummary',
    'UserProfile',
    'ShareSnapshot',
    'ShareLink',
    'OperationStatus',
    'PeriodAverageResult',
    'PeriodAveragesResponse',
    'DistributionResult',
    'ForecastResult',
    'GoalProgress',
    'GoalForecastResponse',
    'LinearRegressionResult',
    'RegressionForecast',
    'BmiCategory',
    'BmiResult',
    'ChartPoint',
    'ChartData',
    'SeriesSummary',
]
