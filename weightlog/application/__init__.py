"""Application use cases orchestrating repositories and weight statistics."""

from .entries import (
    CreateSampleUseCase,
    DeleteSampleUseCase,
    DuplicateSampleError,
    ExportSamplesUseCase,
    ImportSamplesUseCase,
    ListSamplesUseCase,
    SampleNotFoundError,
    UpdateSampleUseCase,
)
from .profile import GetProfileUseCase, UpdateProfileUseCase
from .sharing import CreateShareLinkUseCase, GetSharedSnapshotUseCase, ShareNotFoundError
from .statistics import (
    GetChartUseCase,
    GetDistributionUseCase,
    GetGoalForecastUseCase,
    GetPeriodAveragesUseCase,
    GetSeriesSummaryUseCase,
)

__all__ = [
    "CreateSampleUseCase",
    "CreateShareLinkUseCase",
    "DeleteSampleUseCase",
    "DuplicateSampleError",
    "ExportSamplesUseCase",
    "GetChartUseCase",
    "GetDistributionUseCase",
    "GetGoalForecastUseCase",
    "GetPeriodAveragesUseCase",
    "GetProfileUseCase",
    "GetSeriesSummaryUseCase",
    "GetSharedSnapshotUseCase",
    "ImportSamplesUseCase",
    "ListSamplesUseCase",
    "SampleNotFoundError",
    "ShareNotFoundError",
    "UpdateProfileUseCase",
    "UpdateSampleUseCase",
]
