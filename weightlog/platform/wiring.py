"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from fastapi import Depends

from ..application.entries import (
    CreateSampleUseCase,
    DeleteSampleUseCase,
    ExportSamplesUseCase,
    ImportSamplesUseCase,
    ListSamplesUseCase,
    UpdateSampleUseCase,
)
from ..application.profile import GetProfileUseCase, UpdateProfileUseCase
from ..application.sharing import CreateShareLinkUseCase, GetSharedSnapshotUseCase
from ..application.statistics import (
    GetChartUseCase,
    GetDistributionUseCase,
    GetGoalForecastUseCase,
    GetPeriodAveragesUseCase,
    GetSeriesSummaryUseCase,
)
from ..notion.application.ports import ProfileRepository, SampleRepository
from ..notion.infrastructure.profile_repository import create_notion_profile_adapter
from ..notion.infrastructure.weight_repository import create_notion_weight_adapter
from ..services.interfaces import NotionAPI
from ..services.notion import get_notion_client
from ..sharing.application.ports import ShareStore
from ..sharing.infrastructure.redis_store import create_redis_share_store
from .clients import RedisClient, get_redis
from .config import Settings, get_settings


def provide_sample_repository(
    settings: Settings = Depends(get_settings),
    client: NotionAPI = Depends(get_notion_client),
) -> SampleRepository:
    return create_notion_weight_adapter(settings=settings, client=client)


def provide_profile_repository(
    settings: Settings = Depends(get_settings),
    client: NotionAPI = Depends(get_notion_client),
) -> ProfileRepository:
    return create_notion_profile_adapter(settings=settings, client=client)


def provide_share_store(redis: RedisClient = Depends(get_redis)) -> ShareStore:
    return create_redis_share_store(redis=redis)


def get_list_samples_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
) -> ListSamplesUseCase:
    return ListSamplesUseCase(repository)


def get_create_sample_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
) -> CreateSampleUseCase:
    return CreateSampleUseCase(repository)


def get_update_sample_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
) -> UpdateSampleUseCase:
    return UpdateSampleUseCase(repository)


def get_delete_sample_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
) -> DeleteSampleUseCase:
    return DeleteSampleUseCase(repository)


def get_export_samples_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
) -> ExportSamplesUseCase:
    return ExportSamplesUseCase(repository)


def get_import_samples_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
) -> ImportSamplesUseCase:
    return ImportSamplesUseCase(repository)


def get_period_averages_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
) -> GetPeriodAveragesUseCase:
    return GetPeriodAveragesUseCase(repository)


def get_distribution_use_case(
    repository: SampleRepository = Depends(provide_sample_repository),
    settings: Settings = Depends(get_settings),
) -> GetDistributionUseCase:
    return GetDistributionUseCase(
        repository, include_empty=settings.distribution_include_empty
    )


def get_goal_forecast_use_case(
    samples: SampleRepository = Depends(provide_sample_repository),
    profiles: ProfileRepository = Depends(provide_profile_repository),
    settings: Settings = Depends(get_settings),
) -> GetGoalForecastUseCase:
    return GetGoalForecastUseCase(
        samples=samples,
        profiles=profiles,
        trend_window_days=settings.forecast_trend_days,
    )


def get_series_summary_use_case(
    samples: SampleRepository = Depends(provide_sample_repository),
    profiles: ProfileRepository = Depends(provide_profile_repository),
) -> GetSeriesSummaryUseCase:
    return GetSeriesSummaryUseCase(samples=samples, profiles=profiles)


def get_chart_use_case(
    samples: SampleRepository = Depends(provide_sample_repository),
    profiles: ProfileRepository = Depends(provide_profile_repository),
) -> GetChartUseCase:
    return GetChartUseCase(samples=samples, profiles=profiles)


def get_profile_use_case(
    repository: ProfileRepository = Depends(provide_profile_repository),
) -> GetProfileUseCase:
    return GetProfileUseCase(repository)


def get_update_profile_use_case(
    repository: ProfileRepository = Depends(provide_profile_repository),
) -> UpdateProfileUseCase:
    return UpdateProfileUseCase(repository)


def get_create_share_link_use_case(
    samples: SampleRepository = Depends(provide_sample_repository),
    profiles: ProfileRepository = Depends(provide_profile_repository),
    store: ShareStore = Depends(provide_share_store),
    settings: Settings = Depends(get_settings),
) -> CreateShareLinkUseCase:
    return CreateShareLinkUseCase(
        samples=samples,
        profiles=profiles,
        store=store,
        ttl_seconds=settings.share_ttl_seconds,
        base_url=settings.public_base_url,
    )


def get_shared_snapshot_use_case(
    store: ShareStore = Depends(provide_share_store),
) -> GetSharedSnapshotUseCase:
    return GetSharedSnapshotUseCase(store)


__all__ = [
    "provide_sample_repository",
    "provide_profile_repository",
    "provide_share_store",
    "get_list_samples_use_case",
    "get_create_sample_use_case",
    "get_update_sample_use_case",
    "get_delete_sample_use_case",
    "get_export_samples_use_case",
    "get_import_samples_use_case",
    "get_period_averages_use_case",
    "get_distribution_use_case",
    "get_goal_forecast_use_case",
    "get_series_summary_use_case",
    "get_chart_use_case",
    "get_profile_use_case",
    "get_update_profile_use_case",
    "get_create_share_link_use_case",
    "get_shared_snapshot_use_case",
]
