from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.weight.normalize import DateOrder


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Hosting environments define upper-case names (``NOTION_SECRET``), so
    # matching is case insensitive. A local ``.env`` is read when present.
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    api_key: str
    notion_secret: str
    notion_weight_database_id: str
    notion_profile_database_id: str
    upstash_redis_rest_url: str
    upstash_redis_rest_token: str

    notion_timeout_seconds: float = 30.0

    share_ttl_seconds: int = 24 * 60 * 60
    public_base_url: Optional[str] = None
    csv_date_order: DateOrder = DateOrder.AUTO
    distribution_include_empty: bool = False
    forecast_trend_days: int = 7


@lru_cache()
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
