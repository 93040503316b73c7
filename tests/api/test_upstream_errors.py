"""Friendly responses when Notion or Redis cannot be reached."""

from __future__ import annotations

from typing import Optional

import httpx
import pytest
from fastapi import FastAPI

from weightlog.platform.clients import get_redis
from weightlog.platform.config import Settings
from weightlog.services.notion import get_notion_client

from tests.conftest import NotionAPIStub

pytestmark = pytest.mark.asyncio

FRIENDLY_MESSAGE = (
    "Could not connect to an upstream dependency service. Please try again shortly."
)


class UnreachableRedis:
    def get(self, key: str) -> Optional[str]:
        raise httpx.ConnectError(
            "connection failed", request=httpx.Request("POST", "https://redis.example.com")
        )

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        raise httpx.ConnectError(
            "connection failed", request=httpx.Request("POST", "https://redis.example.com")
        )


async def test_notion_connection_error_is_503(
    app: FastAPI,
    client: httpx.AsyncClient,
    notion_api_stub: NotionAPIStub,
    settings: Settings,
) -> None:
    app.dependency_overrides[get_notion_client] = lambda: notion_api_stub
    notion_api_stub.expect_query(
        database_id=settings.notion_weight_database_id,
        raises=httpx.ConnectError(
            "connection failed",
            request=httpx.Request(
                "POST", "https://api.notion.com/v1/databases/weight-db/query"
            ),
        ),
    )

    response = await client.get(
        "/v2/weight-stats/averages", headers={"x-api-key": settings.api_key}
    )

    assert response.status_code == 503
    assert response.json() == {
        "error": "UPSTREAM_CONNECTION_FAILED",
        "message": FRIENDLY_MESSAGE,
        "upstream_host": "api.notion.com",
    }


async def test_redis_connection_error_is_503(app: FastAPI, client: httpx.AsyncClient) -> None:
    app.dependency_overrides[get_redis] = lambda: UnreachableRedis()

    response = await client.get("/shares/abc")

    assert response.status_code == 503
    assert response.json()["upstream_host"] == "redis.example.com"
