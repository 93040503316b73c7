from __future__ import annotations

import httpx
import pytest

from weightlog.platform.config import Settings

from tests.api.helpers import auth_headers
from tests.fakes import NotionDatabaseFake

pytestmark = pytest.mark.asyncio


async def test_profile_defaults_to_empty(client: httpx.AsyncClient, settings: Settings) -> None:
    response = await client.get("/v2/profile", headers=auth_headers(settings))

    assert response.status_code == 200
    assert response.json() == {
        "start_weight_kg": None,
        "goal_weight_kg": None,
        "height_cm": None,
    }


async def test_profile_round_trips_per_user(
    client: httpx.AsyncClient, settings: Settings, notion_fake: NotionDatabaseFake
) -> None:
    saved = await client.put(
        "/v2/profile",
        json={"goal_weight_kg": 75, "height_cm": 180},
        headers=auth_headers(settings, "alice"),
    )
    await client.put(
        "/v2/profile",
        json={"goal_weight_kg": 70, "height_cm": 180},
        headers=auth_headers(settings, "alice"),
    )
    alice = await client.get("/v2/profile", headers=auth_headers(settings, "alice"))
    bob = await client.get("/v2/profile", headers=auth_headers(settings, "bob"))

    assert saved.status_code == 200
    assert alice.json() == {"start_weight_kg": None, "goal_weight_kg": 70.0, "height_cm": 180.0}
    assert bob.json()["goal_weight_kg"] is None
    assert len(notion_fake.live_pages(settings.notion_profile_database_id)) == 1


async def test_profile_rejects_non_positive_values(
    client: httpx.AsyncClient, settings: Settings
) -> None:
    response = await client.put(
        "/v2/profile", json={"height_cm": -5}, headers=auth_headers(settings)
    )

    assert response.status_code == 422
