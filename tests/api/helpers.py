"""Factories and assertion helpers for API tests."""

from __future__ import annotations

from typing import Any, Dict

from weightlog.platform.config import Settings

from tests.builders import make_notion_weight_page


def auth_headers(settings: Settings, user: str | None = None) -> Dict[str, str]:
    headers = {"x-api-key": settings.api_key}
    if user is not None:
        headers["x-user-id"] = user
    return headers


def make_weight_payload(**overrides: Any) -> Dict[str, Any]:
    """Return a canonical weight entry request payload with optional overrides."""

    payload: Dict[str, Any] = {"date": "2024-01-01", "weight_kg": 80.0}
    payload.update(overrides)
    return payload


def make_weight_pages(*pairs: tuple[str, float], user: str = "default") -> list[Dict[str, Any]]:
    """Notion weight pages for ``(iso_day, weight)`` pairs with stable ids."""

    return [
        make_notion_weight_page(id=f"{user}-{day}", user=user, day=day, weight=weight)
        for day, weight in pairs
    ]


def assert_weight_entry(entry: Dict[str, Any], **expected: Any) -> None:
    """Assert the API response entry matches the provided expectations."""

    for key, value in expected.items():
        assert entry.get(key) == value, f"Expected entry {key}={value!r}, saw {entry.get(key)!r}"
