"""Shared test fixtures and doubles."""

from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from weightlog import main
from weightlog.platform.clients import RedisClient, get_redis
from weightlog.platform.config import Settings, get_settings
from weightlog.services.interfaces import NotionAPI
from weightlog.services.notion import get_notion_client

from tests.fakes import NotionDatabaseFake


_MISSING = object()


class RedisFake(RedisClient):
    """In-memory Redis double that records interactions."""

    def __init__(self) -> None:
        self.store: Dict[str, str] = {}
        self._expected_sets: list[tuple[str | None, object]] = []
        self._last_get: str | None = None
        self._last_set: tuple[str, str, Optional[int]] | None = None
        self.expirations: Dict[str, Optional[int]] = {}

    def expect_set(self, key: str | None = None, *, ex: object = _MISSING) -> "RedisFake":
        """Queue an expected ``set`` call."""

        self._expected_sets.append((key, ex))
        return self

    def assert_last_get(self, key: str) -> None:
        assert self._last_get == key, f"Expected last get for {key!r}, saw {self._last_get!r}"

    def assert_last_set(self, key: str, *, ex: Optional[int] = None) -> None:
        assert self._last_set is not None, "No set() call was recorded"
        last_key, _, last_ex = self._last_set
        assert last_key == key, f"Expected last set for {key!r}, saw {last_key!r}"
        if ex is not None:
            assert last_ex == ex, f"Expected last set ex {ex!r}, saw {last_ex!r}"

    def get(self, key: str) -> Optional[str]:
        self._last_get = key
        return self.store.get(key)

    def set(self, key: str, value: str, ex: Optional[int] = None) -> None:
        self._last_set = (key, value, ex)
        if self._expected_sets:
            expected_key, expected_ex = self._expected_sets.pop(0)
            if expected_key is not None and expected_key != key:
                raise AssertionError(
                    f"Expected set({expected_key!r}, …) but received set({key!r}, …)"
                )
            if expected_ex is not _MISSING and expected_ex != ex:
                raise AssertionError(
                    f"Expected set expiration {expected_ex!r}, saw {ex!r}"
                )
        self.store[key] = value
        self.expirations[key] = ex


@dataclass
class _Expectation:
    expected: Dict[str, Any]
    returns: Any = None
    raises: Exception | None = None


class NotionAPIStub(NotionAPI):
    """Stubbed Notion API with expectation helpers."""

    def __init__(self) -> None:
        self._expectations: Dict[str, list[_Expectation]] = {
            "query": [],
            "create": [],
            "update": [],
            "archive": [],
            "retrieve": [],
        }
        self._last_calls: Dict[str, Dict[str, Any]] = {}
        self._call_history: Dict[str, list[Dict[str, Any]]] = {}

    def expect_query(
        self,
        database_id: str | None = None,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["query"].append(
            _Expectation({"database_id": database_id, "payload": payload}, returns, raises)
        )
        return self

    def expect_create(
        self,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["create"].append(_Expectation({"payload": payload}, returns, raises))
        return self

    def expect_update(
        self,
        page_id: str | None = None,
        payload: Dict[str, Any] | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["update"].append(
            _Expectation({"page_id": page_id, "payload": payload}, returns, raises)
        )
        return self

    def expect_archive(
        self,
        page_id: str | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["archive"].append(_Expectation({"page_id": page_id}, returns, raises))
        return self

    def expect_retrieve(
        self,
        page_id: str | None = None,
        *,
        returns: Any = None,
        raises: Exception | None = None,
    ) -> "NotionAPIStub":
        self._expectations["retrieve"].append(_Expectation({"page_id": page_id}, returns, raises))
        return self

    def assert_last_query(
        self, database_id: str | None = None, payload: Dict[str, Any] | None = None
    ) -> None:
        self._assert_last_call("query", database_id, payload)

    def assert_last_create(self, payload: Dict[str, Any] | None = None) -> None:
        self._assert_last_call("create", payload=payload)

    def assert_last_update(
        self, page_id: str | None = None, payload: Dict[str, Any] | None = None
    ) -> None:
        self._assert_last_call("update", page_id, payload)

    def assert_last_archive(self, page_id: str | None = None) -> None:
        self._assert_last_call("archive", page_id)

    def calls(self, name: str) -> list[Dict[str, Any]]:
        return list(self._call_history.get(name, []))

    async def query(self, database_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._handle_call("query", {"database_id": database_id, "payload": payload})

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._handle_call("create", {"payload": payload})

    async def update(self, page_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._handle_call("update", {"page_id": page_id, "payload": payload})

    async def archive(self, page_id: str) -> Dict[str, Any]:
        return await self._handle_call("archive", {"page_id": page_id})

    async def retrieve(self, page_id: str) -> Dict[str, Any]:
        return await self._handle_call("retrieve", {"page_id": page_id})

    async def _handle_call(self, name: str, call: Dict[str, Any]) -> Any:
        self._last_calls[name] = call
        self._call_history.setdefault(name, []).append(call)
        expectations = self._expectations[name]
        if expectations:
            expectation = expectations.pop(0)
            for key, expected_value in expectation.expected.items():
                if expected_value is not None and call.get(key) != expected_value:
                    raise AssertionError(
                        f"Expected {name} {key}={expected_value!r} but got {call.get(key)!r}"
                    )
            if expectation.raises:
                raise expectation.raises
            return expectation.returns
        return {}

    def _assert_last_call(
        self,
        name: str,
        identifier: str | None = None,
        payload: Dict[str, Any] | None = None,
    ) -> None:
        assert name in self._last_calls, f"No {name} call was recorded"
        recorded = self._last_calls[name]
        if identifier is not None:
            target_key = "database_id" if name == "query" else "page_id"
            assert (
                recorded.get(target_key) == identifier
            ), f"Expected last {name} {target_key}={identifier!r}"
        if payload is not None:
            assert recorded.get("payload") == payload, f"Expected last {name} payload to match"


@pytest.fixture
def settings() -> Settings:
    """Canonical settings instance reused across tests."""

    return Settings(
        api_key="test-key",
        notion_secret="notion-secret",
        notion_weight_database_id="weight-db",
        notion_profile_database_id="profile-db",
        upstash_redis_rest_url="https://redis.example.com",
        upstash_redis_rest_token="redis-token",
        public_base_url="https://weights.example.com",
    )


@pytest.fixture
def redis_fake() -> RedisFake:
    return RedisFake()


@pytest.fixture
def notion_api_stub() -> NotionAPIStub:
    return NotionAPIStub()


@pytest.fixture
def notion_fake(settings: Settings) -> NotionDatabaseFake:
    """In-memory Notion backing both the weight and the profile database."""

    return NotionDatabaseFake(settings)


@pytest.fixture
def app(
    settings: Settings,
    redis_fake: RedisFake,
    notion_fake: NotionDatabaseFake,
) -> Iterator[FastAPI]:
    """Configured FastAPI application instance for integration tests."""

    app = main.app
    overrides = {
        get_settings: lambda: settings,
        get_redis: lambda: redis_fake,
        get_notion_client: lambda: notion_fake,
    }
    app.dependency_overrides.update(overrides)
    try:
        yield app
    finally:
        for dependency in overrides:
            app.dependency_overrides.pop(dependency, None)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    """Async HTTP client bound to the FastAPI app."""

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as api_client:
        yield api_client
