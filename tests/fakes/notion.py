"""Helpers and doubles for Notion interactions in tests."""

from __future__ import annotations

from copy import deepcopy
from itertools import count
from typing import Any, Dict, Iterable, List, Tuple

from fastapi import HTTPException

from weightlog.platform.config import Settings
from weightlog.services.interfaces import NotionAPI


def _title(page: Dict[str, Any], name: str) -> str:
    title = page.get("properties", {}).get(name, {}).get("title", [])
    return title[0].get("text", {}).get("content", "") if title else ""


def _date(page: Dict[str, Any], name: str) -> str:
    payload = page.get("properties", {}).get(name, {}).get("date") or {}
    return (payload.get("start") or "")[:10]


def _matches(page: Dict[str, Any], condition: Dict[str, Any] | None) -> bool:
    if not condition:
        return True
    if "and" in condition:
        return all(_matches(page, part) for part in condition["and"])
    name = condition["property"]
    if "title" in condition:
        return _title(page, name) == condition["title"]["equals"]
    if "date" in condition:
        value = _date(page, name)
        bounds = condition["date"]
        if "on_or_after" in bounds and value < bounds["on_or_after"]:
            return False
        if "on_or_before" in bounds and value > bounds["on_or_before"]:
            return False
        return True
    raise AssertionError(f"Unsupported filter {condition!r}")


class NotionDatabaseFake(NotionAPI):
    """In-memory Notion API that understands the filters the adapters send."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._ids = count(1)
        self.pages: Dict[str, Dict[str, Any]] = {}
        self.queries: List[Tuple[str, Dict[str, Any]]] = []

    def with_pages(
        self, database_id: str, pages: Iterable[Dict[str, Any]]
    ) -> "NotionDatabaseFake":
        """Seed ``database_id`` with prebuilt pages."""

        for page in pages:
            stored = deepcopy(page)
            stored.setdefault("id", f"seed-{next(self._ids)}")
            stored["parent"] = {"database_id": database_id}
            stored.setdefault("archived", False)
            self.pages[stored["id"]] = stored
        return self

    def with_weights(self, pages: Iterable[Dict[str, Any]]) -> "NotionDatabaseFake":
        return self.with_pages(self._settings.notion_weight_database_id, pages)

    def with_profile(self, page: Dict[str, Any]) -> "NotionDatabaseFake":
        return self.with_pages(self._settings.notion_profile_database_id, [page])

    def live_pages(self, database_id: str) -> List[Dict[str, Any]]:
        return [
            page
            for page in self.pages.values()
            if page["parent"]["database_id"] == database_id and not page.get("archived")
        ]

    async def query(self, database_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        self.queries.append((database_id, deepcopy(payload)))
        results = [
            page for page in self.live_pages(database_id) if _matches(page, payload.get("filter"))
        ]
        for sort in reversed(payload.get("sorts", [])):
            results.sort(
                key=lambda page: _date(page, sort["property"]),
                reverse=sort.get("direction") == "descending",
            )
        page_size = payload.get("page_size")
        if page_size:
            results = results[:page_size]
        return {"results": deepcopy(results), "has_more": False, "next_cursor": None}

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        page_id = f"page-{next(self._ids)}"
        page = {
            "id": page_id,
            "parent": deepcopy(payload["parent"]),
            "properties": deepcopy(payload.get("properties", {})),
            "archived": False,
        }
        self.pages[page_id] = page
        return deepcopy(page)

    async def update(self, page_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        page = self._require(page_id)
        page["properties"].update(deepcopy(payload.get("properties", {})))
        return deepcopy(page)

    async def archive(self, page_id: str) -> Dict[str, Any]:
        page = self._require(page_id)
        page["archived"] = True
        return deepcopy(page)

    async def retrieve(self, page_id: str) -> Dict[str, Any]:
        return deepcopy(self._require(page_id))

    def _require(self, page_id: str) -> Dict[str, Any]:
        if page_id not in self.pages:
            raise HTTPException(status_code=404, detail="Could not find page")
        return self.pages[page_id]
