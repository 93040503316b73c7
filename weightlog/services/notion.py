from __future__ import annotations

import logging
from typing import Any, Dict

import httpx
from fastapi import Depends, HTTPException

from ..platform.config import Settings, get_settings
from .interfaces import NotionAPI

logger = logging.getLogger(__name__)

NOTION_API_URL = "https://api.notion.com/v1"
NOTION_VERSION = "2022-06-28"


def _error_code(response: httpx.Response) -> str:
    """Notion's machine readable error code, or the bare status when absent."""

    try:
        body = response.json()
    except ValueError:
        return str(response.status_code)
    if isinstance(body, dict) and body.get("code"):
        return str(body["code"])
    return str(response.status_code)


class NotionClient(NotionAPI):
    """Notion page client used by the weight and profile adapters."""

    def __init__(self, *, settings: Settings) -> None:
        self._headers: Dict[str, str] = {
            "Authorization": f"Bearer {settings.notion_secret}",
            "Content-Type": "application/json",
            "Notion-Version": NOTION_VERSION,
        }
        self._timeout = settings.notion_timeout_seconds

    async def _send(self, method: str, path: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=NOTION_API_URL, headers=self._headers, timeout=self._timeout
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.TimeoutException as exc:
            logger.warning("Notion %s %s timed out after %ss", method, path, self._timeout)
            raise HTTPException(
                status_code=504, detail={"error": "Notion request timed out"}
            ) from exc

        if response.status_code != 200:
            code = _error_code(response)
            logger.warning(
                "Notion %s %s failed with %s (%s)", method, path, response.status_code, code
            )
            raise HTTPException(
                status_code=response.status_code,
                detail={"error": "Notion request failed", "code": code},
            )
        return response.json()

    async def query(self, database_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._send("POST", f"/databases/{database_id}/query", json=payload)

    async def create(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._send("POST", "/pages", json=payload)

    async def update(self, page_id: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return await self._send("PATCH", f"/pages/{page_id}", json=payload)

    async def archive(self, page_id: str) -> Dict[str, Any]:
        return await self._send("PATCH", f"/pages/{page_id}", json={"archived": True})

    async def retrieve(self, page_id: str) -> Dict[str, Any]:
        return await self._send("GET", f"/pages/{page_id}")


def get_notion_client(settings: Settings = Depends(get_settings)) -> NotionAPI:
    """Dependency that provides a configured Notion API client."""

    return NotionClient(settings=settings)
