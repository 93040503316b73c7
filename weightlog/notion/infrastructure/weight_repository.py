from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from fastapi import HTTPException

from ...models.samples import WeightSample, WeightSampleCreate, WeightSampleUpdate
from ...platform.config import Settings
from ...services.interfaces import NotionAPI
from ..application.ports import SampleRepository

logger = logging.getLogger(__name__)


def _user_filter(user_id: str) -> Dict[str, Any]:
    return {"property": "User", "title": {"equals": user_id}}


def _sample_properties(
    *, weight_date: Optional[date], weight_kg: Optional[float], note: Optional[str]
) -> Dict[str, Any]:
    properties: Dict[str, Any] = {}
    if weight_date is not None:
        properties["Date"] = {"date": {"start": weight_date.isoformat()}}
    if weight_kg is not None:
        properties["Weight (kg)"] = {"number": weight_kg}
    if note is not None:
        properties["Note"] = {"rich_text": [{"text": {"content": note}}]}
    return properties


class NotionWeightAdapter(SampleRepository):
    """Concrete Notion adapter storing one page per weight sample."""

    def __init__(self, *, settings: Settings, client: NotionAPI) -> None:
        self._settings = settings
        self._client = client

    async def list_samples(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[WeightSample]:
        conditions: List[Dict[str, Any]] = [_user_filter(user_id)]
        if start_date is not None:
            conditions.append(
                {"property": "Date", "date": {"on_or_after": start_date.isoformat()}}
            )
        if end_date is not None:
            conditions.append(
                {"property": "Date", "date": {"on_or_before": end_date.isoformat()}}
            )
        payload: Dict[str, Any] = {
            "filter": {"and": conditions},
            "sorts": [{"property": "Date", "direction": "descending"}],
        }

        samples: List[WeightSample] = []
        while True:
            response: Dict[str, Any] = await self._client.query(
                self._settings.notion_weight_database_id, payload
            )
            for page in response.get("results", []):
                sample = self._parse_page(page)
                if sample is not None:
                    samples.append(sample)
            if not response.get("has_more"):
                break
            payload["start_cursor"] = response.get("next_cursor")
        return samples

    async def get_sample(self, user_id: str, sample_id: str) -> Optional[WeightSample]:
        try:
            page = await self._client.retrieve(sample_id)
        except HTTPException as exc:
            if exc.status_code in (400, 404):
                return None
            raise
        if not page or page.get("archived"):
            return None
        if self._page_owner(page) != user_id:
            return None
        return self._parse_page(page)

    async def create_sample(self, user_id: str, sample: WeightSampleCreate) -> WeightSample:
        properties = {
            "User": {"title": [{"text": {"content": user_id}}]},
            **_sample_properties(
                weight_date=sample.date, weight_kg=sample.weight_kg, note=sample.note
            ),
        }
        created = await self._client.create(
            {
                "parent": {"database_id": self._settings.notion_weight_database_id},
                "properties": properties,
            }
        )
        return WeightSample(
            id=created.get("id"),
            date=sample.date,
            weight_kg=sample.weight_kg,
            note=sample.note,
        )

    async def update_sample(
        self, user_id: str, sample_id: str, changes: WeightSampleUpdate
    ) -> Optional[WeightSample]:
        existing = await self.get_sample(user_id, sample_id)
        if existing is None:
            return None
        properties = _sample_properties(
            weight_date=changes.date, weight_kg=changes.weight_kg, note=changes.note
        )
        if properties:
            await self._client.update(sample_id, {"properties": properties})
        return existing.model_copy(update=changes.model_dump(exclude_none=True))

    async def delete_sample(self, user_id: str, sample_id: str) -> bool:
        existing = await self.get_sample(user_id, sample_id)
        if existing is None:
            return False
        await self._client.archive(sample_id)
        return True

    @staticmethod
    def _page_owner(page: Dict[str, Any]) -> str:
        title = page.get("properties", {}).get("User", {}).get("title", [])
        if not title:
            return ""
        return title[0].get("text", {}).get("content", "")

    @staticmethod
    def _parse_page(page: Dict[str, Any]) -> Optional[WeightSample]:
        props: Dict[str, Any] = page.get("properties", {})
        try:
            date_payload = props.get("Date", {}).get("date") or {}
            note_payload = props.get("Note", {}).get("rich_text", [])
            note = note_payload[0].get("text", {}).get("content") if note_payload else None
            return WeightSample(
                id=page.get("id"),
                date=(date_payload.get("start") or "")[:10],
                weight_kg=props.get("Weight (kg)", {}).get("number"),
                note=note or None,
            )
        except (AttributeError, TypeError, ValueError):
            logger.warning("Ignoring unreadable Notion weight page %s", page.get("id"))
            return None


def create_notion_weight_adapter(
    *, settings: Settings, client: NotionAPI
) -> SampleRepository:
    """Create a Notion weight adapter without relying on FastAPI wiring."""
    return NotionWeightAdapter(settings=settings, client=client)
