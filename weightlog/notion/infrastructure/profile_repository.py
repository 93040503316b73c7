from __future__ import annotations

from typing import Any, Dict, Optional

from ...models.profile import UserProfile
from ...platform.config import Settings
from ...services.interfaces import NotionAPI
from ..application.ports import ProfileRepository

_PROPERTY_NAMES = {
    "start_weight_kg": "Start Weight (kg)",
    "goal_weight_kg": "Goal Weight (kg)",
    "height_cm": "Height (cm)",
}


class NotionProfileAdapter(ProfileRepository):
    """Stores one profile page per user in the profile database."""

    def __init__(self, *, settings: Settings, client: NotionAPI) -> None:
        self._settings = settings
        self._client = client

    async def _find_page(self, user_id: str) -> Optional[Dict[str, Any]]:
        response = await self._client.query(
            self._settings.notion_profile_database_id,
            {
                "filter": {"property": "User", "title": {"equals": user_id}},
                "page_size": 1,
            },
        )
        results = response.get("results", [])
        return results[0] if results else None

    async def get_profile(self, user_id: str) -> UserProfile:
        page = await self._find_page(user_id)
        if page is None:
            return UserProfile()
        props: Dict[str, Any] = page.get("properties", {})
        values = {
            field: (props.get(name) or {}).get("number")
            for field, name in _PROPERTY_NAMES.items()
        }
        return UserProfile(**{k: v for k, v in values.items() if v and v > 0})

    async def save_profile(self, user_id: str, profile: UserProfile) -> UserProfile:
        properties: Dict[str, Any] = {
            name: {"number": getattr(profile, field)}
            for field, name in _PROPERTY_NAMES.items()
        }
        page = await self._find_page(user_id)
        if page is None:
            properties["User"] = {"title": [{"text": {"content": user_id}}]}
            await self._client.create(
                {
                    "parent": {"database_id": self._settings.notion_profile_database_id},
                    "properties": properties,
                }
            )
        else:
            await self._client.update(page["id"], {"properties": properties})
        return profile


def create_notion_profile_adapter(
    *, settings: Settings, client: NotionAPI
) -> ProfileRepository:
    """Create a Notion profile adapter without relying on FastAPI wiring."""
    return NotionProfileAdapter(settings=settings, client=client)
