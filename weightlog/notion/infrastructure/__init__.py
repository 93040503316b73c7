"""Infrastructure helpers for Notion storage."""

from .profile_repository import NotionProfileAdapter, create_notion_profile_adapter
from .weight_repository import NotionWeightAdapter, create_notion_weight_adapter

__all__ = [
    "NotionProfileAdapter",
    "NotionWeightAdapter",
    "create_notion_profile_adapter",
    "create_notion_weight_adapter",
]
