"""Ports for persisting share snapshots."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...models.share import ShareSnapshot


class ShareStore(ABC):
    """Interface describing share snapshot storage."""

    @abstractmethod
    def save(self, snapshot: ShareSnapshot, ttl_seconds: int) -> None:
        """Store a snapshot that disappears after ``ttl_seconds``."""

    @abstractmethod
    def load(self, share_id: str) -> Optional[ShareSnapshot]:
        """Return the stored snapshot or ``None`` when unknown."""
