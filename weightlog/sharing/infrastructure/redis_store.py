"""Redis-backed implementation of the share store port."""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from ...models.share import ShareSnapshot
from ...platform.clients import RedisClient
from ..application.ports import ShareStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "share:"


class RedisShareStore(ShareStore):
    """Keep share snapshots as JSON strings with a Redis expiry."""

    def __init__(self, redis: RedisClient) -> None:
        self._redis = redis

    def save(self, snapshot: ShareSnapshot, ttl_seconds: int) -> None:
        self._redis.set(
            f"{KEY_PREFIX}{snapshot.share_id}", snapshot.model_dump_json(), ex=ttl_seconds
        )

    def load(self, share_id: str) -> Optional[ShareSnapshot]:
        raw = self._redis.get(f"{KEY_PREFIX}{share_id}")
        if not raw:
            return None
        try:
            return ShareSnapshot.model_validate_json(raw)
        except ValidationError:
            logger.exception("Stored share %s is not a valid snapshot", share_id)
            return None


def create_redis_share_store(*, redis: RedisClient) -> ShareStore:
    """Create a share store without FastAPI dependencies."""
    return RedisShareStore(redis)
