"""Infrastructure helpers for share links."""

from .redis_store import RedisShareStore, create_redis_share_store

__all__ = ["RedisShareStore", "create_redis_share_store"]
