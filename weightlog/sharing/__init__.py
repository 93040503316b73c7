"""Read-only share links."""

from .application import ShareStore, create_share, load_share
from .infrastructure import RedisShareStore, create_redis_share_store

__all__ = [
    "ShareStore",
    "create_share",
    "load_share",
    "RedisShareStore",
    "create_redis_share_store",
]
