from .config import Settings, get_settings
from .security import api_key_header, current_user_id, verify_api_key
from .clients import RedisClient, get_redis

__all__ = [
    "Settings",
    "get_settings",
    "api_key_header",
    "current_user_id",
    "verify_api_key",
    "RedisClient",
    "get_redis",
]
