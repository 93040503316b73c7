"""Application layer helpers for share links."""

from .ports import ShareStore
from .services import create_share, load_share

__all__ = ["ShareStore", "create_share", "load_share"]
