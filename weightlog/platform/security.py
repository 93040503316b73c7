from __future__ import annotations

from fastapi import Depends, Header, HTTPException, Security
from fastapi.security import APIKeyHeader

from .config import Settings, get_settings

DEFAULT_USER_ID = "default"

api_key_header: APIKeyHeader = APIKeyHeader(
    name="x-api-key", scheme_name="ApiKeyAuth", auto_error=False
)


def verify_api_key(
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    if not x_api_key or x_api_key != settings.api_key:
        raise HTTPException(status_code=401, detail={"error": "Unauthorized"})


def current_user_id(
    x_user_id: str | None = Header(
        None, description="Owner of the weight entries; defaults to a single user."
    ),
) -> str:
    user_id = (x_user_id or "").strip()
    return user_id or DEFAULT_USER_ID


__all__ = ["DEFAULT_USER_ID", "api_key_header", "current_user_id", "verify_api_key"]
