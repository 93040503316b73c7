from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..application.sharing import (
    CreateShareLinkUseCase,
    GetSharedSnapshotUseCase,
    ShareNotFoundError,
)
from ..models.share import ShareLink, ShareSnapshot
from ..platform.security import current_user_id
from ..platform.wiring import get_create_share_link_use_case, get_shared_snapshot_use_case

router: APIRouter = APIRouter()
# Share links are opened by people without an API key.
public_router: APIRouter = APIRouter()


@router.post("/shares", status_code=201, response_model=ShareLink)
async def create_share_link(
    user_id: str = Depends(current_user_id),
    use_case: CreateShareLinkUseCase = Depends(get_create_share_link_use_case),
) -> ShareLink:
    """Create a read-only link to the current entries and profile."""
    return await use_case(user_id)


@public_router.get("/shares/{share_id}", response_model=ShareSnapshot)
async def read_share(
    share_id: str,
    use_case: GetSharedSnapshotUseCase = Depends(get_shared_snapshot_use_case),
) -> ShareSnapshot:
    try:
        return use_case(share_id)
    except ShareNotFoundError as exc:
        raise HTTPException(
            status_code=404, detail={"error": "Share not found or expired"}
        ) from exc
