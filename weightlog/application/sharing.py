from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Optional

from ..models.share import ShareLink, ShareSnapshot
from ..notion.application.ports import ProfileRepository, SampleRepository
from ..sharing.application.ports import ShareStore
from ..sharing.application.services import (
    Clock,
    IdFactory,
    create_share,
    load_share,
    new_share_id,
    utc_now,
)


class ShareNotFoundError(Exception):
    """Raised when a share id is unknown or its snapshot has expired."""


def share_url(base_url: Optional[str], share_id: str) -> Optional[str]:
    if not base_url:
        return None
    return f"{base_url.rstrip('/')}/shares/{share_id}"


@dataclass
class CreateShareLinkUseCase:
    """Freeze the caller's samples and profile behind a short-lived link."""

    samples: SampleRepository
    profiles: ProfileRepository
    store: ShareStore
    ttl_seconds: int = 24 * 60 * 60
    base_url: Optional[str] = None
    clock: Clock = utc_now
    id_factory: IdFactory = new_share_id

    async def __call__(self, user_id: str) -> ShareLink:
        series, profile = await asyncio.gather(
            self.samples.list_samples(user_id), self.profiles.get_profile(user_id)
        )
        snapshot = create_share(
            self.store,
            user_id=user_id,
            samples=series,
            profile=profile,
            ttl_seconds=self.ttl_seconds,
            clock=self.clock,
            id_factory=self.id_factory,
        )
        return ShareLink(
            share_id=snapshot.share_id,
            expires_at=snapshot.expires_at,
            url=share_url(self.base_url, snapshot.share_id),
        )


@dataclass
class GetSharedSnapshotUseCase:
    store: ShareStore
    clock: Clock = utc_now

    def __call__(self, share_id: str) -> ShareSnapshot:
        snapshot = load_share(self.store, share_id, clock=self.clock)
        if snapshot is None:
            raise ShareNotFoundError(f"Share {share_id} not found")
        return snapshot


__all__ = [
    "CreateShareLinkUseCase",
    "GetSharedSnapshotUseCase",
    "ShareNotFoundError",
    "share_url",
]
