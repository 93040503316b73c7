"""Application services for read-only share links."""

from __future__ import annotations

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from ...models.profile import UserProfile
from ...models.samples import WeightSample
from ...models.share import ShareSnapshot
from .ports import ShareStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]
IdFactory = Callable[[], str]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_share_id() -> str:
    return secrets.token_urlsafe(12)


def create_share(
    store: ShareStore,
    *,
    user_id: str,
    samples: Sequence[WeightSample],
    profile: UserProfile,
    ttl_seconds: int,
    clock: Clock = utc_now,
    id_factory: IdFactory = new_share_id,
) -> ShareSnapshot:
    """Snapshot the user's data and store it for ``ttl_seconds``."""

    created_at = clock()
    snapshot = ShareSnapshot(
        share_id=id_factory(),
        shared_by=user_id,
        created_at=created_at,
        expires_at=created_at + timedelta(seconds=ttl_seconds),
        samples=list(samples),
        profile=profile,
    )
    store.save(snapshot, ttl_seconds)
    return snapshot


def load_share(
    store: ShareStore, share_id: str, *, clock: Clock = utc_now
) -> Optional[ShareSnapshot]:
    """Return a live snapshot; expired ones are treated as missing."""

    snapshot = store.load(share_id)
    if snapshot is None:
        return None
    if snapshot.is_expired(clock()):
        logger.info("Share %s expired at %s", share_id, snapshot.expires_at)
        return None
    return snapshot
