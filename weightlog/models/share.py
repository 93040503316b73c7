from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from .profile import UserProfile
from .samples import WeightSample


class ShareSnapshot(BaseModel):
    """Read-only copy of a user's data reachable through a share link."""

    share_id: str
    shared_by: str
    created_at: datetime
    expires_at: datetime
    samples: List[WeightSample]
    profile: UserProfile = Field(default_factory=UserProfile)

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class ShareLink(BaseModel):
    share_id: str
    expires_at: datetime
    url: Optional[str] = Field(
        None, description="Absolute link, when a public base URL is configured"
    )
