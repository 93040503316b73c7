from __future__ import annotations

from datetime import date
from typing import List, Optional, Protocol, runtime_checkable

from ...models.profile import UserProfile
from ...models.samples import WeightSample, WeightSampleCreate, WeightSampleUpdate


@runtime_checkable
class SampleRepository(Protocol):
    """Port defining storage of weight samples per user."""

    async def list_samples(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[WeightSample]:
        """Return samples of a user, optionally bounded by dates (inclusive)."""

    async def get_sample(self, user_id: str, sample_id: str) -> Optional[WeightSample]:
        """Return a single sample or ``None`` when it does not exist."""

    async def create_sample(self, user_id: str, sample: WeightSampleCreate) -> WeightSample:
        """Persist a sample and return it with its identifier."""

    async def update_sample(
        self, user_id: str, sample_id: str, changes: WeightSampleUpdate
    ) -> Optional[WeightSample]:
        """Apply changes and return the updated sample, ``None`` when missing."""

    async def delete_sample(self, user_id: str, sample_id: str) -> bool:
        """Remove a sample; ``False`` when it did not exist."""


@runtime_checkable
class ProfileRepository(Protocol):
    """Port defining storage of per-user reference values."""

    async def get_profile(self, user_id: str) -> UserProfile:
        """Return the profile, empty when none was saved."""

    async def save_profile(self, user_id: str, profile: UserProfile) -> UserProfile:
        """Create or replace the profile of a user."""
