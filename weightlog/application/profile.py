from __future__ import annotations

from dataclasses import dataclass

from ..models.profile import UserProfile
from ..notion.application.ports import ProfileRepository


@dataclass
class GetProfileUseCase:
    repository: ProfileRepository

    async def __call__(self, user_id: str) -> UserProfile:
        return await self.repository.get_profile(user_id)


@dataclass
class UpdateProfileUseCase:
    """Replace the stored profile; omitted fields are cleared."""

    repository: ProfileRepository

    async def __call__(self, user_id: str, profile: UserProfile) -> UserProfile:
        return await self.repository.save_profile(user_id, profile)


__all__ = ["GetProfileUseCase", "UpdateProfileUseCase"]
