from __future__ import annotations

from fastapi import APIRouter, Depends

from ..application.profile import GetProfileUseCase, UpdateProfileUseCase
from ..models.profile import UserProfile
from ..platform.security import current_user_id
from ..platform.wiring import get_profile_use_case, get_update_profile_use_case

router: APIRouter = APIRouter()


@router.get("/profile", response_model=UserProfile)
async def get_profile(
    user_id: str = Depends(current_user_id),
    use_case: GetProfileUseCase = Depends(get_profile_use_case),
) -> UserProfile:
    return await use_case(user_id)


@router.put("/profile", response_model=UserProfile)
async def update_profile(
    profile: UserProfile,
    user_id: str = Depends(current_user_id),
    use_case: UpdateProfileUseCase = Depends(get_update_profile_use_case),
) -> UserProfile:
    return await use_case(user_id, profile)
