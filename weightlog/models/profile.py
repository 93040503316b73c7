from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class UserProfile(BaseModel):
    """Per-user reference values used by summaries and forecasts."""

    start_weight_kg: Optional[float] = Field(
        None, gt=0, description="Weight when tracking started, in kilograms"
    )
    goal_weight_kg: Optional[float] = Field(
        None, gt=0, description="Target weight in kilograms"
    )
    height_cm: Optional[float] = Field(
        None, gt=0, description="Body height in centimeters"
    )
