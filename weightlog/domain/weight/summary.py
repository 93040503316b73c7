"""Headline figures for a sample series."""

from __future__ import annotations

from typing import Optional, Sequence

from ...models.profile import UserProfile
from ...models.samples import WeightSample
from ...models.statistics import SeriesSummary
from .bmi import bmi_result
from .normalize import require_series


def summarize_series(
    series: Sequence[WeightSample], profile: Optional[UserProfile] = None
) -> SeriesSummary:
    ordered = require_series(series)
    if not ordered:
        return SeriesSummary()

    profile = profile or UserProfile()
    weights = [s.weight_kg for s in ordered]
    current = ordered[0].weight_kg

    last_change = current - ordered[1].weight_kg if len(ordered) > 1 else None
    total_change = (
        current - profile.start_weight_kg if profile.start_weight_kg is not None else None
    )

    return SeriesSummary(
        entry_count=len(ordered),
        first_date=ordered[-1].date,
        last_date=ordered[0].date,
        min_weight=min(weights),
        max_weight=max(weights),
        current_weight=current,
        last_change=last_change,
        total_change=total_change,
        bmi=bmi_result(current, profile.height_cm),
    )
