"""Chart series with a trailing moving average."""

from __future__ import annotations

from collections import deque
from typing import List, Optional, Sequence

from ...models.profile import UserProfile
from ...models.samples import WeightSample
from ...models.statistics import ChartData, ChartPoint
from .normalize import require_series

MIN_AVERAGE_VALUES = 3


def build_chart(
    series: Sequence[WeightSample],
    *,
    profile: Optional[UserProfile] = None,
    window: int = 7,
) -> ChartData:
    """Return points oldest first, each with the average of the last ``window`` samples."""

    ordered = list(reversed(require_series(series)))
    queue: deque[float] = deque(maxlen=window)
    points: List[ChartPoint] = []
    for sample in ordered:
        queue.append(sample.weight_kg)
        average = sum(queue) / len(queue) if len(queue) >= MIN_AVERAGE_VALUES else None
        points.append(
            ChartPoint(date=sample.date, weight_kg=sample.weight_kg, moving_average=average)
        )

    profile = profile or UserProfile()
    return ChartData(
        points=points,
        start_weight=profile.start_weight_kg,
        goal_weight=profile.goal_weight_kg,
    )
