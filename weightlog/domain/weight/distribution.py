"""Histogram bucketing of weights."""

from __future__ import annotations

import math
from typing import Sequence

from ...models.samples import WeightSample
from ...models.statistics import DistributionResult
from .normalize import require_series

BIN_WIDTH = 0.5


def weight_distribution(
    series: Sequence[WeightSample], *, include_empty: bool = True
) -> DistributionResult:
    """Count samples per 0.5 kg bin between floor(min) and ceil(max)."""

    ordered = require_series(series)
    if not ordered:
        return DistributionResult()

    weights = [sample.weight_kg for sample in ordered]
    min_w = math.floor(min(weights))
    max_w = math.ceil(max(weights))
    bin_count = int((max_w - min_w) / BIN_WIDTH) + 1

    counts = [0] * bin_count
    for weight in weights:
        index = math.floor((weight - min_w) / BIN_WIDTH)
        counts[min(max(index, 0), bin_count - 1)] += 1

    ranges = []
    for index in range(bin_count):
        low = min_w + index * BIN_WIDTH
        ranges.append(f"{low:.1f}-{low + BIN_WIDTH:.1f}")

    if not include_empty:
        kept = [(label, count) for label, count in zip(ranges, counts) if count > 0]
        ranges = [label for label, _ in kept]
        counts = [count for _, count in kept]

    return DistributionResult(ranges=ranges, counts=counts)
