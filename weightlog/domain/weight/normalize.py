"""Parsing of raw (date, weight) rows into a canonical sample series."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping, Sequence
from datetime import date, datetime, timedelta
from enum import Enum
from typing import Any, List, Optional

from ...models.samples import NormalizationResult, WeightSample
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

_ISO_DATE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")
_SLASH_DATE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$")
_TEXT_FORMATS = ("%Y/%m/%d", "%b %d, %Y", "%B %d, %Y", "%d %b %Y", "%d %B %Y")


class DateOrder(str, Enum):
    """How to read slash-delimited dates such as ``03/04/2024``."""

    AUTO = "auto"
    MONTH_FIRST = "month_first"
    DAY_FIRST = "day_first"


def _calendar_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def _parse_slash_date(first: int, second: int, year: int, order: DateOrder) -> Optional[date]:
    if order is DateOrder.MONTH_FIRST:
        return _calendar_date(year, first, second)
    if order is DateOrder.DAY_FIRST:
        return _calendar_date(year, second, first)

    month_first = _calendar_date(year, first, second)
    if month_first is not None:
        if first != second and first <= 12 and second <= 12:
            logger.debug(
                "Ambiguous date %s/%s/%s read as month first", first, second, year
            )
        return month_first
    return _calendar_date(year, second, first)


def parse_sample_date(value: Any, *, date_order: DateOrder = DateOrder.AUTO) -> Optional[date]:
    """Return the calendar day encoded by ``value`` or ``None`` when unreadable."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    match = _ISO_DATE.match(text)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return _calendar_date(year, month, day)

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    match = _SLASH_DATE.match(text)
    if match:
        first, second, year = (int(part) for part in match.groups())
        return _parse_slash_date(first, second, year, DateOrder(date_order))

    for fmt in _TEXT_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def parse_weight(value: Any) -> Optional[float]:
    """Return ``value`` as a finite positive float, or ``None``."""

    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    if not isinstance(value, (int, float, str)):
        return None
    try:
        weight = float(value)
    except ValueError:
        return None
    if not math.isfinite(weight) or weight <= 0:
        return None
    return weight


def _field(row: Any, *names: str) -> Any:
    for name in names:
        if isinstance(row, Mapping):
            if name in row:
                return row[name]
        elif hasattr(row, name):
            return getattr(row, name)
    return None


def sort_newest_first(samples: Sequence[WeightSample]) -> List[WeightSample]:
    """Sort by date descending, heaviest first within a shared date.

    The key is total over date and weight, so boundary samples picked from
    the result never depend on the order the caller passed them in.
    """

    return sorted(samples, key=lambda sample: (sample.date, sample.weight_kg), reverse=True)


def window_cutoff(newest: date, window_days: int) -> date:
    """First day of a ``window_days`` window ending on ``newest``, clamped to ``date.min``."""

    if window_days >= (newest - date.min).days:
        return date.min
    return newest - timedelta(days=window_days)


def days_after(start: date, days: int) -> Optional[date]:
    """``start`` moved forward by ``days``, or ``None`` past the last representable date."""

    if days > (date.max - start).days:
        return None
    return start + timedelta(days=days)


def require_series(series: Any) -> List[WeightSample]:
    """Validate a caller supplied series and return it sorted newest first."""

    if series is None or isinstance(series, (str, bytes, Mapping)) or not isinstance(
        series, Sequence
    ):
        raise InvalidArgumentError(
            f"Expected a sequence of samples, got {type(series).__name__}"
        )
    for sample in series:
        if not isinstance(sample, WeightSample):
            raise InvalidArgumentError(
                f"Expected WeightSample items, got {type(sample).__name__}"
            )
    return sort_newest_first(series)


def normalize_samples(
    raw_samples: Sequence[Any], *, date_order: DateOrder = DateOrder.AUTO
) -> NormalizationResult:
    """Parse raw rows into samples sorted newest first.

    Rows whose date or weight cannot be read are dropped and counted in
    ``skipped_count``. Duplicate dates are kept; deduplication is a storage
    concern.
    """

    if raw_samples is None or isinstance(raw_samples, (str, bytes, Mapping)) or not isinstance(
        raw_samples, Sequence
    ):
        raise InvalidArgumentError(
            f"Expected a sequence of raw samples, got {type(raw_samples).__name__}"
        )

    samples: List[WeightSample] = []
    skipped = 0
    for index, row in enumerate(raw_samples):
        day = parse_sample_date(_field(row, "date"), date_order=date_order)
        weight = parse_weight(_field(row, "weight_kg", "weight"))
        if day is None or weight is None:
            logger.warning("Skipping sample %d with unreadable date or weight", index)
            skipped += 1
            continue
        note = _field(row, "note")
        sample_id = _field(row, "id")
        samples.append(
            WeightSample(
                date=day,
                weight_kg=weight,
                note=note if isinstance(note, str) else None,
                id=str(sample_id) if sample_id is not None else None,
            )
        )

    return NormalizationResult(samples=sort_newest_first(samples), skipped_count=skipped)
