"""CSV export and best-effort CSV import of weight samples."""

from __future__ import annotations

import csv
import io
import logging
from typing import List, Optional, Sequence, Tuple

from ...models.samples import CsvImportResult, WeightSample
from .errors import InvalidArgumentError
from .normalize import (
    DateOrder,
    parse_sample_date,
    parse_weight,
    require_series,
    sort_newest_first,
)

logger = logging.getLogger(__name__)

CSV_HEADER = ("Date", "Weight (kg)")
DATE_KEYWORDS = ("date", "day")
WEIGHT_KEYWORDS = ("weight", "kg", "lbs")


def _format_weight(weight: float) -> str:
    text = repr(float(weight))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def samples_to_csv(series: Sequence[WeightSample]) -> str:
    """Render samples oldest first under a ``Date,Weight (kg)`` header."""

    ordered = list(reversed(require_series(series)))
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for sample in ordered:
        writer.writerow([sample.date.isoformat(), _format_weight(sample.weight_kg)])
    return buffer.getvalue()


def _detect_columns(header: List[str]) -> Tuple[int, int, bool]:
    date_index: Optional[int] = None
    weight_index: Optional[int] = None
    for index, cell in enumerate(header):
        lowered = cell.strip().lower()
        if date_index is None and any(word in lowered for word in DATE_KEYWORDS):
            date_index = index
        if weight_index is None and any(word in lowered for word in WEIGHT_KEYWORDS):
            weight_index = index
    matched = date_index is not None or weight_index is not None
    return (
        date_index if date_index is not None else 0,
        weight_index if weight_index is not None else 1,
        matched,
    )


def _has_digits(row: List[str]) -> bool:
    return any(char.isdigit() for cell in row for char in cell)


def _parse_row(
    row: List[str], date_index: int, weight_index: int, date_order: DateOrder
) -> Optional[WeightSample]:
    if len(row) < 2 or max(date_index, weight_index) >= len(row):
        return None
    day = parse_sample_date(row[date_index], date_order=date_order)
    weight = parse_weight(row[weight_index])
    if day is None or weight is None:
        return None
    return WeightSample(date=day, weight_kg=weight)


def samples_from_csv(text: str, *, date_order: DateOrder = DateOrder.AUTO) -> CsvImportResult:
    """Parse CSV text, skipping and counting every unreadable row.

    The first non-blank row is a header when one of its cells names a date or
    weight column, or when it is unreadable and holds no digits at all. Any
    other unreadable first row is a bad data row and is counted. Without a
    header match the date and weight are taken from columns 0 and 1.
    """

    if not isinstance(text, str):
        raise InvalidArgumentError(f"Expected CSV text, got {type(text).__name__}")

    rows = [
        (line_number, row)
        for line_number, row in enumerate(csv.reader(io.StringIO(text)), start=1)
        if any(cell.strip() for cell in row)
    ]
    if not rows:
        return CsvImportResult(samples=[], skipped_count=0)

    _, first_row = rows[0]
    date_index, weight_index, matched = _detect_columns(first_row)
    if matched or (
        _parse_row(first_row, date_index, weight_index, date_order) is None
        and not _has_digits(first_row)
    ):
        rows = rows[1:]

    samples: List[WeightSample] = []
    skipped = 0
    for line_number, row in rows:
        sample = _parse_row(row, date_index, weight_index, date_order)
        if sample is None:
            logger.warning("Skipping unreadable CSV row %d: %s", line_number, ",".join(row))
            skipped += 1
            continue
        samples.append(sample)

    return CsvImportResult(samples=sort_newest_first(samples), skipped_count=skipped)
