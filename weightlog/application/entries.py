from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Sequence

from ..domain.weight.csv_io import samples_from_csv, samples_to_csv
from ..domain.weight.normalize import DateOrder, sort_newest_first
from ..models.responses import OperationStatus
from ..models.samples import (
    CsvImportResult,
    ImportSummary,
    WeightSample,
    WeightSampleCreate,
    WeightSampleUpdate,
)
from ..notion.application.ports import SampleRepository

logger = logging.getLogger(__name__)

CsvParser = Callable[..., CsvImportResult]
CsvWriter = Callable[[Sequence[WeightSample]], str]


class SampleNotFoundError(Exception):
    """Raised when operating on a sample that does not exist."""


class DuplicateSampleError(Exception):
    """Raised when a user already has a sample on the requested date."""


async def _sample_on(
    repository: SampleRepository, user_id: str, day: date
) -> Optional[WeightSample]:
    existing = await repository.list_samples(user_id, start_date=day, end_date=day)
    return existing[0] if existing else None


@dataclass
class ListSamplesUseCase:
    """Return a user's samples newest first."""

    repository: SampleRepository

    async def __call__(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[WeightSample]:
        samples = await self.repository.list_samples(user_id, start_date, end_date)
        return sort_newest_first(samples)


@dataclass
class CreateSampleUseCase:
    """Record a measurement, one per user and day."""

    repository: SampleRepository

    async def __call__(self, user_id: str, sample: WeightSampleCreate) -> OperationStatus:
        if await _sample_on(self.repository, user_id, sample.date) is not None:
            raise DuplicateSampleError(f"An entry for {sample.date.isoformat()} already exists")
        created = await self.repository.create_sample(user_id, sample)
        return OperationStatus(status="created", id=created.id)


@dataclass
class UpdateSampleUseCase:
    repository: SampleRepository

    async def __call__(
        self, user_id: str, sample_id: str, changes: WeightSampleUpdate
    ) -> WeightSample:
        if changes.date is not None:
            clash = await _sample_on(self.repository, user_id, changes.date)
            if clash is not None and clash.id != sample_id:
                raise DuplicateSampleError(
                    f"An entry for {changes.date.isoformat()} already exists"
                )
        updated = await self.repository.update_sample(user_id, sample_id, changes)
        if updated is None:
            raise SampleNotFoundError(f"Entry {sample_id} not found")
        return updated


@dataclass
class DeleteSampleUseCase:
    repository: SampleRepository

    async def __call__(self, user_id: str, sample_id: str) -> OperationStatus:
        if not await self.repository.delete_sample(user_id, sample_id):
            raise SampleNotFoundError(f"Entry {sample_id} not found")
        return OperationStatus(status="deleted", id=sample_id)


@dataclass
class ExportSamplesUseCase:
    """Render all samples of a user as CSV text."""

    repository: SampleRepository
    csv_writer: CsvWriter = samples_to_csv

    async def __call__(self, user_id: str) -> str:
        samples = await self.repository.list_samples(user_id)
        return self.csv_writer(samples)


@dataclass
class ImportSamplesUseCase:
    """Merge CSV rows into the store, keeping existing entries on clashing dates."""

    repository: SampleRepository
    csv_parser: CsvParser = samples_from_csv

    async def __call__(
        self, user_id: str, text: str, date_order: DateOrder = DateOrder.AUTO
    ) -> ImportSummary:
        parsed = self.csv_parser(text, date_order=date_order)
        existing = await self.repository.list_samples(user_id)
        taken = {sample.date for sample in existing}

        imported = 0
        duplicates = 0
        for sample in reversed(parsed.samples):
            if sample.date in taken:
                duplicates += 1
                continue
            await self.repository.create_sample(
                user_id,
                WeightSampleCreate(date=sample.date, weight_kg=sample.weight_kg),
            )
            taken.add(sample.date)
            imported += 1

        logger.info(
            "Imported %d entries for %s (%d duplicates, %d unreadable rows)",
            imported,
            user_id,
            duplicates,
            parsed.skipped_count,
        )
        return ImportSummary(
            imported=imported, duplicates=duplicates, skipped=parsed.skipped_count
        )


__all__ = [
    "CreateSampleUseCase",
    "DeleteSampleUseCase",
    "DuplicateSampleError",
    "ExportSamplesUseCase",
    "ImportSamplesUseCase",
    "ListSamplesUseCase",
    "SampleNotFoundError",
    "UpdateSampleUseCase",
]
