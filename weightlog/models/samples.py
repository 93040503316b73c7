from __future__ import annotations

import datetime as dt
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WeightSample(BaseModel):
    """A single dated weight observation."""

    date: dt.date = Field(..., description="Calendar day of the measurement")
    weight_kg: float = Field(..., gt=0, description="Body weight in kilograms")
    note: Optional[str] = Field(None, description="Free-form note")
    id: Optional[str] = Field(
        None, description="Storage identifier of the entry, when persisted"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "date": "2024-01-08",
                "weight_kg": 78.4,
                "note": "After holidays",
                "id": "3f1c2a9e-entry",
            }
        }
    )


class WeightSampleCreate(BaseModel):
    """Payload for recording a new measurement."""

    date: dt.date
    weight_kg: float = Field(..., gt=0, description="Body weight in kilograms")
    note: Optional[str] = None


class WeightSampleUpdate(BaseModel):
    """Partial update of an existing measurement."""

    date: Optional[dt.date] = None
    weight_kg: Optional[float] = Field(None, gt=0)
    note: Optional[str] = None


class NormalizationResult(BaseModel):
    """Valid samples, newest first, with the number of rejected rows."""

    samples: List[WeightSample]
    skipped_count: int = 0


class CsvImportResult(NormalizationResult):
    """Outcome of parsing CSV text into samples."""


class ImportSummary(BaseModel):
    """Result of merging imported samples into the store."""

    imported: int = Field(..., description="Samples written to the store")
    duplicates: int = Field(
        ..., description="Samples ignored because their date already exists"
    )
    skipped: int = Field(..., description="CSV rows that could not be parsed")
