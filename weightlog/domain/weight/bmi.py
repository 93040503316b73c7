"""Body mass index helpers."""

from __future__ import annotations

import math
from typing import Any, Optional

from ...models.statistics import BmiCategory, BmiResult
from .errors import InvalidArgumentError


def require_number(value: Any, name: str) -> float:
    """Return ``value`` as float or raise for non-numeric types."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"{name} must be a number, got {type(value).__name__}")
    return float(value)


def calculate_bmi(weight_kg: Optional[float], height_cm: Optional[float]) -> Optional[float]:
    """BMI rounded to one decimal, ``None`` when an input is missing, non-finite or non-positive."""

    if weight_kg is None or height_cm is None:
        return None
    weight = require_number(weight_kg, "weight_kg")
    height = require_number(height_cm, "height_cm")
    if not (math.isfinite(weight) and math.isfinite(height)) or weight <= 0 or height <= 0:
        return None
    height_m = height / 100
    bmi = weight / height_m / height_m
    if not math.isfinite(bmi):
        return None
    return round(bmi, 1)


def bmi_category(bmi: Optional[float]) -> BmiCategory:
    if bmi is None:
        return BmiCategory()
    value = require_number(bmi, "bmi")
    if not math.isfinite(value) or value <= 0:
        return BmiCategory()
    if value < 18.5:
        return BmiCategory(label="Underweight", severity="warning")
    if value < 25:
        return BmiCategory(label="Healthy", severity="ok")
    if value < 30:
        return BmiCategory(label="Overweight", severity="warning")
    return BmiCategory(label="Obese", severity="danger")


def bmi_result(weight_kg: Optional[float], height_cm: Optional[float]) -> BmiResult:
    bmi = calculate_bmi(weight_kg, height_cm)
    return BmiResult(bmi=bmi, category=bmi_category(bmi))
