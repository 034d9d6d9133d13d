"""Domain models for logged meals and daily nutrition summaries."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class MealLogRecord:
    """One logged meal."""

    total_calories: float
    protein: float
    carbs: float
    fat: float
    created_at: datetime | None


@dataclass(frozen=True)
class NutritionLogRecord:
    """One daily nutrition summary."""

    date: date | None
    calories: float
    protein: float
    carbs: float
    fat: float
    fiber: float
