"""Domain models for daily log entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass(frozen=True)
class DailyEntry:
    """One day of logged intake and body weight for a user."""

    id: UUID
    user_id: UUID
    day: date
    calories: int
    weight: float | None = None
    protein: int | None = None
    carbs: int | None = None
    fat: int | None = None
