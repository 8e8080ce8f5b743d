"""Chart series for the dashboard weight and calorie views."""

import math
from collections.abc import Iterable

from calorie_tracker.domain.entries import DailyEntry
from calorie_tracker.domain.metrics import (
    CaloriePoint,
    CalorieTrend,
    WeightPoint,
    WeightTrend,
)


def weight_trend(entries: Iterable[DailyEntry], limit: int = 30) -> WeightTrend:
    """Return the latest ``limit`` entries as a weight series.

    The change compares the first and last points of the series and is
    ``None`` when either end has no weight logged.
    """
    recent = _latest(entries, limit)
    points = [WeightPoint(day=entry.day, weight=entry.weight) for entry in recent]
    change: float | None = None
    if len(points) > 1:
        first, last = points[0].weight, points[-1].weight
        if first is not None and last is not None:
            change = last - first
    return WeightTrend(points=points, change=change, direction=_direction(change))


def calorie_trend(
    entries: Iterable[DailyEntry],
    maintenance_calories: int | None,
    limit: int = 14,
) -> CalorieTrend:
    """Return the latest ``limit`` entries as a calorie series."""
    recent = _latest(entries, limit)
    points = [CaloriePoint(day=entry.day, calories=entry.calories) for entry in recent]
    average = 0
    if points:
        total = sum(point.calories for point in points)
        average = round_half_up(total / len(points))
    return CalorieTrend(
        points=points,
        average=average,
        maintenance_calories=maintenance_calories,
    )


def _latest(entries: Iterable[DailyEntry], limit: int) -> list[DailyEntry]:
    ordered = sorted(entries, key=lambda entry: entry.day)
    return ordered[-limit:] if limit > 0 else []


def _direction(change: float | None) -> str:
    if change is None or change == 0:
        return "flat"
    return "down" if change < 0 else "up"


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    whole = math.floor(value)
    if value - whole >= 0.5:  # noqa: PLR2004
        return whole + 1
    return whole
