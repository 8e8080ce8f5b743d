"""Metrics engine and service for calorie and weight history."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from calorie_tracker.domain.entries import DailyEntry
from calorie_tracker.domain.metrics import (
    CalculatedMetrics,
    CalorieTrend,
    ProjectionPoint,
    WeightProjection,
    WeightTrend,
)
from calorie_tracker.services.entries import EntryRepository
from calorie_tracker.services.trends import (
    calorie_trend,
    round_half_up,
    weight_trend,
)

CALORIES_PER_POUND = 3500
MIN_MAINTENANCE_CALORIES = 800
SHORT_WINDOW_DAYS = 7
LONG_WINDOW_DAYS = 14
MIN_WEIGHT_ENTRIES = 2
DEFAULT_PROJECTION_DAYS = 30

_logger = logging.getLogger(__name__)


def compute_metrics(entries: Iterable[DailyEntry]) -> CalculatedMetrics:
    """Derive rolling averages and an energy balance estimate from entries.

    Windows are anchored at the most recent entry date rather than today, so
    the result depends only on the entries passed in. Maintenance and deficit
    use the full span of weight-bearing entries; the 7-day weight fields use
    only the trailing window.
    """
    ordered = sorted(entries, key=lambda entry: entry.day)
    if not ordered:
        return CalculatedMetrics()

    most_recent = ordered[-1].day
    last_7_days = _window(ordered, most_recent, SHORT_WINDOW_DAYS)
    last_14_days = _window(ordered, most_recent, LONG_WINDOW_DAYS)

    rolling_avg_weight: float | None = None
    weight_change: float | None = None
    recent_weights = _weights(last_7_days)
    if len(recent_weights) >= MIN_WEIGHT_ENTRIES:
        rolling_avg_weight = sum(recent_weights) / len(recent_weights)
        weight_change = recent_weights[-1] - recent_weights[0]

    daily_deficit, maintenance = _estimate_energy_balance(ordered)
    weekly_deficit = daily_deficit * 7 if daily_deficit is not None else None

    return CalculatedMetrics(
        maintenance_calories=_round_calories(maintenance),
        daily_deficit=_round_calories(daily_deficit),
        weekly_deficit=_round_calories(weekly_deficit),
        rolling_avg_calories_7_day=_round_calories(_mean_calories(last_7_days)),
        rolling_avg_calories_14_day=_round_calories(_mean_calories(last_14_days)),
        rolling_avg_deficit_7_day=_round_calories(daily_deficit),
        rolling_avg_weight_7_day=rolling_avg_weight,
        weight_change_7_day=weight_change,
    )


def project_weight(
    last_weight: float, daily_deficit: float, start: date, days: int
) -> list[ProjectionPoint]:
    """Extrapolate weight forward one point per day after ``start``."""
    pounds_per_day = daily_deficit / CALORIES_PER_POUND
    return [
        ProjectionPoint(
            day=start + timedelta(days=days_ahead),
            projected_weight=last_weight + pounds_per_day * days_ahead,
        )
        for days_ahead in range(1, days + 1)
    ]


@dataclass
class MetricsService:
    """Service computing dashboard metrics from stored entries."""

    repository: EntryRepository

    def get_metrics(self, user_id: UUID) -> CalculatedMetrics:
        """Return metrics computed from the user's full entry history."""
        entries = self.repository.list_entries(user_id)
        metrics = compute_metrics(entries)
        _logger.info(
            "Metrics computed: user_id=%s entries=%s daily_deficit=%s",
            user_id,
            len(entries),
            metrics.daily_deficit,
        )
        return metrics

    def get_projection(
        self, user_id: UUID, days: int = DEFAULT_PROJECTION_DAYS
    ) -> WeightProjection:
        """Return a weight forecast anchored at the latest weighed entry."""
        entries = self.repository.list_entries(user_id)
        metrics = compute_metrics(entries)
        weighed = sorted(
            (entry for entry in entries if entry.weight is not None),
            key=lambda entry: entry.day,
        )
        if not weighed:
            return WeightProjection(last_weight=None, daily_deficit=None)
        latest = weighed[-1]
        if metrics.daily_deficit is None:
            return WeightProjection(last_weight=latest.weight, daily_deficit=None)
        return WeightProjection(
            last_weight=latest.weight,
            daily_deficit=metrics.daily_deficit,
            points=project_weight(
                latest.weight, metrics.daily_deficit, latest.day, days
            ),
        )

    def get_weight_trend(self, user_id: UUID, limit: int = 30) -> WeightTrend:
        """Return the weight chart series for the latest entries."""
        return weight_trend(self.repository.list_entries(user_id), limit)

    def get_calorie_trend(self, user_id: UUID, limit: int = 14) -> CalorieTrend:
        """Return the calorie chart series with the maintenance reference."""
        entries = self.repository.list_entries(user_id)
        metrics = compute_metrics(entries)
        return calorie_trend(entries, metrics.maintenance_calories, limit)


def _window(ordered: list[DailyEntry], anchor: date, days: int) -> list[DailyEntry]:
    cutoff = anchor - timedelta(days=days)
    return [entry for entry in ordered if entry.day >= cutoff]


def _weights(entries: list[DailyEntry]) -> list[float]:
    return [entry.weight for entry in entries if entry.weight is not None]


def _mean_calories(entries: list[DailyEntry]) -> float | None:
    if not entries:
        return None
    return sum(entry.calories for entry in entries) / len(entries)


def _estimate_energy_balance(
    ordered: list[DailyEntry],
) -> tuple[float | None, float | None]:
    """Return (daily deficit, maintenance) over the weight-bearing span."""
    weighed = [entry for entry in ordered if entry.weight is not None]
    if len(weighed) < MIN_WEIGHT_ENTRIES:
        return None, None

    first, last = weighed[0], weighed[-1]
    total_weight_change = last.weight - first.weight
    # Same-day boundaries would otherwise divide by zero.
    total_days = max(1, (last.day - first.day).days)
    daily_deficit = total_weight_change * CALORIES_PER_POUND / total_days

    in_span = [entry for entry in ordered if first.day <= entry.day <= last.day]
    avg_calories = _mean_calories(in_span)
    if avg_calories is None:
        return daily_deficit, None

    maintenance = avg_calories - daily_deficit
    if maintenance < MIN_MAINTENANCE_CALORIES:
        return daily_deficit, None
    return daily_deficit, maintenance


def _round_calories(value: float | None) -> int | None:
    """Round to the nearest whole calorie, halves toward positive infinity."""
    if value is None:
        return None
    return round_half_up(value)
