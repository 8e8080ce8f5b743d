"""Domain models for derived metrics, projections and chart trends."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class CalculatedMetrics:
    """Derived statistics for a user's entry history.

    Every field is ``None`` when there is not enough data to compute it.
    Calorie fields are whole numbers; weight fields keep full precision.
    """

    maintenance_calories: int | None = None
    daily_deficit: int | None = None
    weekly_deficit: int | None = None
    rolling_avg_calories_7_day: int | None = None
    rolling_avg_calories_14_day: int | None = None
    rolling_avg_deficit_7_day: int | None = None
    rolling_avg_weight_7_day: float | None = None
    weight_change_7_day: float | None = None


@dataclass(frozen=True)
class ProjectionPoint:
    """Forecast weight for a single future day."""

    day: date
    projected_weight: float


@dataclass(frozen=True)
class WeightProjection:
    """Straight-line weight forecast from the latest known weight."""

    last_weight: float | None
    daily_deficit: int | None
    points: list[ProjectionPoint] = field(default_factory=list)


@dataclass(frozen=True)
class WeightPoint:
    """Weight chart point."""

    day: date
    weight: float | None


@dataclass(frozen=True)
class CaloriePoint:
    """Calorie chart point."""

    day: date
    calories: int


@dataclass(frozen=True)
class WeightTrend:
    """Recent weight series with overall movement."""

    points: list[WeightPoint]
    change: float | None
    direction: str


@dataclass(frozen=True)
class CalorieTrend:
    """Recent calorie series with its average and maintenance reference line."""

    points: list[CaloriePoint]
    average: int
    maintenance_calories: int | None
