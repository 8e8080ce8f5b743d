"""Dashboard metrics, projection and chart endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Query, Request

from calorie_tracker.api.auth import require_user

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer
    from calorie_tracker.domain.metrics import CalculatedMetrics

router = APIRouter(prefix="/api", tags=["metrics"])


@router.get("/metrics")
async def get_metrics(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return metrics derived from the caller's full history."""
    container: AppContainer = request.app.state.container
    return serialize_metrics(container.metrics_service.get_metrics(user_id))


@router.get("/projection")
async def get_projection(
    request: Request,
    days: int | None = Query(default=None, ge=1, le=365),
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Return a straight-line weight forecast."""
    container: AppContainer = request.app.state.container
    horizon = days if days is not None else container.settings.projection_days
    projection = container.metrics_service.get_projection(user_id, horizon)
    return {
        "lastWeight": projection.last_weight,
        "dailyDeficit": projection.daily_deficit,
        "points": [
            {
                "date": point.day.isoformat(),
                "projectedWeight": point.projected_weight,
            }
            for point in projection.points
        ],
    }


@router.get("/trends/weight")
async def get_weight_trend(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the weight chart series."""
    container: AppContainer = request.app.state.container
    trend = container.metrics_service.get_weight_trend(user_id)
    return {
        "points": [
            {"date": point.day.isoformat(), "weight": point.weight}
            for point in trend.points
        ],
        "change": trend.change,
        "direction": trend.direction,
    }


@router.get("/trends/calories")
async def get_calorie_trend(
    request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return the calorie chart series."""
    container: AppContainer = request.app.state.container
    trend = container.metrics_service.get_calorie_trend(user_id)
    return {
        "points": [
            {"date": point.day.isoformat(), "calories": point.calories}
            for point in trend.points
        ],
        "average": trend.average,
        "maintenanceCalories": trend.maintenance_calories,
    }


def serialize_metrics(metrics: CalculatedMetrics) -> dict[str, object]:
    """Return metrics as a flat camelCase object."""
    return {
        "maintenanceCalories": metrics.maintenance_calories,
        "dailyDeficit": metrics.daily_deficit,
        "weeklyDeficit": metrics.weekly_deficit,
        "rollingAvgCalories7Day": metrics.rolling_avg_calories_7_day,
        "rollingAvgCalories14Day": metrics.rolling_avg_calories_14_day,
        "rollingAvgDeficit7Day": metrics.rolling_avg_deficit_7_day,
        "rollingAvgWeight7Day": metrics.rolling_avg_weight_7_day,
        "weightChange7Day": metrics.weight_change_7_day,
    }
