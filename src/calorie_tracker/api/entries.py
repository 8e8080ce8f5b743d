"""Daily entry endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from calorie_tracker.api.auth import require_user
from calorie_tracker.api.models import EntryCreate, EntryUpdate  # noqa: TC001
from calorie_tracker.domain.entries import DailyEntry

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.get("")
async def list_entries(
    request: Request, user_id: UUID = Depends(require_user)
) -> list[dict[str, object]]:
    """Return the caller's entries, newest first."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list_entries(user_id)
    return [serialize_entry(entry) for entry in entries]


@router.post("")
async def upsert_entry(
    payload: EntryCreate,
    request: Request,
    response: Response,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Log a day, updating the entry already stored for that date."""
    container: AppContainer = request.app.state.container
    entry, created = container.entry_service.upsert_entry(
        user_id, payload.model_dump(exclude_unset=True)
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return serialize_entry(entry)


@router.get("/range")
async def list_entries_in_range(
    start: date,
    end: date,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> list[dict[str, object]]:
    """Return the caller's entries between two dates, oldest first."""
    container: AppContainer = request.app.state.container
    entries = container.entry_service.list_entries_in_range(user_id, start, end)
    return [serialize_entry(entry) for entry in entries]


@router.get("/{entry_id}")
async def get_entry(
    entry_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> dict[str, object]:
    """Return a single entry."""
    container: AppContainer = request.app.state.container
    return serialize_entry(container.entry_service.get_entry(user_id, entry_id))


@router.patch("/{entry_id}")
async def update_entry(
    entry_id: UUID,
    payload: EntryUpdate,
    request: Request,
    user_id: UUID = Depends(require_user),
) -> dict[str, object]:
    """Apply a partial update to an entry."""
    container: AppContainer = request.app.state.container
    entry = container.entry_service.update_entry(
        user_id, entry_id, payload.model_dump(exclude_unset=True)
    )
    return serialize_entry(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: UUID, request: Request, user_id: UUID = Depends(require_user)
) -> Response:
    """Delete an entry."""
    container: AppContainer = request.app.state.container
    container.entry_service.delete_entry(user_id, entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def serialize_entry(entry: DailyEntry) -> dict[str, object]:
    """Return the wire representation of an entry."""
    return {
        "id": str(entry.id),
        "date": entry.day.isoformat(),
        "calories": entry.calories,
        "weight": entry.weight,
        "protein": entry.protein,
        "carbs": entry.carbs,
        "fat": entry.fat,
    }
