"""Supabase repository for daily entries."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.entries import DailyEntry
from calorie_tracker.services.entries import EntryRepository

_COLUMNS = "id, user_id, date, calories, weight, protein, carbs, fat"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for daily entry persistence."""

    client: Client
    table_name: str = "daily_entries"

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return all entries for a user, newest first."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def list_entries_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyEntry]:
        """Return entries in the inclusive date range, oldest first."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .gte("date", start.isoformat())
            .lte("date", end.isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry | None:
        """Return an entry by id scoped to the user."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def get_entry_by_date(self, user_id: UUID, day: date) -> DailyEntry | None:
        """Return the entry logged on a date."""
        response = (
            self.client.table(self.table_name)
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .eq("date", day.isoformat())
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> DailyEntry:
        """Insert a new entry row and return it."""
        row = _to_row(payload)
        row["user_id"] = str(user_id)
        response = self.client.table(self.table_name).insert(row).execute()
        if not response.data:
            raise RuntimeError("Failed to create entry in Supabase")
        return _parse_row(response.data[0])

    def update_entry(
        self, user_id: UUID, entry_id: UUID, changes: dict[str, object]
    ) -> DailyEntry | None:
        """Update an entry row and return it."""
        response = (
            self.client.table(self.table_name)
            .update(_to_row(changes))
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an entry row."""
        response = (
            self.client.table(self.table_name)
            .delete()
            .eq("id", str(entry_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _to_row(payload: dict[str, object]) -> dict[str, object]:
    row: dict[str, object] = {}
    for key, value in payload.items():
        if key == "day":
            row["date"] = value.isoformat() if isinstance(value, date) else value
        elif key in {"calories", "weight", "protein", "carbs", "fat"}:
            row[key] = value
    return row


def _parse_row(row: dict[str, object]) -> DailyEntry:
    weight = row.get("weight")
    return DailyEntry(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        day=date.fromisoformat(str(row["date"])),
        calories=int(row.get("calories") or 0),
        weight=float(weight) if weight is not None else None,
        protein=_optional_int(row.get("protein")),
        carbs=_optional_int(row.get("carbs")),
        fat=_optional_int(row.get("fat")),
    )


def _optional_int(value: object) -> int | None:
    if value is None:
        return None
    return int(value)
