"""Daily entry storage service."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.entries import DailyEntry

_logger = logging.getLogger(__name__)


class EntryNotFoundError(LookupError):
    """Raised when an entry id does not exist for the requesting user."""

    def __init__(self, entry_id: UUID) -> None:
        super().__init__(f"Entry not found: {entry_id}")
        self.entry_id = entry_id


class EntryDateConflictError(ValueError):
    """Raised when a change would give a user two entries on the same date."""

    def __init__(self, day: date) -> None:
        super().__init__(f"An entry already exists for {day.isoformat()}")
        self.day = day


class EntryRepository(Protocol):
    """Persistence interface for user-scoped daily entries."""

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return all entries for a user, newest first."""

    def list_entries_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyEntry]:
        """Return entries with start <= day <= end, oldest first."""

    def get_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry | None:
        """Return an entry by id, if present."""

    def get_entry_by_date(self, user_id: UUID, day: date) -> DailyEntry | None:
        """Return the entry logged for a date, if present."""

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> DailyEntry:
        """Create an entry and return it."""

    def update_entry(
        self, user_id: UUID, entry_id: UUID, changes: dict[str, object]
    ) -> DailyEntry | None:
        """Apply changes to an entry and return it, if present."""

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        """Delete an entry and return True when a row was removed."""


@dataclass
class EntryService:
    """Application service for logging daily entries."""

    repository: EntryRepository

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return the user's entries, newest first."""
        return self.repository.list_entries(user_id)

    def list_entries_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyEntry]:
        """Return the user's entries within an inclusive date range."""
        return self.repository.list_entries_in_range(user_id, start, end)

    def get_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry:
        """Return an entry or raise EntryNotFoundError."""
        entry = self.repository.get_entry(user_id, entry_id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return entry

    def upsert_entry(
        self, user_id: UUID, payload: dict[str, object]
    ) -> tuple[DailyEntry, bool]:
        """Create the entry for its date, or update the one already logged.

        Returns the stored entry and whether it was newly created.
        """
        day = payload["day"]
        if not isinstance(day, date):
            raise TypeError("payload 'day' must be a date")
        existing = self.repository.get_entry_by_date(user_id, day)
        if existing:
            updated = self.repository.update_entry(user_id, existing.id, payload)
            if updated is None:
                raise EntryNotFoundError(existing.id)
            _logger.info("Entry updated: user_id=%s day=%s", user_id, day)
            return updated, False

        created = self.repository.create_entry(user_id, payload)
        _logger.info("Entry created: user_id=%s day=%s", user_id, day)
        return created, True

    def update_entry(
        self, user_id: UUID, entry_id: UUID, changes: dict[str, object]
    ) -> DailyEntry:
        """Apply a partial update to an existing entry."""
        day = changes.get("day")
        if isinstance(day, date):
            existing = self.repository.get_entry_by_date(user_id, day)
            if existing is not None and existing.id != entry_id:
                raise EntryDateConflictError(day)
        updated = self.repository.update_entry(user_id, entry_id, changes)
        if updated is None:
            raise EntryNotFoundError(entry_id)
        _logger.info("Entry updated: user_id=%s entry_id=%s", user_id, entry_id)
        return updated

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry or raise EntryNotFoundError."""
        if not self.repository.delete_entry(user_id, entry_id):
            raise EntryNotFoundError(entry_id)
        _logger.info("Entry deleted: user_id=%s entry_id=%s", user_id, entry_id)
