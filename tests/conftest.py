"""Shared test fixtures."""

from dataclasses import dataclass, field, replace
from datetime import date
from uuid import UUID, uuid4

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.entries import DailyEntry
from calorie_tracker.services.entries import EntryRepository, EntryService
from calorie_tracker.services.metrics import MetricsService

USER_ID = UUID("00000000-0000-0000-0000-000000000001")


def make_entry(
    day: date,
    calories: int = 2000,
    weight: float | None = None,
    user_id: UUID = USER_ID,
) -> DailyEntry:
    """Build an entry with a fresh id."""
    return DailyEntry(
        id=uuid4(), user_id=user_id, day=day, calories=calories, weight=weight
    )


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: dict[UUID, DailyEntry] = field(default_factory=dict)

    def add(self, *entries: DailyEntry) -> None:
        for entry in entries:
            self.entries[entry.id] = entry

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        owned = [entry for entry in self.entries.values() if entry.user_id == user_id]
        return sorted(owned, key=lambda entry: entry.day, reverse=True)

    def list_entries_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[DailyEntry]:
        return sorted(
            (
                entry
                for entry in self.entries.values()
                if entry.user_id == user_id and start <= entry.day <= end
            ),
            key=lambda entry: entry.day,
        )

    def get_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry | None:
        entry = self.entries.get(entry_id)
        if entry is None or entry.user_id != user_id:
            return None
        return entry

    def get_entry_by_date(self, user_id: UUID, day: date) -> DailyEntry | None:
        for entry in self.entries.values():
            if entry.user_id == user_id and entry.day == day:
                return entry
        return None

    def create_entry(self, user_id: UUID, payload: dict[str, object]) -> DailyEntry:
        entry = DailyEntry(
            id=uuid4(),
            user_id=user_id,
            day=payload["day"],
            calories=int(payload["calories"]),
            weight=payload.get("weight"),
            protein=payload.get("protein"),
            carbs=payload.get("carbs"),
            fat=payload.get("fat"),
        )
        self.entries[entry.id] = entry
        return entry

    def update_entry(
        self, user_id: UUID, entry_id: UUID, changes: dict[str, object]
    ) -> DailyEntry | None:
        current = self.get_entry(user_id, entry_id)
        if current is None:
            return None
        updated = replace(current, **changes)
        self.entries[entry_id] = updated
        return updated

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> bool:
        if self.get_entry(user_id, entry_id) is None:
            return False
        del self.entries[entry_id]
        return True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        api_token="api-token",
    )


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def container(
    settings: Settings, entry_repository: InMemoryEntryRepository
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        entry_service=EntryService(entry_repository),
        metrics_service=MetricsService(entry_repository),
        close_resources=close_resources,
    )


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-Api-Token": "api-token", "X-User-Id": str(USER_ID)}
