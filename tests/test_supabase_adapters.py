"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date
from uuid import uuid4

from calorie_tracker.adapters.supabase_entry_repository import (
    SupabaseEntryRepository,
)


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "insert": [], "update": [], "delete": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def update(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "update"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def lte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def _row(entry_id: str, user_id: str, day: str, **values: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": entry_id,
        "user_id": user_id,
        "date": day,
        "calories": 2000,
        "weight": None,
        "protein": None,
        "carbs": None,
        "fat": None,
    }
    row.update(values)
    return row


def test_supabase_entry_repository_create_maps_day_to_date() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_entries")
    user_id = uuid4()
    entry_id = str(uuid4())
    table.queue("insert", [_row(entry_id, str(user_id), "2024-01-05", weight=181.5)])

    repository = SupabaseEntryRepository(client)
    created = repository.create_entry(
        user_id, {"day": date(2024, 1, 5), "calories": 2000, "weight": 181.5}
    )

    assert str(created.id) == entry_id
    assert created.day == date(2024, 1, 5)
    assert created.weight == 181.5
    assert table.last_payload == {
        "date": "2024-01-05",
        "calories": 2000,
        "weight": 181.5,
        "user_id": str(user_id),
    }


def test_supabase_entry_repository_lists_entries() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_entries")
    user_id = str(uuid4())
    table.queue(
        "select",
        [
            _row(str(uuid4()), user_id, "2024-01-02", weight="180.2", protein=120),
            _row(str(uuid4()), user_id, "2024-01-01"),
        ],
    )

    repository = SupabaseEntryRepository(client)
    entries = repository.list_entries(uuid4())

    assert [entry.day for entry in entries] == [date(2024, 1, 2), date(2024, 1, 1)]
    assert entries[0].weight == 180.2
    assert entries[0].protein == 120
    assert entries[1].weight is None


def test_supabase_entry_repository_range_filters() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    user_id = uuid4()

    repository = SupabaseEntryRepository(client, table_name="entries")
    entries = repository.list_entries_in_range(
        user_id, date(2024, 1, 1), date(2024, 1, 7)
    )

    assert entries == []
    assert table.last_filters == [
        ("user_id", str(user_id)),
        ("date", "2024-01-01"),
        ("date", "2024-01-07"),
    ]


def test_supabase_entry_repository_missing_rows() -> None:
    client = FakeSupabaseClient()
    repository = SupabaseEntryRepository(client)

    assert repository.get_entry(uuid4(), uuid4()) is None
    assert repository.get_entry_by_date(uuid4(), date(2024, 1, 1)) is None
    assert repository.update_entry(uuid4(), uuid4(), {"calories": 1}) is None
    assert repository.delete_entry(uuid4(), uuid4()) is False


def test_supabase_entry_repository_update_and_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("daily_entries")
    user_id = uuid4()
    entry_id = uuid4()
    table.queue("update", [_row(str(entry_id), str(user_id), "2024-01-03", fat=70)])
    table.queue("delete", [_row(str(entry_id), str(user_id), "2024-01-03")])

    repository = SupabaseEntryRepository(client)
    updated = repository.update_entry(user_id, entry_id, {"fat": 70, "weight": None})
    deleted = repository.delete_entry(user_id, entry_id)

    assert updated is not None
    assert updated.fat == 70
    assert table.last_payload == {"fat": 70, "weight": None}
    assert deleted is True
