"""Tests for the Supabase history repository."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

from nutrimind.adapters.supabase_history_repository import SupabaseHistoryRepository
from nutrimind.domain.nutrition import MealSlot


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    rows: list[dict[str, object]] = field(default_factory=list)
    filters: list[tuple[str, str, object]] = field(default_factory=list)
    columns: str = ""

    def select(self, columns: str) -> "FakeTable":
        self.columns = columns
        return self

    def gte(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.filters.append(("gte", column, value))
        return self

    def lt(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.filters.append(("lt", column, value))
        return self

    def order(self, _column: str, desc: bool = False) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        return FakeResponse(data=self.rows)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_list_entries_parses_rows_and_filters_range() -> None:
    client = FakeSupabaseClient()
    table = client.table("meal_history")
    entry_id = uuid4()
    table.rows = [
        {
            "id": str(entry_id),
            "name": "Greek yogurt",
            "meal_type": "Breakfast",
            "logged_at": "2026-10-12T07:30:00+00:00",
            "calories": 180,
            "protein": "17.5",
            "carbs": 12,
            "fat": None,
            "salt": 60,
            "tags": ["quick"],
            "inflammation_flags": None,
            "insight": "",
        }
    ]
    start = datetime(2026, 10, 12, tzinfo=UTC)
    end = datetime(2026, 10, 14, tzinfo=UTC)

    repository = SupabaseHistoryRepository(client, table="meal_history")
    entries = repository.list_entries(start, end)

    assert len(entries) == 1
    entry = entries[0]
    assert entry.id == entry_id
    assert entry.meal_slot == MealSlot.BREAKFAST
    assert entry.nutrients.protein == 17.5
    assert entry.nutrients.fat == 0
    assert entry.tags == ("quick",)
    assert entry.inflammation_flags == ()
    assert entry.insight is None
    assert entry.logged_at == datetime(2026, 10, 12, 7, 30, tzinfo=UTC)
    assert table.filters == [
        ("gte", "logged_at", start.isoformat()),
        ("lt", "logged_at", end.isoformat()),
    ]
    assert "meal_type" in table.columns


def test_list_entries_tolerates_sparse_rows() -> None:
    client = FakeSupabaseClient()
    client.table("food_entries").rows = [
        {"id": "not-a-uuid", "meal_type": "Brunch", "logged_at": "2026-10-13T12:00:00"}
    ]

    entries = SupabaseHistoryRepository(client).list_entries(
        datetime(2026, 10, 12, tzinfo=UTC), datetime(2026, 10, 14, tzinfo=UTC)
    )

    assert entries[0].name == "Unknown Food"
    assert entries[0].meal_slot == MealSlot.SNACK
    assert entries[0].logged_at.tzinfo is UTC
    assert entries[0].nutrients.calories == 0


def test_list_entries_handles_empty_response() -> None:
    client = FakeSupabaseClient()
    client.table("food_entries").rows = []

    entries = SupabaseHistoryRepository(client).list_entries(
        datetime(2026, 10, 12, tzinfo=UTC), datetime(2026, 10, 14, tzinfo=UTC)
    )

    assert entries == []


def test_list_entries_skips_rows_without_timestamp() -> None:
    client = FakeSupabaseClient()
    kept_id = uuid4()
    client.table("food_entries").rows = [
        {"id": str(uuid4()), "name": "Mystery", "logged_at": None},
        {"id": str(uuid4()), "name": "Garbled", "logged_at": "yesterday"},
        {"id": str(kept_id), "name": "Soup", "logged_at": "2026-10-13T18:00:00Z"},
    ]

    entries = SupabaseHistoryRepository(client).list_entries(
        datetime(2026, 10, 12, tzinfo=UTC), datetime(2026, 10, 14, tzinfo=UTC)
    )

    assert [entry.id for entry in entries] == [kept_id]
