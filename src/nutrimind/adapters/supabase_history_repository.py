"""Supabase repository for past food log entries."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID, uuid4

from supabase import Client

from nutrimind.domain.entries import LogEntry
from nutrimind.domain.nutrition import MealSlot, NutrientProfile
from nutrimind.services.weekly import HistoryRepository

_logger = logging.getLogger(__name__)

_COLUMNS = (
    "id, name, meal_type, logged_at, calories, protein, carbs, fat, fiber, "
    "salt, potassium, tags, inflammation_flags, insight"
)


@dataclass
class SupabaseHistoryRepository(HistoryRepository):
    """Supabase implementation for reading logged entries."""

    client: Client
    table: str = "food_entries"

    def list_entries(self, start: datetime, end: datetime) -> list[LogEntry]:
        """Return entries logged in the time range."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        entries = [_parse_row(row) for row in response.data or []]
        return [entry for entry in entries if entry is not None]


def _parse_row(row: dict[str, object]) -> LogEntry | None:
    logged_at = _parse_timestamp(row.get("logged_at"))
    if logged_at is None:
        _logger.warning("Skipping history row %s without logged_at", row.get("id"))
        return None
    return LogEntry(
        id=_parse_uuid(row.get("id")),
        name=str(row.get("name") or "Unknown Food"),
        nutrients=NutrientProfile(
            calories=_to_float(row.get("calories")),
            protein=_to_float(row.get("protein")),
            carbs=_to_float(row.get("carbs")),
            fat=_to_float(row.get("fat")),
            fiber=_to_float(row.get("fiber")),
            salt=_to_float(row.get("salt")),
            potassium=_to_float(row.get("potassium")),
        ),
        meal_slot=_parse_slot(row.get("meal_type")),
        logged_at=logged_at,
        tags=tuple(str(tag) for tag in row.get("tags") or []),
        inflammation_flags=tuple(
            str(flag) for flag in row.get("inflammation_flags") or []
        ),
        insight=str(row["insight"]) if row.get("insight") else None,
    )


def _parse_timestamp(value: object) -> datetime | None:
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _parse_uuid(value: object) -> UUID:
    if isinstance(value, UUID):
        return value
    if isinstance(value, str):
        try:
            return UUID(value)
        except ValueError:
            return uuid4()
    return uuid4()


def _parse_slot(value: object) -> MealSlot:
    try:
        return MealSlot(str(value))
    except ValueError:
        return MealSlot.SNACK


def _to_float(value: object) -> float:
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return 0.0
    return 0.0
