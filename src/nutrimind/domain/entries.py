"""Domain models for food log entries."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

from nutrimind.domain.nutrition import MealSlot, NutrientProfile


@dataclass(frozen=True)
class LogEntry:
    """A single logged meal or snack."""

    id: UUID
    name: str
    nutrients: NutrientProfile
    meal_slot: MealSlot
    logged_at: datetime
    tags: tuple[str, ...] = ()
    inflammation_flags: tuple[str, ...] = ()
    insight: str | None = None
    images: tuple[str, ...] = field(default=(), repr=False)


@dataclass(frozen=True)
class DaySummary:
    """Entries for one calendar day of the weekly view."""

    day: date
    label: str
    entries: Sequence[LogEntry]


@dataclass(frozen=True)
class InventoryItem:
    """Kitchen inventory item available to recipe suggestions."""

    id: UUID
    name: str
    quantity: str
