"""In-memory nutrition session state and derived views."""

import logging
import random
from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID, uuid4
from zoneinfo import ZoneInfo

from nutrimind.domain.entries import DaySummary, InventoryItem, LogEntry
from nutrimind.domain.goals import EffectiveGoalProfile, GoalProfile, GoalType
from nutrimind.domain.nutrition import MacroProfile, MealSlot, NutrientProfile
from nutrimind.errors import EntryNotFoundError, InventoryItemNotFoundError
from nutrimind.services.goals import adjust_goals
from nutrimind.services.meal_slots import select_next_meal
from nutrimind.services.totals import aggregate, remaining_macros
from nutrimind.services.weekly import HistoryRepository, build_week

_logger = logging.getLogger(__name__)


def default_inventory() -> list[InventoryItem]:
    """Return the starter kitchen inventory."""
    return [
        InventoryItem(id=uuid4(), name="Chicken Breast", quantity="500g"),
        InventoryItem(id=uuid4(), name="Rice", quantity="1kg"),
        InventoryItem(id=uuid4(), name="Broccoli", quantity="2 heads"),
        InventoryItem(id=uuid4(), name="Eggs", quantity="6"),
    ]


@dataclass
class NutritionSession:
    """Owns today's entries, the goal profile and the kitchen inventory.

    Derived values (effective goals, totals, the weekly log) are recomputed
    on every read and never stored. Entries cover a single calendar day in
    the session timezone: once the date moves on, entries logged on earlier
    days are dropped.
    """

    goals: GoalProfile = field(default_factory=GoalProfile)
    entries: list[LogEntry] = field(default_factory=list)
    inventory: list[InventoryItem] = field(default_factory=default_inventory)
    timezone_name: str = "UTC"
    history: HistoryRepository | None = None
    synthetic_history: bool = True
    history_seed: int | None = None
    current_day: date | None = None

    def now(self) -> datetime:
        """Return the current time in the session timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name))

    def today_entries(self, today: date | None = None) -> list[LogEntry]:
        """Return the live entry list, starting a new day if the date changed."""
        day = today or self.now().date()
        if self.current_day is not None and day != self.current_day:
            zone = ZoneInfo(self.timezone_name)
            kept = [
                entry
                for entry in self.entries
                if entry.logged_at.astimezone(zone).date() == day
            ]
            _logger.info(
                "Starting %s, dropped %s entries from %s",
                day,
                len(self.entries) - len(kept),
                self.current_day,
            )
            self.entries[:] = kept
        self.current_day = day
        return self.entries

    def add_entry(self, entry: LogEntry) -> None:
        """Append a new log entry."""
        self.today_entries().append(entry)
        _logger.info("Logged %s entry %s", entry.meal_slot, entry.id)

    def delete_entry(self, entry_id: UUID) -> LogEntry:
        """Remove and return the entry with ``entry_id``."""
        for index, entry in enumerate(self.today_entries()):
            if entry.id == entry_id:
                del self.entries[index]
                return entry
        raise EntryNotFoundError(entry_id)

    def update_goals(  # noqa: PLR0913
        self,
        *,
        goal_type: GoalType | None = None,
        targets: NutrientProfile | None = None,
        is_training_day: bool | None = None,
        steps: int | None = None,
        water_ml: int | None = None,
    ) -> GoalProfile:
        """Apply a partial edit to the goal profile in place."""
        if goal_type is not None:
            self.goals.type = goal_type
        if targets is not None:
            self.goals.targets = targets
        if is_training_day is not None:
            self.goals.is_training_day = is_training_day
        if steps is not None:
            self.goals.steps = steps
        if water_ml is not None:
            self.goals.water_ml = water_ml
        return self.goals

    @property
    def effective_goals(self) -> EffectiveGoalProfile:
        """Goal profile after training-day and step modifiers."""
        return adjust_goals(self.goals)

    def totals(self, meal_slot: MealSlot | None = None) -> NutrientProfile:
        """Return today's nutrient totals."""
        return aggregate(self.today_entries(), meal_slot)

    def remaining(self) -> MacroProfile:
        """Return macros still needed to hit today's effective goals."""
        return remaining_macros(self.totals(), self.effective_goals.targets)

    def next_meal(self, current_hour: int | None = None) -> MealSlot:
        """Return the meal slot to plan next."""
        hour = self.now().hour if current_hour is None else current_hour
        return select_next_meal(self.today_entries(), hour)

    def week(self, today: date | None = None) -> list[DaySummary]:
        """Return the Monday..Sunday log for the current week.

        Placeholder past days are sized from the base goals, so today's
        training-day and step modifiers do not shift them.
        """
        day = today or self.now().date()
        rng = None
        if self.history_seed is not None:
            rng = random.Random(self.history_seed)
        return build_week(
            day,
            self.today_entries(day),
            self.goals,
            history=self.history,
            rng=rng,
            synthetic=self.synthetic_history,
            tz=ZoneInfo(self.timezone_name),
        )

    def add_inventory_item(self, name: str, quantity: str) -> InventoryItem:
        """Add an item to the kitchen inventory."""
        item = InventoryItem(id=uuid4(), name=name, quantity=quantity)
        self.inventory.append(item)
        return item

    def remove_inventory_item(self, item_id: UUID) -> InventoryItem:
        """Remove and return the inventory item with ``item_id``."""
        for index, item in enumerate(self.inventory):
            if item.id == item_id:
                del self.inventory[index]
                return item
        raise InventoryItemNotFoundError(item_id)
