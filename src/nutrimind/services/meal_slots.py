"""Meal slot selection by time of day."""

from collections.abc import Iterable

from nutrimind.domain.entries import LogEntry
from nutrimind.domain.nutrition import MealSlot

BREAKFAST_CUTOFF_HOUR = 11
LUNCH_CUTOFF_HOUR = 15
BREAKFAST_START_HOUR = 5
DINNER_CUTOFF_HOUR = 22


def select_next_meal(entries: Iterable[LogEntry], current_hour: int) -> MealSlot:
    """Pick the meal slot to plan next.

    Dinner has no hour bound: it is suggested whenever it has not been
    logged and the earlier rules did not match, even before dawn.
    """
    logged = {entry.meal_slot for entry in entries}
    if MealSlot.BREAKFAST not in logged and current_hour < BREAKFAST_CUTOFF_HOUR:
        return MealSlot.BREAKFAST
    if MealSlot.LUNCH not in logged and current_hour < LUNCH_CUTOFF_HOUR:
        return MealSlot.LUNCH
    if MealSlot.DINNER not in logged:
        return MealSlot.DINNER
    return MealSlot.SNACK


def infer_meal_slot(hour: int) -> MealSlot:
    """Guess the slot of a meal eaten at ``hour`` when none was reported."""
    if BREAKFAST_START_HOUR <= hour < BREAKFAST_CUTOFF_HOUR:
        return MealSlot.BREAKFAST
    if BREAKFAST_CUTOFF_HOUR <= hour < LUNCH_CUTOFF_HOUR:
        return MealSlot.LUNCH
    if LUNCH_CUTOFF_HOUR <= hour < DINNER_CUTOFF_HOUR:
        return MealSlot.DINNER
    return MealSlot.SNACK
