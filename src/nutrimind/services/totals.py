"""Nutrient totals and remaining-macro calculations."""

from collections.abc import Iterable

from nutrimind.domain.entries import LogEntry
from nutrimind.domain.nutrition import (
    ZERO_NUTRIENTS,
    MacroProfile,
    MealSlot,
    NutrientProfile,
)

MACRO_FIELDS = ("calories", "protein", "carbs", "fat")
PERCENT_CAP = 100.0


def aggregate(
    entries: Iterable[LogEntry], meal_slot: MealSlot | None = None
) -> NutrientProfile:
    """Sum nutrients across entries, optionally for a single meal slot."""
    total = ZERO_NUTRIENTS
    for entry in entries:
        if meal_slot is not None and entry.meal_slot != meal_slot:
            continue
        total = add_nutrients(total, entry.nutrients)
    return total


def add_nutrients(left: NutrientProfile, right: NutrientProfile) -> NutrientProfile:
    """Return the fieldwise sum of two nutrient profiles."""
    return NutrientProfile(
        calories=left.calories + right.calories,
        protein=left.protein + right.protein,
        carbs=left.carbs + right.carbs,
        fat=left.fat + right.fat,
        fiber=left.fiber + right.fiber,
        salt=left.salt + right.salt,
        potassium=left.potassium + right.potassium,
    )


def group_by_slot(entries: Iterable[LogEntry]) -> dict[MealSlot, list[LogEntry]]:
    """Group entries by meal slot, keeping every slot in display order."""
    groups: dict[MealSlot, list[LogEntry]] = {slot: [] for slot in MealSlot}
    for entry in entries:
        groups[entry.meal_slot].append(entry)
    return groups


def remaining_macros(totals: NutrientProfile, goals: NutrientProfile) -> MacroProfile:
    """Return macros still needed to reach the goals, never negative."""
    return MacroProfile(
        calories=max(0, goals.calories - totals.calories),
        protein=max(0, goals.protein - totals.protein),
        carbs=max(0, goals.carbs - totals.carbs),
        fat=max(0, goals.fat - totals.fat),
    )


def goal_progress(totals: NutrientProfile, goals: NutrientProfile) -> dict[str, float]:
    """Return the percentage of each macro target consumed, within 0-100."""
    progress: dict[str, float] = {}
    for name in MACRO_FIELDS:
        target = getattr(goals, name)
        if target <= 0:
            progress[name] = 0.0
            continue
        percent = getattr(totals, name) / target * 100
        progress[name] = min(PERCENT_CAP, max(0.0, percent))
    return progress


def calorie_balance(totals: NutrientProfile, goals: NutrientProfile) -> float:
    """Return calories left for the day; negative when over target."""
    return goals.calories - totals.calories
