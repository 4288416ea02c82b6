"""Nutrition domain models."""

from dataclasses import dataclass
from enum import StrEnum


class MealSlot(StrEnum):
    """Meal category a log entry is assigned to."""

    BREAKFAST = "Breakfast"
    LUNCH = "Lunch"
    DINNER = "Dinner"
    SNACK = "Snack"


@dataclass(frozen=True)
class NutrientProfile:
    """Calories, macros and tracked micros.

    Calories are kcal; protein, carbs, fat and fiber are grams; salt and
    potassium are milligrams.
    """

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    salt: float = 0.0
    potassium: float = 0.0


@dataclass(frozen=True)
class MacroProfile:
    """Calories and the three macronutrients."""

    calories: float
    protein: float
    carbs: float
    fat: float


ZERO_NUTRIENTS = NutrientProfile()
