"""Models for recipe completion."""

from dataclasses import dataclass

from pydantic import BaseModel, Field

from nutrimind.domain.entries import InventoryItem, LogEntry
from nutrimind.domain.goals import EffectiveGoalProfile
from nutrimind.domain.nutrition import MacroProfile, MealSlot


class RecipeMacros(BaseModel):
    """Estimated macros for a generated recipe."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0


class Recipe(BaseModel):
    """Recipe suggested to close the remaining macros."""

    title: str
    description: str = ""
    ingredients: list[str] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    macros: RecipeMacros = Field(default_factory=RecipeMacros)


@dataclass(frozen=True)
class RecipeRequest:
    """Everything the recipe model needs to plan the next meal."""

    entries: list[LogEntry]
    goals: EffectiveGoalProfile
    remaining: MacroProfile
    inventory: list[InventoryItem]
    next_meal: MealSlot
    current_hour: int
    craving: str | None = None
