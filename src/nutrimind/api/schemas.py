"""Pydantic models for API requests and responses."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, Field

from nutrimind.domain.entries import DaySummary, InventoryItem, LogEntry
from nutrimind.domain.goals import EffectiveGoalProfile, GoalProfile, GoalType
from nutrimind.domain.nutrition import MacroProfile, MealSlot, NutrientProfile
from nutrimind.domain.recipes import Recipe
from nutrimind.services.totals import aggregate
from nutrimind.services.weekly import WeekOverview


class NutrientsModel(BaseModel):
    """Nutrient amounts in kcal, grams and milligrams."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float = 0.0
    salt: float = 0.0
    potassium: float = 0.0

    @classmethod
    def from_profile(cls, profile: NutrientProfile) -> "NutrientsModel":
        return cls(
            calories=profile.calories,
            protein=profile.protein,
            carbs=profile.carbs,
            fat=profile.fat,
            fiber=profile.fiber,
            salt=profile.salt,
            potassium=profile.potassium,
        )


class MacrosModel(BaseModel):
    """Calories and macros."""

    calories: float
    protein: float
    carbs: float
    fat: float

    @classmethod
    def from_profile(cls, profile: MacroProfile) -> "MacrosModel":
        return cls(
            calories=profile.calories,
            protein=profile.protein,
            carbs=profile.carbs,
            fat=profile.fat,
        )


class EntryCreate(BaseModel):
    """Meal description and photos to analyze."""

    text: str = ""
    images: list[str] = Field(
        default_factory=list, description="Base64 images, raw or as data URLs"
    )
    tags: list[str] = Field(default_factory=list)


class EntryOut(BaseModel):
    """Logged entry."""

    id: UUID
    name: str
    nutrients: NutrientsModel
    meal_slot: MealSlot
    logged_at: datetime
    tags: list[str]
    inflammation_flags: list[str]
    insight: str | None
    image_count: int

    @classmethod
    def from_entry(cls, entry: LogEntry) -> "EntryOut":
        return cls(
            id=entry.id,
            name=entry.name,
            nutrients=NutrientsModel.from_profile(entry.nutrients),
            meal_slot=entry.meal_slot,
            logged_at=entry.logged_at,
            tags=list(entry.tags),
            inflammation_flags=list(entry.inflammation_flags),
            insight=entry.insight,
            image_count=len(entry.images),
        )


class GoalsOut(BaseModel):
    """Base goal profile."""

    type: GoalType
    targets: NutrientsModel
    is_training_day: bool
    steps: int
    water_ml: int

    @classmethod
    def from_goals(cls, goals: GoalProfile) -> "GoalsOut":
        return cls(
            type=goals.type,
            targets=NutrientsModel.from_profile(goals.targets),
            is_training_day=goals.is_training_day,
            steps=goals.steps,
            water_ml=goals.water_ml,
        )


class TargetsIn(BaseModel):
    """Base daily targets, all non-negative."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)
    fiber: float = Field(default=0.0, ge=0)
    salt: float = Field(default=0.0, ge=0)
    potassium: float = Field(default=0.0, ge=0)

    def to_profile(self) -> NutrientProfile:
        return NutrientProfile(**self.model_dump())


class GoalsUpdate(BaseModel):
    """Partial goal profile edit."""

    type: GoalType | None = None
    targets: TargetsIn | None = None
    is_training_day: bool | None = None
    steps: int | None = Field(default=None, ge=0)
    water_ml: int | None = Field(default=None, ge=0)


class EffectiveGoalsOut(BaseModel):
    """Goal profile after situational modifiers."""

    type: GoalType
    targets: NutrientsModel
    water_ml: int

    @classmethod
    def from_goals(cls, goals: EffectiveGoalProfile) -> "EffectiveGoalsOut":
        return cls(
            type=goals.type,
            targets=NutrientsModel.from_profile(goals.targets),
            water_ml=goals.water_ml,
        )


class DashboardOut(BaseModel):
    """Today's progress against the effective goals."""

    goals: EffectiveGoalsOut
    totals: NutrientsModel
    meals: dict[MealSlot, NutrientsModel]
    remaining: MacrosModel
    progress: dict[str, float]
    calories_left: float
    next_meal: MealSlot


class DayOut(BaseModel):
    """One day of the weekly log."""

    day: date
    label: str
    entries: list[EntryOut]
    totals: NutrientsModel

    @classmethod
    def from_summary(cls, summary: DaySummary) -> "DayOut":
        return cls(
            day=summary.day,
            label=summary.label,
            entries=[EntryOut.from_entry(entry) for entry in summary.entries],
            totals=NutrientsModel.from_profile(aggregate(summary.entries)),
        )


class WeekOverviewOut(BaseModel):
    """Calorie performance over the active days of the week."""

    active_days: int
    total_calories: float
    average_calories: int
    target_calories: float
    difference: float
    is_deficit: bool

    @classmethod
    def from_overview(cls, overview: WeekOverview) -> "WeekOverviewOut":
        return cls(
            active_days=overview.active_days,
            total_calories=overview.total_calories,
            average_calories=overview.average_calories,
            target_calories=overview.target_calories,
            difference=overview.difference,
            is_deficit=overview.is_deficit,
        )


class WeekOut(BaseModel):
    """Monday..Sunday log with an overview."""

    days: list[DayOut]
    overview: WeekOverviewOut


class InventoryItemIn(BaseModel):
    """New kitchen inventory item."""

    name: str = Field(min_length=1)
    quantity: str = ""


class InventoryItemOut(BaseModel):
    """Kitchen inventory item."""

    id: UUID
    name: str
    quantity: str

    @classmethod
    def from_item(cls, item: InventoryItem) -> "InventoryItemOut":
        return cls(id=item.id, name=item.name, quantity=item.quantity)


class ChefRequest(BaseModel):
    """Optional craving for the recipe suggestion."""

    craving: str | None = None


class ChefOut(BaseModel):
    """Recipe suggestion with the inputs that shaped it."""

    meal: MealSlot
    remaining: MacrosModel
    recipe: Recipe
