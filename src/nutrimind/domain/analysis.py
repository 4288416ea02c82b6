"""Models for meal analysis results."""

from pydantic import BaseModel, Field, field_validator

from nutrimind.domain.nutrition import MealSlot, NutrientProfile


class MealAnalysis(BaseModel):
    """Structured estimate returned by the meal analysis model."""

    name: str | None = None
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fat: float = 0.0
    fiber: float | None = None
    salt: float | None = None
    potassium: float | None = None
    inflammation_flags: list[str] = Field(default_factory=list)
    insight: str | None = None
    meal_type: MealSlot | None = None

    @field_validator(
        "calories", "protein", "carbs", "fat", "fiber", "salt", "potassium"
    )
    @classmethod
    def _clamp_negative(cls, value: float | None) -> float | None:
        if value is None:
            return None
        return max(0.0, value)

    @field_validator("inflammation_flags", mode="before")
    @classmethod
    def _none_to_empty(cls, value: object) -> object:
        return [] if value is None else value

    def nutrients(self) -> NutrientProfile:
        """Return the estimate as a nutrient profile, missing micros as zero."""
        return NutrientProfile(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            fat=self.fat,
            fiber=self.fiber or 0.0,
            salt=self.salt or 0.0,
            potassium=self.potassium or 0.0,
        )
