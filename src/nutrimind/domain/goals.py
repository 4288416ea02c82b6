"""Domain models for nutrition goals."""

from dataclasses import dataclass, field
from enum import StrEnum

from nutrimind.domain.nutrition import NutrientProfile


class GoalType(StrEnum):
    """Body composition goal. Informational only."""

    RECOMPOSITION = "Recomposition"
    CUT = "Cut"
    BULK = "Bulk"


def _default_targets() -> NutrientProfile:
    return NutrientProfile(
        calories=2200,
        protein=180,
        carbs=200,
        fat=70,
        fiber=30,
        salt=2300,
        potassium=3500,
    )


@dataclass
class GoalProfile:
    """Base daily targets plus the situational inputs that adjust them."""

    type: GoalType = GoalType.RECOMPOSITION
    targets: NutrientProfile = field(default_factory=_default_targets)
    is_training_day: bool = False
    steps: int = 8000
    water_ml: int = 2500


@dataclass(frozen=True)
class EffectiveGoalProfile:
    """Targets after training-day and step modifiers are applied."""

    type: GoalType
    targets: NutrientProfile
    water_ml: int
