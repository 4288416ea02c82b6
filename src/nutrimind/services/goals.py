"""Effective goal derivation."""

from dataclasses import replace

from nutrimind.domain.goals import EffectiveGoalProfile, GoalProfile

TRAINING_DAY_CALORIES = 300
TRAINING_DAY_CARBS = 50
STEP_BONUS_THRESHOLD = 10000
STEP_BONUS_CARBS = 30


def adjust_goals(base: GoalProfile) -> EffectiveGoalProfile:
    """Apply training-day and step modifiers to the base targets.

    Modifiers are additive and applied in a fixed order. The step bonus
    needs strictly more than ``STEP_BONUS_THRESHOLD`` steps.
    """
    targets = base.targets
    if base.is_training_day:
        targets = replace(
            targets,
            calories=targets.calories + TRAINING_DAY_CALORIES,
            carbs=targets.carbs + TRAINING_DAY_CARBS,
        )
    if base.steps > STEP_BONUS_THRESHOLD:
        targets = replace(targets, carbs=targets.carbs + STEP_BONUS_CARBS)
    return EffectiveGoalProfile(type=base.type, targets=targets, water_ml=base.water_ml)
