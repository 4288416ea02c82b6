"""Tests for effective goal derivation."""

from dataclasses import replace

from nutrimind.domain.goals import GoalProfile, GoalType
from nutrimind.domain.nutrition import NutrientProfile
from nutrimind.services.goals import adjust_goals

BASE_TARGETS = NutrientProfile(
    calories=2200,
    protein=180,
    carbs=200,
    fat=70,
    fiber=30,
    salt=2300,
    potassium=3500,
)


def _goals(**changes: object) -> GoalProfile:
    fields: dict[str, object] = {
        "targets": BASE_TARGETS,
        "is_training_day": False,
        "steps": 0,
    }
    fields.update(changes)
    return GoalProfile(**fields)


def test_rest_day_without_steps_keeps_base_targets() -> None:
    effective = adjust_goals(_goals())

    assert effective.targets == BASE_TARGETS


def test_training_day_adds_calories_and_carbs() -> None:
    effective = adjust_goals(_goals(is_training_day=True))

    assert effective.targets.calories == 2500
    assert effective.targets.carbs == 250
    assert effective.targets.protein == 180
    assert effective.targets.fat == 70


def test_steps_above_threshold_earn_carbs() -> None:
    effective = adjust_goals(_goals(steps=10001))

    assert effective.targets.carbs == 230
    assert effective.targets.calories == 2200


def test_steps_at_threshold_earn_nothing() -> None:
    effective = adjust_goals(_goals(steps=10000))

    assert effective.targets.carbs == 200


def test_training_and_steps_stack() -> None:
    effective = adjust_goals(_goals(is_training_day=True, steps=15000))

    assert effective.targets.carbs == 280
    assert effective.targets.calories == 2500


def test_micros_and_metadata_pass_through() -> None:
    base = _goals(type=GoalType.CUT, water_ml=3000, is_training_day=True)

    effective = adjust_goals(base)

    assert effective.type == GoalType.CUT
    assert effective.water_ml == 3000
    assert effective.targets.salt == 2300
    assert effective.targets.potassium == 3500


def test_adjust_is_idempotent_and_leaves_base_untouched() -> None:
    base = _goals(is_training_day=True, steps=12000)
    snapshot = replace(base)

    first = adjust_goals(base)
    second = adjust_goals(base)

    assert first == second
    assert base == snapshot
    assert base.targets == BASE_TARGETS


def test_default_profile_matches_starter_targets() -> None:
    goals = GoalProfile()

    assert goals.type == GoalType.RECOMPOSITION
    assert goals.targets.calories == 2200
    assert goals.steps == 8000
    assert adjust_goals(goals).targets.calories == 2200
