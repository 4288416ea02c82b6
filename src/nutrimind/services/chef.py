"""Recipe suggestions that complete the day's macros."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nutrimind.domain.entries import InventoryItem, LogEntry
from nutrimind.domain.goals import EffectiveGoalProfile
from nutrimind.domain.recipes import Recipe, RecipeRequest
from nutrimind.errors import RecipeGenerationError
from nutrimind.services.language_model import LanguageModelClient
from nutrimind.services.meal_slots import select_next_meal
from nutrimind.services.totals import aggregate, remaining_macros

_NUMBER = {"type": "number"}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}

RECIPE_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "description": {"type": "string"},
        "ingredients": _STRING_LIST,
        "instructions": _STRING_LIST,
        "macros": {
            "type": "object",
            "properties": {
                "calories": _NUMBER,
                "protein": _NUMBER,
                "carbs": _NUMBER,
                "fat": _NUMBER,
            },
            "required": ["calories", "protein", "carbs", "fat"],
            "additionalProperties": False,
        },
    },
    "required": ["title", "description", "ingredients", "instructions", "macros"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


def build_recipe_request(  # noqa: PLR0913
    entries: Sequence[LogEntry],
    goals: EffectiveGoalProfile,
    inventory: Sequence[InventoryItem],
    current_hour: int,
    craving: str | None = None,
) -> RecipeRequest:
    """Collect remaining macros and the next meal slot for a recipe request."""
    totals = aggregate(entries)
    return RecipeRequest(
        entries=list(entries),
        goals=goals,
        remaining=remaining_macros(totals, goals.targets),
        inventory=list(inventory),
        next_meal=select_next_meal(entries, current_hour),
        current_hour=current_hour,
        craving=craving.strip() if craving and craving.strip() else None,
    )


@dataclass
class ChefService:
    """Generates a complete meal for the next slot from the inventory."""

    client: LanguageModelClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def complete_day(  # noqa: PLR0913
        self,
        entries: Sequence[LogEntry],
        goals: EffectiveGoalProfile,
        inventory: Sequence[InventoryItem],
        current_hour: int,
        craving: str | None = None,
    ) -> Recipe:
        """Return a recipe filling the remaining macros.

        Raises ``RecipeGenerationError`` when the model call or its output
        fails.
        """
        request = build_recipe_request(
            entries, goals, inventory, current_hour, craving
        )
        try:
            raw = await self.client.generate_json(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=_build_prompt(request),
                schema=RECIPE_SCHEMA,
                schema_name="recipe",
            )
            return Recipe.model_validate(raw)
        except Exception as exc:
            _logger.exception("Recipe generation failed for %s", request.next_meal)
            raise RecipeGenerationError from exc


def _build_prompt(request: RecipeRequest) -> str:
    remaining = request.remaining
    consumed = ", ".join(entry.name for entry in request.entries) or "nothing yet"
    inventory = ", ".join(f"{item.quantity} {item.name}" for item in request.inventory)
    lines = [
        "Context:",
        f"- User consumed: {consumed}.",
        (
            f"- Remaining macros needed: {remaining.calories:g} kcal, "
            f"{remaining.protein:g}g P, {remaining.carbs:g}g C, {remaining.fat:g}g F."
        ),
        f"- Time: {request.current_hour}:00.",
        f"- Kitchen inventory: {inventory or 'empty'}.",
    ]
    if request.craving:
        lines.append(f'- User craving/request: "{request.craving}"')
    lines += [
        "",
        "Task:",
        f'Generate a COMPLETE meal plan for "{request.next_meal}".',
    ]
    if request.craving:
        lines.append(
            f'PRIORITY: incorporate the craving ("{request.craving}") if possible, '
            "or offer a healthy alternative."
        )
    lines += [
        "Fill the remaining macros as exactly as possible, using the inventory.",
        "If the remaining macros are low, suggest a light snack.",
        "Explain briefly in the description why the meal fits.",
    ]
    return "\n".join(lines)
