"""Coaching advice from the language model."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from nutrimind.domain.entries import LogEntry
from nutrimind.domain.goals import EffectiveGoalProfile
from nutrimind.services.language_model import LanguageModelClient

EMPTY_ADVICE = "Keep pushing towards your goals."
OFFLINE_ADVICE = "The Coach is currently offline."

_logger = logging.getLogger(__name__)


@dataclass
class CoachService:
    """Short real-time advice on salt intake and macro balance."""

    client: LanguageModelClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def advise(
        self, entries: Sequence[LogEntry], goals: EffectiveGoalProfile
    ) -> str:
        """Return one or two sentences of advice, or a fixed fallback."""
        try:
            text = await self.client.generate_text(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=_build_prompt(entries, goals),
            )
        except Exception:
            _logger.exception("Coach advice failed")
            return OFFLINE_ADVICE
        return text.strip() or EMPTY_ADVICE


def _build_prompt(entries: Sequence[LogEntry], goals: EffectiveGoalProfile) -> str:
    intake = ", ".join(
        f"{entry.name} ({entry.nutrients.calories:g}kcal, "
        f"{entry.nutrients.salt:g}mg salt)"
        for entry in entries
    )
    return (
        'You are "The Coach", a tough but strategic nutrition agent.\n'
        f"User goals: {goals.type} mode. Targets: {goals.targets.calories:g} kcal, "
        f"{goals.targets.protein:g}g protein.\n"
        f"Today's intake so far: {intake or 'nothing logged yet'}.\n"
        "Analyze the salt intake and macro balance. Provide 1-2 sentences of "
        "real-time advice. If they are doing well, encourage them. If they are "
        "eating too much salt or too little protein, warn them."
    )
