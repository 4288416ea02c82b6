"""Meal analysis service using a multimodal model."""

import base64
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import uuid4

from nutrimind.domain.analysis import MealAnalysis
from nutrimind.domain.entries import LogEntry
from nutrimind.domain.nutrition import MealSlot
from nutrimind.errors import MealAnalysisError
from nutrimind.services.language_model import LanguageModelClient, nullable
from nutrimind.services.meal_slots import infer_meal_slot

UNKNOWN_FOOD = "Unknown Food"

_NUMBER = {"type": "number"}

ANALYSIS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "calories": _NUMBER,
        "protein": _NUMBER,
        "carbs": _NUMBER,
        "fat": _NUMBER,
        "fiber": nullable(_NUMBER),
        "salt": nullable(_NUMBER),
        "potassium": nullable(_NUMBER),
        "inflammation_flags": {"type": "array", "items": {"type": "string"}},
        "insight": {"type": "string"},
        "meal_type": {"type": "string", "enum": [slot.value for slot in MealSlot]},
    },
    "required": [
        "name",
        "calories",
        "protein",
        "carbs",
        "fat",
        "fiber",
        "salt",
        "potassium",
        "inflammation_flags",
        "insight",
        "meal_type",
    ],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


@dataclass
class MealAnalysisService:
    """Turns a meal description and photos into a log entry."""

    client: LanguageModelClient
    model: str
    reasoning_effort: str | None
    store: bool

    async def analyze(
        self,
        text: str,
        images: Sequence[bytes],
        tags: Sequence[str],
        now: datetime,
    ) -> LogEntry:
        """Estimate nutrients for the whole meal and build its entry.

        Raises ``ValueError`` when neither text nor images are given and
        ``MealAnalysisError`` when the model call or its output fails.
        """
        if not text.strip() and not images:
            raise ValueError("A description or at least one image is required")

        data_urls = [_to_data_url(image) for image in images]
        prompt = _build_prompt(text, tags, now.hour)
        try:
            raw = await self.client.generate_json(
                model=self.model,
                reasoning_effort=self.reasoning_effort,
                store=self.store,
                prompt=prompt,
                schema=ANALYSIS_SCHEMA,
                schema_name="meal_analysis",
                image_data_urls=data_urls,
            )
            analysis = MealAnalysis.model_validate(raw)
        except Exception as exc:
            _logger.exception("Meal analysis failed")
            raise MealAnalysisError from exc

        return LogEntry(
            id=uuid4(),
            name=analysis.name or UNKNOWN_FOOD,
            nutrients=analysis.nutrients(),
            meal_slot=analysis.meal_type or infer_meal_slot(now.hour),
            logged_at=now,
            tags=tuple(tags),
            inflammation_flags=tuple(analysis.inflammation_flags),
            insight=analysis.insight or None,
            images=tuple(data_urls),
        )


def _build_prompt(text: str, tags: Sequence[str], hour: int) -> str:
    return (
        "Analyze this food log entry.\n"
        f'User description: "{text}".\n'
        f'Context tags: "{", ".join(tags)}".\n'
        f"Time of day (hour): {hour}.\n"
        "Estimate the nutritional content for the ENTIRE entry, combining the "
        "description and any images. Use grams for protein, carbs, fat and "
        "fiber and milligrams for salt and potassium. "
        "List potential inflammation flags (e.g. High Sugar, Processed Oils, "
        "Trans Fats). Give a concise name, a single short sentence of insight "
        "about the meal, and the meal type."
    )


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"
