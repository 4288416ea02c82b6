"""Interface for hosted language model calls."""

from collections.abc import Sequence
from typing import Protocol


class LanguageModelClient(Protocol):
    """Interface for structured and free-text model generation."""

    async def generate_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
        image_data_urls: Sequence[str] = (),
    ) -> dict[str, object]:
        """Return a JSON object matching ``schema``."""

    async def generate_text(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Return free text for ``prompt``."""


def nullable(schema: dict[str, object]) -> dict[str, object]:
    """Allow null for a strict structured-output property."""
    return {"anyOf": [schema, {"type": "null"}]}
