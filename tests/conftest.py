"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import uuid4

import pytest

from nutrimind.config import Settings
from nutrimind.containers import AppContainer
from nutrimind.domain.entries import LogEntry
from nutrimind.domain.nutrition import MealSlot, NutrientProfile
from nutrimind.services.analysis import MealAnalysisService
from nutrimind.services.chef import ChefService
from nutrimind.services.coach import CoachService
from nutrimind.services.language_model import LanguageModelClient
from nutrimind.services.session import NutritionSession
from nutrimind.services.weekly import HistoryRepository


def make_entry(  # noqa: PLR0913
    meal_slot: MealSlot = MealSlot.SNACK,
    calories: float = 0,
    protein: float = 0,
    carbs: float = 0,
    fat: float = 0,
    *,
    fiber: float = 0,
    salt: float = 0,
    potassium: float = 0,
    logged_at: datetime | None = None,
    name: str = "meal",
) -> LogEntry:
    """Build a log entry with the given nutrients."""
    return LogEntry(
        id=uuid4(),
        name=name,
        nutrients=NutrientProfile(
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
            fiber=fiber,
            salt=salt,
            potassium=potassium,
        ),
        meal_slot=meal_slot,
        logged_at=logged_at or datetime(2026, 10, 14, 12, 0, tzinfo=UTC),
    )


@dataclass
class FakeLanguageModelClient(LanguageModelClient):
    """Fake language model client returning fixed payloads."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "name": "Chicken rice bowl",
            "calories": 650,
            "protein": 45,
            "carbs": 70,
            "fat": 15,
            "fiber": 6,
            "salt": 900,
            "potassium": 700,
            "inflammation_flags": [],
            "insight": "Solid protein, watch the sodium.",
            "meal_type": "Lunch",
        }
    )
    text: str = "Great protein so far, keep the salt down tonight."
    error: Exception | None = None
    json_calls: list[dict[str, object]] = field(default_factory=list)
    text_calls: list[dict[str, object]] = field(default_factory=list)

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
        self.json_calls.append(
            {
                "prompt": prompt,
                "schema_name": schema_name,
                "image_data_urls": list(image_data_urls),
            }
        )
        if self.error:
            raise self.error
        return self.payload

    async def generate_text(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        self.text_calls.append({"prompt": prompt})
        if self.error:
            raise self.error
        return self.text


@dataclass
class InMemoryHistoryRepository(HistoryRepository):
    """In-memory history source for tests."""

    entries: list[LogEntry] = field(default_factory=list)
    queries: list[tuple[datetime, datetime]] = field(default_factory=list)

    def list_entries(self, start: datetime, end: datetime) -> list[LogEntry]:
        self.queries.append((start, end))
        return [entry for entry in self.entries if start <= entry.logged_at < end]


@pytest.fixture
def settings() -> Settings:
    return Settings(openai_api_key="openai-key", history_seed=7)


@pytest.fixture
def model_client() -> FakeLanguageModelClient:
    return FakeLanguageModelClient()


@pytest.fixture
def container(
    settings: Settings, model_client: FakeLanguageModelClient
) -> AppContainer:
    session = NutritionSession(
        timezone_name=settings.timezone,
        synthetic_history=settings.synthetic_history,
        history_seed=settings.history_seed,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session=session,
        analysis_service=MealAnalysisService(
            client=model_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        coach_service=CoachService(
            client=model_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        chef_service=ChefService(
            client=model_client,
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        ),
        close_resources=close_resources,
    )
