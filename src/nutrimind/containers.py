"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutrimind.adapters.openai_language_model_client import (
    OpenAILanguageModelClient,
)
from nutrimind.adapters.supabase_history_repository import SupabaseHistoryRepository
from nutrimind.config import Settings
from nutrimind.services.analysis import MealAnalysisService
from nutrimind.services.chef import ChefService
from nutrimind.services.coach import CoachService
from nutrimind.services.session import NutritionSession
from nutrimind.services.weekly import HistoryRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session: NutritionSession
    analysis_service: MealAnalysisService
    coach_service: CoachService
    chef_service: ChefService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    history_repository: HistoryRepository | None = None
    if resolved_settings.history_enabled:
        supabase_client = create_client(
            resolved_settings.supabase_url, resolved_settings.supabase_service_key
        )
        history_repository = SupabaseHistoryRepository(
            supabase_client, table=resolved_settings.history_table
        )
    model_client = OpenAILanguageModelClient.create(resolved_settings.openai_api_key)
    analysis_service = MealAnalysisService(
        client=model_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    coach_service = CoachService(
        client=model_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    chef_service = ChefService(
        client=model_client,
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )
    session = NutritionSession(
        timezone_name=resolved_settings.timezone,
        history=history_repository,
        synthetic_history=resolved_settings.synthetic_history,
        history_seed=resolved_settings.history_seed,
    )

    async def close_resources() -> None:
        await model_client.close()

    return AppContainer(
        settings=resolved_settings,
        session=session,
        analysis_service=analysis_service,
        coach_service=coach_service,
        chef_service=chef_service,
        close_resources=close_resources,
    )
