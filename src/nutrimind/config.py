"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_store: bool = False
    timezone: str = "UTC"
    synthetic_history: bool = True
    history_seed: int | None = None
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    history_table: str = "food_entries"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def history_enabled(self) -> bool:
        """Return True when a Supabase history source is configured."""
        return bool(self.supabase_url and self.supabase_service_key)
