"""Application configuration."""

import os
from datetime import time

from pydantic_settings import BaseSettings, SettingsConfigDict

from feeding_schedule.domain.schedule import (
    DEFAULT_MEALS_PER_DAY,
    DEFAULT_WINDOW_END,
    DEFAULT_WINDOW_START,
    ScheduleConfig,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    meals_per_day: int = DEFAULT_MEALS_PER_DAY
    feeding_window_start: time = DEFAULT_WINDOW_START
    feeding_window_end: time = DEFAULT_WINDOW_END
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def default_schedule_config(settings: Settings) -> ScheduleConfig:
    """Build the config seeded into an empty store."""
    return ScheduleConfig(
        meals_per_day=settings.meals_per_day,
        window_start=settings.feeding_window_start,
        window_end=settings.feeding_window_end,
    )
