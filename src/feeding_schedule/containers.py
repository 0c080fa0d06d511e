"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from feeding_schedule.adapters.supabase_schedule_store import SupabaseScheduleStore
from feeding_schedule.config import Settings, default_schedule_config
from feeding_schedule.services.schedule import ScheduleService, ScheduleStore


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    schedule_store: ScheduleStore
    schedule_service: ScheduleService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    schedule_store = SupabaseScheduleStore(supabase_client)
    schedule_service = ScheduleService(
        store=schedule_store,
        default_config=default_schedule_config(resolved_settings),
    )
    return AppContainer(
        settings=resolved_settings,
        schedule_store=schedule_store,
        schedule_service=schedule_service,
    )
