"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.supabase_entry_repository import (
    SupabaseEntryRepository,
)
from calorie_tracker.config import Settings
from calorie_tracker.services.entries import EntryService
from calorie_tracker.services.metrics import MetricsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    entry_service: EntryService
    metrics_service: MetricsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_repository = SupabaseEntryRepository(
        supabase_client, table_name=resolved_settings.entries_table
    )

    async def close_resources() -> None:
        """Nothing to release; the Supabase client is synchronous."""
        return None

    return AppContainer(
        settings=resolved_settings,
        entry_service=EntryService(entry_repository),
        metrics_service=MetricsService(entry_repository),
        close_resources=close_resources,
    )
