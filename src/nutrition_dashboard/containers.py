"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutrition_dashboard.adapters.supabase_cycle_repository import (
    SupabaseCycleRepository,
)
from nutrition_dashboard.adapters.supabase_entry_repository import (
    SupabaseEntryRepository,
)
from nutrition_dashboard.adapters.supabase_user_settings_repository import (
    SupabaseUserSettingsRepository,
)
from nutrition_dashboard.config import Settings
from nutrition_dashboard.services.cycles import CycleService
from nutrition_dashboard.services.dashboard import DashboardService
from nutrition_dashboard.services.entries import EntryService
from nutrition_dashboard.services.user_settings import UserSettingsService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_settings_service: UserSettingsService
    entry_service: EntryService
    cycle_service: CycleService
    dashboard_service: DashboardService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    entry_repository = SupabaseEntryRepository(supabase_client)
    cycle_repository = SupabaseCycleRepository(supabase_client)
    user_settings_service = UserSettingsService(
        SupabaseUserSettingsRepository(supabase_client)
    )
    return AppContainer(
        settings=resolved_settings,
        user_settings_service=user_settings_service,
        entry_service=EntryService(entry_repository, user_settings_service),
        cycle_service=CycleService(
            repository=cycle_repository,
            entry_repository=entry_repository,
            user_settings_service=user_settings_service,
        ),
        dashboard_service=DashboardService(
            entry_repository=entry_repository,
            user_settings_service=user_settings_service,
            daily_drink_target=resolved_settings.daily_drink_target,
            weekly_drink_target=resolved_settings.weekly_drink_target,
        ),
    )
