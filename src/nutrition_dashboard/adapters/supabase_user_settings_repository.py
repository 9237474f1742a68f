"""Supabase repository for user settings."""

from dataclasses import asdict, dataclass, fields
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from nutrition_dashboard.domain.settings import NutrientTargets, UserSettings
from nutrition_dashboard.services.user_settings import UserSettingsRepository


@dataclass
class SupabaseUserSettingsRepository(UserSettingsRepository):
    """Supabase implementation for user settings."""

    client: Client

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the stored settings for a user."""
        response = (
            self.client.table("user_settings")
            .select("theme, show_drinks, targets, active_cycle_id")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        """Create or replace the user's settings row."""
        self.client.table("user_settings").upsert(
            {
                "user_id": str(user_id),
                "theme": settings.theme,
                "show_drinks": settings.show_drinks,
                "targets": asdict(settings.targets),
                "active_cycle_id": str(settings.active_cycle_id)
                if settings.active_cycle_id
                else None,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="user_id",
        ).execute()


def _parse_targets(raw: object) -> NutrientTargets:
    if not isinstance(raw, dict):
        return NutrientTargets()
    values = {
        field.name: float(raw[field.name])
        for field in fields(NutrientTargets)
        if raw.get(field.name) is not None
    }
    return NutrientTargets(**values)


def _parse_row(row: dict[str, object]) -> UserSettings:
    active_raw = row.get("active_cycle_id")
    show_drinks = row.get("show_drinks")
    return UserSettings(
        theme=str(row.get("theme") or "light"),
        show_drinks=True if show_drinks is None else bool(show_drinks),
        targets=_parse_targets(row.get("targets")),
        active_cycle_id=UUID(str(active_raw)) if active_raw else None,
    )
