"""User settings service."""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from nutrition_dashboard.domain.settings import NutrientTargets, UserSettings

THEMES = frozenset({"light", "dark"})


class UserSettingsRepository(Protocol):
    """Persistence interface for user settings."""

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        """Return the user's settings if stored."""

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        """Create or replace the user's settings."""


@dataclass
class UserSettingsService:
    """Service for user settings."""

    repository: UserSettingsRepository

    def get_settings(self, user_id: UUID) -> UserSettings:
        """Return stored settings, creating defaults on first access."""
        stored = self.repository.get_settings(user_id)
        if stored is not None:
            return stored
        defaults = UserSettings()
        self.repository.save_settings(user_id, defaults)
        return defaults

    def set_targets(self, user_id: UUID, targets: NutrientTargets) -> UserSettings:
        """Persist new nutrient targets."""
        return self._update(user_id, targets=targets)

    def set_theme(self, user_id: UUID, theme: str) -> UserSettings:
        """Persist the preferred theme."""
        _check_theme(theme)
        return self._update(user_id, theme=theme)

    def set_show_drinks(self, user_id: UUID, show_drinks: bool) -> UserSettings:
        """Persist whether drink statistics are shown."""
        return self._update(user_id, show_drinks=show_drinks)

    def set_active_cycle(self, user_id: UUID, cycle_id: UUID | None) -> UserSettings:
        """Persist the active logging cycle; None clears it."""
        return self._update(user_id, active_cycle_id=cycle_id)

    def update_settings(
        self,
        user_id: UUID,
        *,
        theme: str | None = None,
        show_drinks: bool | None = None,
        target_changes: Mapping[str, float] | None = None,
    ) -> UserSettings:
        """Apply a partial update in a single save.

        Omitted values keep their stored setting, including individual targets.
        Nothing is saved when any value is rejected.
        """
        current = self.get_settings(user_id)
        changes: dict[str, object] = {}
        if theme is not None:
            _check_theme(theme)
            changes["theme"] = theme
        if show_drinks is not None:
            changes["show_drinks"] = show_drinks
        if target_changes:
            changes["targets"] = replace(current.targets, **target_changes)
        if not changes:
            return current
        updated = replace(current, **changes)
        self.repository.save_settings(user_id, updated)
        return updated

    def _update(self, user_id: UUID, **changes: object) -> UserSettings:
        updated = replace(self.get_settings(user_id), **changes)
        self.repository.save_settings(user_id, updated)
        return updated


def _check_theme(theme: str) -> None:
    if theme not in THEMES:
        raise ValueError(f"Unknown theme: {theme}")
