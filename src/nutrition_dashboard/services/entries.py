"""Daily entry management."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from nutrition_dashboard.domain.entries import DailyEntry, EntryInput
from nutrition_dashboard.domain.errors import NotFoundError
from nutrition_dashboard.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


class EntryRepository(Protocol):
    """Persistence interface for daily entries."""

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return a user's entries ordered newest first."""

    def get_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry | None:
        """Return a single entry owned by the user."""

    def create_entry(self, user_id: UUID, values: EntryInput) -> DailyEntry:
        """Create an entry and return it."""

    def update_entry(self, entry_id: UUID, values: EntryInput) -> DailyEntry:
        """Replace an entry's values and return it."""

    def delete_entry(self, entry_id: UUID) -> None:
        """Delete an entry."""

    def unassign_cycle(self, user_id: UUID, cycle_id: UUID) -> int:
        """Clear the cycle on every entry in it and return how many changed."""


@dataclass
class EntryService:
    """Service for creating and editing daily entries."""

    repository: EntryRepository
    user_settings_service: UserSettingsService

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        """Return all entries for a user, newest first."""
        return self.repository.list_entries(user_id)

    def add_entry(self, user_id: UUID, values: EntryInput) -> DailyEntry:
        """Create an entry, assigning it to the active cycle when unset."""
        if values.cycle_id is None:
            active_cycle_id = self.user_settings_service.get_settings(
                user_id
            ).active_cycle_id
            values = replace(values, cycle_id=active_cycle_id)
        entry = self.repository.create_entry(user_id, values)
        _logger.info("Entry created: user_id=%s date=%s", user_id, entry.date)
        return entry

    def update_entry(
        self, user_id: UUID, entry_id: UUID, values: EntryInput
    ) -> DailyEntry:
        """Update an entry; it stays in the cycle it was logged under."""
        existing = self._require_entry(user_id, entry_id)
        values = replace(values, cycle_id=existing.cycle_id)
        entry = self.repository.update_entry(entry_id, values)
        _logger.info("Entry updated: user_id=%s entry_id=%s", user_id, entry_id)
        return entry

    def delete_entry(self, user_id: UUID, entry_id: UUID) -> None:
        """Delete an entry owned by the user."""
        self._require_entry(user_id, entry_id)
        self.repository.delete_entry(entry_id)
        _logger.info("Entry deleted: user_id=%s entry_id=%s", user_id, entry_id)

    def _require_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry:
        entry = self.repository.get_entry(user_id, entry_id)
        if entry is None:
            raise NotFoundError(f"Entry {entry_id} not found")
        return entry
