"""Logging cycle management."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrition_dashboard.domain.errors import NotFoundError
from nutrition_dashboard.domain.settings import LoggingCycle
from nutrition_dashboard.services.entries import EntryRepository
from nutrition_dashboard.services.user_settings import UserSettingsService

_logger = logging.getLogger(__name__)


class CycleRepository(Protocol):
    """Persistence interface for logging cycles."""

    def list_cycles(self, user_id: UUID) -> list[LoggingCycle]:
        """Return a user's cycles, most recently created first."""

    def get_cycle(self, user_id: UUID, cycle_id: UUID) -> LoggingCycle | None:
        """Return a cycle owned by the user."""

    def create_cycle(self, user_id: UUID, name: str) -> LoggingCycle:
        """Create a cycle and return it."""

    def delete_cycle(self, cycle_id: UUID) -> None:
        """Delete a cycle row."""


@dataclass
class CycleService:
    """Service for starting, switching and removing logging cycles."""

    repository: CycleRepository
    entry_repository: EntryRepository
    user_settings_service: UserSettingsService

    def list_cycles(self, user_id: UUID) -> list[LoggingCycle]:
        """Return the user's cycles."""
        return self.repository.list_cycles(user_id)

    def start_cycle(self, user_id: UUID, name: str) -> LoggingCycle:
        """Create a cycle and make it the active one."""
        cleaned = name.strip()
        if not cleaned:
            raise ValueError("Cycle name must not be empty")
        cycle = self.repository.create_cycle(user_id, cleaned)
        self.user_settings_service.set_active_cycle(user_id, cycle.id)
        _logger.info("Cycle started: user_id=%s cycle_id=%s", user_id, cycle.id)
        return cycle

    def activate_cycle(self, user_id: UUID, cycle_id: UUID) -> LoggingCycle:
        """Make an existing cycle the active one."""
        cycle = self._require_cycle(user_id, cycle_id)
        self.user_settings_service.set_active_cycle(user_id, cycle.id)
        return cycle

    def delete_cycle(self, user_id: UUID, cycle_id: UUID) -> int:
        """Delete a cycle, moving its entries back to legacy history.

        Returns the number of entries that were unassigned.
        """
        self._require_cycle(user_id, cycle_id)
        moved = self.entry_repository.unassign_cycle(user_id, cycle_id)
        self.repository.delete_cycle(cycle_id)
        settings = self.user_settings_service.get_settings(user_id)
        if settings.active_cycle_id == cycle_id:
            self.user_settings_service.set_active_cycle(user_id, None)
        _logger.info(
            "Cycle deleted: user_id=%s cycle_id=%s moved=%s", user_id, cycle_id, moved
        )
        return moved

    def _require_cycle(self, user_id: UUID, cycle_id: UUID) -> LoggingCycle:
        cycle = self.repository.get_cycle(user_id, cycle_id)
        if cycle is None:
            raise NotFoundError(f"Cycle {cycle_id} not found")
        return cycle
