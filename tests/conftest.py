"""Shared test fixtures."""

from dataclasses import asdict, dataclass, field, replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

import pytest

from nutrition_dashboard.config import Settings
from nutrition_dashboard.containers import AppContainer
from nutrition_dashboard.domain.entries import DailyEntry, EntryInput
from nutrition_dashboard.domain.settings import LoggingCycle, UserSettings
from nutrition_dashboard.services.cycles import CycleRepository, CycleService
from nutrition_dashboard.services.dashboard import DashboardService
from nutrition_dashboard.services.entries import EntryRepository, EntryService
from nutrition_dashboard.services.user_settings import (
    UserSettingsRepository,
    UserSettingsService,
)

OWNER_ID = UUID("00000000-0000-0000-0000-000000000001")


def make_entry(day: str, **values: object) -> DailyEntry:
    """Build an entry for the default test owner."""
    return DailyEntry(id=uuid4(), owner_id=OWNER_ID, date=day, **values)


@dataclass
class InMemoryEntryRepository(EntryRepository):
    """In-memory entry repository for tests."""

    entries: dict[UUID, DailyEntry] = field(default_factory=dict)

    def add(self, *entries: DailyEntry) -> None:
        for entry in entries:
            self.entries[entry.id] = entry

    def list_entries(self, user_id: UUID) -> list[DailyEntry]:
        owned = [e for e in self.entries.values() if e.owner_id == user_id]
        return sorted(owned, key=lambda entry: entry.date, reverse=True)

    def get_entry(self, user_id: UUID, entry_id: UUID) -> DailyEntry | None:
        entry = self.entries.get(entry_id)
        if entry is None or entry.owner_id != user_id:
            return None
        return entry

    def create_entry(self, user_id: UUID, values: EntryInput) -> DailyEntry:
        entry = DailyEntry(id=uuid4(), owner_id=user_id, **asdict(values))
        self.entries[entry.id] = entry
        return entry

    def update_entry(self, entry_id: UUID, values: EntryInput) -> DailyEntry:
        current = self.entries[entry_id]
        updated = DailyEntry(id=current.id, owner_id=current.owner_id, **asdict(values))
        self.entries[entry_id] = updated
        return updated

    def delete_entry(self, entry_id: UUID) -> None:
        self.entries.pop(entry_id, None)

    def unassign_cycle(self, user_id: UUID, cycle_id: UUID) -> int:
        moved = 0
        for entry_id, entry in list(self.entries.items()):
            if entry.owner_id == user_id and entry.cycle_id == cycle_id:
                self.entries[entry_id] = replace(entry, cycle_id=None)
                moved += 1
        return moved


@dataclass
class InMemoryCycleRepository(CycleRepository):
    """In-memory cycle repository for tests."""

    cycles: dict[UUID, LoggingCycle] = field(default_factory=dict)

    def list_cycles(self, user_id: UUID) -> list[LoggingCycle]:
        owned = [c for c in self.cycles.values() if c.owner_id == user_id]
        return sorted(owned, key=lambda cycle: cycle.created_at, reverse=True)

    def get_cycle(self, user_id: UUID, cycle_id: UUID) -> LoggingCycle | None:
        cycle = self.cycles.get(cycle_id)
        if cycle is None or cycle.owner_id != user_id:
            return None
        return cycle

    def create_cycle(self, user_id: UUID, name: str) -> LoggingCycle:
        cycle = LoggingCycle(
            id=uuid4(), owner_id=user_id, name=name, created_at=datetime.now(tz=UTC)
        )
        self.cycles[cycle.id] = cycle
        return cycle

    def delete_cycle(self, cycle_id: UUID) -> None:
        self.cycles.pop(cycle_id, None)


@dataclass
class InMemoryUserSettingsRepository(UserSettingsRepository):
    """In-memory user settings repository for tests."""

    settings: dict[UUID, UserSettings] = field(default_factory=dict)

    def get_settings(self, user_id: UUID) -> UserSettings | None:
        return self.settings.get(user_id)

    def save_settings(self, user_id: UUID, settings: UserSettings) -> None:
        self.settings[user_id] = settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        api_token="api-token",
    )


@pytest.fixture
def entry_repository() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()


@pytest.fixture
def cycle_repository() -> InMemoryCycleRepository:
    return InMemoryCycleRepository()


@pytest.fixture
def user_settings_service() -> UserSettingsService:
    return UserSettingsService(InMemoryUserSettingsRepository())


@pytest.fixture
def container(
    settings: Settings,
    entry_repository: InMemoryEntryRepository,
    cycle_repository: InMemoryCycleRepository,
    user_settings_service: UserSettingsService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
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
            daily_drink_target=settings.daily_drink_target,
            weekly_drink_target=settings.weekly_drink_target,
        ),
    )
