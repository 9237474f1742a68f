"""Domain models for daily nutrition entries."""

from dataclasses import dataclass
from enum import StrEnum
from uuid import UUID


class DrinksStatus(StrEnum):
    """Tracking state of the optional drinks field."""

    UNTRACKED = "untracked"
    ZERO = "zero"
    POSITIVE = "positive"


@dataclass(frozen=True)
class DailyEntry:
    """One logged day of intake and expenditure for a user."""

    id: UUID
    owner_id: UUID
    date: str
    calories: float = 0.0
    calories_burned: float = 0.0
    carbs: float = 0.0
    sugar: float = 0.0
    protein: float = 0.0
    fiber: float = 0.0
    fat: float = 0.0
    sodium: float = 0.0
    drinks: float | None = None
    cycle_id: UUID | None = None

    @property
    def drinks_status(self) -> DrinksStatus:
        """Return whether drinks were logged for this day, and if any."""
        if self.drinks is None:
            return DrinksStatus.UNTRACKED
        if self.drinks > 0:
            return DrinksStatus.POSITIVE
        return DrinksStatus.ZERO


@dataclass(frozen=True)
class EntryInput:
    """Values supplied when creating or updating an entry."""

    date: str
    calories: float = 0.0
    calories_burned: float = 0.0
    carbs: float = 0.0
    sugar: float = 0.0
    protein: float = 0.0
    fiber: float = 0.0
    fat: float = 0.0
    sodium: float = 0.0
    drinks: float | None = None
    cycle_id: UUID | None = None
