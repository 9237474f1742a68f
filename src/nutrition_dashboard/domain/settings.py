"""Domain models for user settings and logging cycles."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class NutrientTargets:
    """Daily goal values for each tracked nutrient."""

    calories: float = 2000
    carbs: float = 250
    sugar: float = 50
    protein: float = 150
    fiber: float = 30
    fat: float = 65
    sodium: float = 2300
    deficit: float = 500
    drinks: float = 4


@dataclass(frozen=True)
class UserSettings:
    """Per-user dashboard preferences."""

    theme: str = "light"
    show_drinks: bool = True
    targets: NutrientTargets = field(default_factory=NutrientTargets)
    active_cycle_id: UUID | None = None


@dataclass(frozen=True)
class LoggingCycle:
    """Named logging period that groups entries."""

    id: UUID
    owner_id: UUID
    name: str
    created_at: datetime
