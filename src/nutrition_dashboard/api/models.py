"""Pydantic models for the dashboard API."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field

from nutrition_dashboard.domain.entries import EntryInput

_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


class EntryPayload(BaseModel):
    """Values submitted for a daily entry."""

    date: str = Field(pattern=_DATE_PATTERN)
    calories: float = Field(default=0, ge=0)
    calories_burned: float = Field(default=0, ge=0)
    carbs: float = Field(default=0, ge=0)
    sugar: float = Field(default=0, ge=0)
    protein: float = Field(default=0, ge=0)
    fiber: float = Field(default=0, ge=0)
    fat: float = Field(default=0, ge=0)
    sodium: float = Field(default=0, ge=0)
    drinks: float | None = Field(default=None, ge=0)
    cycle_id: UUID | None = None

    def to_input(self) -> EntryInput:
        """Convert to the domain input type."""
        return EntryInput(**self.model_dump())


class EntryResponse(BaseModel):
    """Stored entry with derived display values."""

    id: UUID
    date: str
    display_date: str
    calories: float
    calories_burned: float
    carbs: float
    sugar: float
    protein: float
    fiber: float
    fat: float
    sodium: float
    drinks: float | None
    drinks_status: str
    cycle_id: UUID | None
    deficit: float
    deficit_display: str


class TargetsResponse(BaseModel):
    """Nutrient targets."""

    calories: float
    carbs: float
    sugar: float
    protein: float
    fiber: float
    fat: float
    sodium: float
    deficit: float
    drinks: float


class TargetsUpdate(BaseModel):
    """Changed nutrient targets; omitted targets keep their stored value."""

    calories: float | None = Field(default=None, ge=0)
    carbs: float | None = Field(default=None, ge=0)
    sugar: float | None = Field(default=None, ge=0)
    protein: float | None = Field(default=None, ge=0)
    fiber: float | None = Field(default=None, ge=0)
    fat: float | None = Field(default=None, ge=0)
    sodium: float | None = Field(default=None, ge=0)
    deficit: float | None = None
    drinks: float | None = Field(default=None, ge=0)

    def changes(self) -> dict[str, float]:
        """Return only the targets given a value."""
        return self.model_dump(exclude_none=True)


class SettingsUpdate(BaseModel):
    """Partial settings update; omitted fields are left unchanged."""

    theme: Literal["light", "dark"] | None = None
    show_drinks: bool | None = None
    targets: TargetsUpdate | None = None


class SettingsResponse(BaseModel):
    """Current user settings."""

    theme: str
    show_drinks: bool
    targets: TargetsResponse
    active_cycle_id: UUID | None


class CycleCreate(BaseModel):
    """Request to start a new logging cycle."""

    name: str


class CycleResponse(BaseModel):
    """Logging cycle."""

    id: UUID
    name: str
    created_at: datetime


class CycleDeleted(BaseModel):
    """Result of deleting a cycle."""

    moved_entries: int


class TrendResponse(BaseModel):
    """Trend directions for a nutrient."""

    avg_trend: str
    med_trend: str


class NutrientSummaryResponse(BaseModel):
    """Statistics for one nutrient."""

    nutrient: str
    target: float
    average: float
    median: float
    trend: TrendResponse


class DrinkStatsResponse(BaseModel):
    """Rolling-window drink statistics."""

    daily_avg: float
    daily_median: float
    days_with_drinks: int
    days_with_drinks_last7: int
    current_week_total: float
    weekly_avg_total: float
    weekly_median_total: float
    daily_exceeds_target: bool
    weekly_exceeds_target: bool
    has_complete_weeks: bool


class DashboardResponse(BaseModel):
    """Dashboard statistics for a range and scope."""

    range: str
    scope: str
    reference_date: str
    entry_count: int
    nutrients: list[NutrientSummaryResponse]
    drinks: DrinkStatsResponse | None
