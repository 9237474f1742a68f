"""Domain models for statistics."""

from dataclasses import dataclass
from enum import StrEnum


class TrendDirection(StrEnum):
    """Direction of change for a statistic."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class RangeFilter(StrEnum):
    """Dashboard view selector over the entry history."""

    PREV = "prev"
    ALL = "all"
    LAST_3 = "3"
    LAST_7 = "7"
    LAST_30 = "30"


@dataclass(frozen=True)
class TrendResult:
    """Slope-based and median-based trend for one nutrient."""

    avg_trend: TrendDirection
    med_trend: TrendDirection


STABLE_TREND = TrendResult(
    avg_trend=TrendDirection.STABLE, med_trend=TrendDirection.STABLE
)


@dataclass(frozen=True)
class DrinkLimits:
    """Thresholds used to flag excessive drinking."""

    daily: float = 4
    weekly: float = 15


@dataclass(frozen=True)
class DrinkStats:
    """Rolling-window drink aggregates."""

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


EMPTY_DRINK_STATS = DrinkStats(
    daily_avg=0,
    daily_median=0,
    days_with_drinks=0,
    days_with_drinks_last7=0,
    current_week_total=0,
    weekly_avg_total=0,
    weekly_median_total=0,
    daily_exceeds_target=False,
    weekly_exceeds_target=False,
    has_complete_weeks=False,
)


@dataclass(frozen=True)
class NutrientSummary:
    """Average, median and trend for one nutrient over the selected entries."""

    nutrient: str
    target: float
    average: float
    median: float
    trend: TrendResult


@dataclass(frozen=True)
class ExportedRow:
    """Data row read back from an exported CSV file."""

    date: str
    calories: float
    calories_burned: float
    carbs: float
    sugar: float
    protein: float
    fiber: float
    fat: float
    sodium: float
    deficit: float
    drinks: float | None
