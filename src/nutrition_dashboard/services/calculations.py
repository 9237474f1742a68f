"""Pure statistics over daily entries."""

from collections.abc import Callable, Sequence
from datetime import date

from nutrition_dashboard.domain.entries import DailyEntry
from nutrition_dashboard.domain.stats import (
    STABLE_TREND,
    RangeFilter,
    TrendDirection,
    TrendResult,
)
from nutrition_dashboard.services.dates import days_between, range_cutoff

DEFAULT_CALORIES = 2000
NUTRIENT_TREND_THRESHOLD = 0.1
DEFICIT_TREND_THRESHOLD = 1.0
NUTRIENT_FIELDS = (
    "calories",
    "calories_burned",
    "carbs",
    "sugar",
    "protein",
    "fiber",
    "fat",
    "sodium",
)

Selector = Callable[[DailyEntry], float]


def compute_daily_deficit(
    entry: DailyEntry, default_calories: float = DEFAULT_CALORIES
) -> float:
    """Return calories burned minus consumed; positive means a deficit.

    A missing or zero burn falls back to ``default_calories``.
    """
    burned = entry.calories_burned or default_calories
    consumed = entry.calories or 0
    return burned - consumed


def nutrient_selector(nutrient: str) -> Selector:
    """Return a selector reading a nutrient field, treating falsy values as 0."""
    if nutrient not in NUTRIENT_FIELDS:
        raise ValueError(f"Unknown nutrient: {nutrient}")
    return lambda entry: getattr(entry, nutrient) or 0


def filter_by_range(
    entries: Sequence[DailyEntry],
    range_filter: RangeFilter,
    today: date | None = None,
) -> list[DailyEntry]:
    """Select the entries visible under a dashboard range."""
    if range_filter == RangeFilter.ALL:
        return list(entries)
    if range_filter == RangeFilter.PREV:
        if len(entries) <= 1:
            return []
        latest = max(entry.date for entry in entries)
        return [entry for entry in entries if entry.date != latest]

    cutoff = range_cutoff(int(range_filter.value), today)
    return [entry for entry in entries if entry.date >= cutoff]


def average(entries: Sequence[DailyEntry], selector: Selector) -> float:
    """Return the arithmetic mean of the selected values, 0 when empty."""
    if not entries:
        return 0
    return sum(selector(entry) for entry in entries) / len(entries)


def median(entries: Sequence[DailyEntry], selector: Selector) -> float:
    """Return the median of the selected values, 0 when empty."""
    return median_of([selector(entry) for entry in entries])


def median_of(values: Sequence[float]) -> float:
    """Return the median of raw values, 0 when empty."""
    if not values:
        return 0
    ordered = sorted(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (ordered[mid - 1] + ordered[mid]) / 2


def linear_regression_slope(
    entries: Sequence[DailyEntry], selector: Selector
) -> float:
    """Return the least-squares slope of values per day.

    Day offsets are measured from the last entry of the sequence, which is the
    earliest one when entries are ordered newest first.
    """
    if len(entries) < 2:  # noqa: PLR2004
        return 0
    first_date = entries[-1].date
    points = [
        (days_between(first_date, entry.date), selector(entry)) for entry in entries
    ]
    n = len(points)
    sum_x = sum(x for x, _ in points)
    sum_y = sum(y for _, y in points)
    sum_xy = sum(x * y for x, y in points)
    sum_x2 = sum(x * x for x, _ in points)
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        return 0
    return (n * sum_xy - sum_x * sum_y) / denominator


def split_half_medians(values: Sequence[float]) -> tuple[float, float]:
    """Return medians of the lower and upper halves of the sorted values."""
    if len(values) < 2:  # noqa: PLR2004
        return 0, 0
    ordered = sorted(values)
    mid = len(ordered) // 2
    return median_of(ordered[:mid]), median_of(ordered[mid:])


def trend_direction(
    value: float, threshold: float = NUTRIENT_TREND_THRESHOLD
) -> TrendDirection:
    """Classify a signed change as up, down or stable."""
    if abs(value) < threshold:
        return TrendDirection.STABLE
    return TrendDirection.UP if value > 0 else TrendDirection.DOWN


def compute_trend(
    entries: Sequence[DailyEntry],
    selector: Selector,
    threshold: float = NUTRIENT_TREND_THRESHOLD,
) -> TrendResult:
    """Return slope and split-median trends for the selected values."""
    if len(entries) < 2:  # noqa: PLR2004
        return STABLE_TREND
    newest_first = sorted(entries, key=lambda entry: entry.date, reverse=True)
    slope = linear_regression_slope(newest_first, selector)
    first_half, second_half = split_half_medians(
        [selector(entry) for entry in newest_first]
    )
    return TrendResult(
        avg_trend=trend_direction(slope, threshold),
        med_trend=trend_direction(second_half - first_half, threshold),
    )


def compute_nutrient_trend(
    nutrient: str, entries: Sequence[DailyEntry]
) -> TrendResult:
    """Return the trend for a raw nutrient field."""
    return compute_trend(entries, nutrient_selector(nutrient))


def compute_deficit_trend(
    entries: Sequence[DailyEntry], default_calories: float = DEFAULT_CALORIES
) -> TrendResult:
    """Return the trend for the daily deficit."""
    return compute_trend(
        entries,
        lambda entry: compute_daily_deficit(entry, default_calories),
        DEFICIT_TREND_THRESHOLD,
    )
