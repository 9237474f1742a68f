"""Rolling-window drink statistics."""

from collections import defaultdict
from collections.abc import Sequence
from datetime import date, timedelta

from nutrition_dashboard.domain.entries import DailyEntry, DrinksStatus
from nutrition_dashboard.domain.stats import EMPTY_DRINK_STATS, DrinkLimits, DrinkStats
from nutrition_dashboard.services.calculations import average, median, median_of
from nutrition_dashboard.services.dates import days_between, format_local_date

WINDOW_DAYS = 7


def tracked_drink_entries(entries: Sequence[DailyEntry]) -> list[DailyEntry]:
    """Return entries where drinks were logged, including zero-drink days."""
    return [
        entry
        for entry in entries
        if entry.drinks_status is not DrinksStatus.UNTRACKED
    ]


def _drinks(entry: DailyEntry) -> float:
    return entry.drinks or 0


def window_index(entry_date: str, reference_date: date) -> int:
    """Return the rolling 7-day window an entry falls in.

    Window 0 holds the reference date and the six days before it, window 1 the
    seven days before that. Dates after the reference date are negative.
    """
    return days_between(entry_date, reference_date) // WINDOW_DAYS


def compute_drink_stats(
    entries: Sequence[DailyEntry],
    reference_date: date | None = None,
    limits: DrinkLimits | None = None,
) -> DrinkStats:
    """Aggregate drinks over tracked days and rolling weekly windows."""
    tracked = tracked_drink_entries(entries)
    if not tracked:
        return EMPTY_DRINK_STATS

    resolved_limits = limits or DrinkLimits()
    today = reference_date or date.today()

    drinking_days = [
        entry for entry in tracked if entry.drinks_status is DrinksStatus.POSITIVE
    ]
    daily_avg = average(drinking_days, _drinks)
    daily_median = median(drinking_days, _drinks)

    today_str = format_local_date(today)
    week_ago_str = format_local_date(today - timedelta(days=WINDOW_DAYS))
    days_last7 = sum(
        1 for entry in drinking_days if week_ago_str < entry.date <= today_str
    )

    window_totals: dict[int, float] = defaultdict(float)
    for entry in tracked:
        window_totals[window_index(entry.date, today)] += _drinks(entry)

    current_week_total = window_totals.get(0, 0)
    historical = [total for index, total in window_totals.items() if index > 0]
    has_complete_weeks = bool(historical)
    weekly_avg = sum(historical) / len(historical) if has_complete_weeks else 0

    return DrinkStats(
        daily_avg=daily_avg,
        daily_median=daily_median,
        days_with_drinks=len(drinking_days),
        days_with_drinks_last7=days_last7,
        current_week_total=current_week_total,
        weekly_avg_total=weekly_avg,
        weekly_median_total=median_of(historical),
        daily_exceeds_target=(
            daily_avg > resolved_limits.daily or daily_median > resolved_limits.daily
        ),
        weekly_exceeds_target=current_week_total > resolved_limits.weekly,
        has_complete_weeks=has_complete_weeks,
    )
