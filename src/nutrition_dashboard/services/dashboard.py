"""Dashboard view assembly over a user's entries."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from nutrition_dashboard.domain.entries import DailyEntry
from nutrition_dashboard.domain.settings import NutrientTargets, UserSettings
from nutrition_dashboard.domain.stats import (
    DrinkLimits,
    DrinkStats,
    NutrientSummary,
    RangeFilter,
)
from nutrition_dashboard.services.calculations import (
    Selector,
    average,
    compute_daily_deficit,
    compute_deficit_trend,
    compute_nutrient_trend,
    filter_by_range,
    median,
    nutrient_selector,
)
from nutrition_dashboard.services.dates import format_local_date, parse_local_date
from nutrition_dashboard.services.drinks import compute_drink_stats
from nutrition_dashboard.services.entries import EntryRepository
from nutrition_dashboard.services.export import export_to_csv
from nutrition_dashboard.services.user_settings import UserSettingsService

SCOPE_ALL = "all"
SCOPE_ACTIVE = "active"
SCOPE_LEGACY = "legacy"
SCOPE_CYCLE_PREFIX = "cycle:"
SUMMARY_NUTRIENTS = (
    "calories",
    "deficit",
    "carbs",
    "sugar",
    "protein",
    "fiber",
    "fat",
    "sodium",
)


@dataclass
class DashboardView:
    """Statistics shown for one range and scope selection."""

    range_filter: RangeFilter
    scope: str
    reference_date: str
    entries: list[DailyEntry]
    nutrients: list[NutrientSummary]
    drinks: DrinkStats
    show_drinks: bool


def filter_by_scope(
    entries: Sequence[DailyEntry], scope: str, active_cycle_id: UUID | None
) -> list[DailyEntry]:
    """Select entries by logging cycle.

    ``all`` keeps everything, ``active`` keeps the active cycle (nothing when no
    cycle is active), ``legacy`` keeps entries without a cycle and
    ``cycle:<id>`` keeps one specific cycle.
    """
    if scope == SCOPE_ALL:
        return list(entries)
    if scope == SCOPE_ACTIVE:
        if active_cycle_id is None:
            return []
        return [entry for entry in entries if entry.cycle_id == active_cycle_id]
    if scope == SCOPE_LEGACY:
        return [entry for entry in entries if entry.cycle_id is None]
    if scope.startswith(SCOPE_CYCLE_PREFIX):
        cycle_id = UUID(scope.removeprefix(SCOPE_CYCLE_PREFIX))
        return [entry for entry in entries if entry.cycle_id == cycle_id]
    raise ValueError(f"Unknown scope: {scope}")


def summarize_nutrients(
    entries: Sequence[DailyEntry], targets: NutrientTargets
) -> list[NutrientSummary]:
    """Return average, median and trend for each dashboard nutrient."""
    summaries = []
    for nutrient in SUMMARY_NUTRIENTS:
        if nutrient == "deficit":
            selector = _deficit_selector(targets.calories)
            trend = compute_deficit_trend(entries, targets.calories)
        else:
            selector = nutrient_selector(nutrient)
            trend = compute_nutrient_trend(nutrient, entries)
        summaries.append(
            NutrientSummary(
                nutrient=nutrient,
                target=getattr(targets, nutrient),
                average=average(entries, selector),
                median=median(entries, selector),
                trend=trend,
            )
        )
    return summaries


def _deficit_selector(default_calories: float) -> Selector:
    return lambda entry: compute_daily_deficit(entry, default_calories)


@dataclass
class DashboardService:
    """Service computing dashboard statistics for a user."""

    entry_repository: EntryRepository
    user_settings_service: UserSettingsService
    daily_drink_target: float = 4
    weekly_drink_target: float = 15

    def build_dashboard(
        self,
        user_id: UUID,
        range_filter: RangeFilter = RangeFilter.ALL,
        scope: str = SCOPE_ALL,
        today: date | None = None,
    ) -> DashboardView:
        """Return the statistics for the selected range and cycle scope."""
        settings = self.user_settings_service.get_settings(user_id)
        entries = self._select_entries(user_id, settings, range_filter, scope, today)
        reference = _reference_date(entries, range_filter, today or date.today())
        limits = DrinkLimits(
            daily=settings.targets.drinks or self.daily_drink_target,
            weekly=self.weekly_drink_target,
        )
        return DashboardView(
            range_filter=range_filter,
            scope=scope,
            reference_date=format_local_date(reference),
            entries=entries,
            nutrients=summarize_nutrients(entries, settings.targets),
            drinks=compute_drink_stats(entries, reference, limits),
            show_drinks=settings.show_drinks,
        )

    def export_csv(
        self,
        user_id: UUID,
        range_filter: RangeFilter = RangeFilter.ALL,
        scope: str = SCOPE_ALL,
        today: date | None = None,
    ) -> str:
        """Return the CSV export for the selected range and cycle scope."""
        settings = self.user_settings_service.get_settings(user_id)
        entries = self._select_entries(user_id, settings, range_filter, scope, today)
        return export_to_csv(entries, settings.targets)

    def _select_entries(
        self,
        user_id: UUID,
        settings: UserSettings,
        range_filter: RangeFilter,
        scope: str,
        today: date | None,
    ) -> list[DailyEntry]:
        entries = self.entry_repository.list_entries(user_id)
        in_scope = filter_by_scope(entries, scope, settings.active_cycle_id)
        return filter_by_range(in_scope, range_filter, today)


def _reference_date(
    entries: Sequence[DailyEntry], range_filter: RangeFilter, today: date
) -> date:
    # The previous-day view measures drink windows from the newest remaining day.
    if range_filter == RangeFilter.PREV and entries:
        return parse_local_date(max(entry.date for entry in entries))
    return today
