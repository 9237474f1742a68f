"""Conversions from domain objects to API response models."""

from dataclasses import asdict

from nutrition_dashboard.api.models import (
    CycleResponse,
    DashboardResponse,
    DrinkStatsResponse,
    EntryResponse,
    NutrientSummaryResponse,
    SettingsResponse,
    TargetsResponse,
    TrendResponse,
)
from nutrition_dashboard.domain.entries import DailyEntry
from nutrition_dashboard.domain.settings import LoggingCycle, UserSettings
from nutrition_dashboard.services.calculations import compute_daily_deficit
from nutrition_dashboard.services.dashboard import DashboardView
from nutrition_dashboard.services.dates import format_display_date
from nutrition_dashboard.services.export import format_deficit


def serialize_entry(entry: DailyEntry, default_calories: float) -> EntryResponse:
    deficit = compute_daily_deficit(entry, default_calories)
    return EntryResponse(
        id=entry.id,
        date=entry.date,
        display_date=format_display_date(entry.date),
        calories=entry.calories,
        calories_burned=entry.calories_burned,
        carbs=entry.carbs,
        sugar=entry.sugar,
        protein=entry.protein,
        fiber=entry.fiber,
        fat=entry.fat,
        sodium=entry.sodium,
        drinks=entry.drinks,
        drinks_status=entry.drinks_status.value,
        cycle_id=entry.cycle_id,
        deficit=deficit,
        deficit_display=format_deficit(deficit, decimals=0),
    )


def serialize_settings(settings: UserSettings) -> SettingsResponse:
    return SettingsResponse(
        theme=settings.theme,
        show_drinks=settings.show_drinks,
        targets=TargetsResponse(**asdict(settings.targets)),
        active_cycle_id=settings.active_cycle_id,
    )


def serialize_cycle(cycle: LoggingCycle) -> CycleResponse:
    return CycleResponse(id=cycle.id, name=cycle.name, created_at=cycle.created_at)


def serialize_dashboard(view: DashboardView) -> DashboardResponse:
    return DashboardResponse(
        range=view.range_filter.value,
        scope=view.scope,
        reference_date=view.reference_date,
        entry_count=len(view.entries),
        nutrients=[
            NutrientSummaryResponse(
                nutrient=summary.nutrient,
                target=summary.target,
                average=summary.average,
                median=summary.median,
                trend=TrendResponse(
                    avg_trend=summary.trend.avg_trend.value,
                    med_trend=summary.trend.med_trend.value,
                ),
            )
            for summary in view.nutrients
        ],
        drinks=DrinkStatsResponse(**asdict(view.drinks)) if view.show_drinks else None,
    )
