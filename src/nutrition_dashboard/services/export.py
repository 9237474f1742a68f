"""CSV export of entries with summary statistics."""

import csv
import io
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from nutrition_dashboard.domain.entries import DailyEntry
from nutrition_dashboard.domain.settings import NutrientTargets
from nutrition_dashboard.domain.stats import ExportedRow
from nutrition_dashboard.services.calculations import (
    NUTRIENT_FIELDS,
    Selector,
    average,
    compute_daily_deficit,
    median,
    nutrient_selector,
)
from nutrition_dashboard.services.drinks import tracked_drink_entries

CSV_COLUMNS = (
    "calories",
    "caloriesBurned",
    "carbs",
    "sugar",
    "protein",
    "fiber",
    "fat",
    "sodium",
    "deficit",
    "drinks",
)
_RAW_COLUMNS = CSV_COLUMNS[: len(NUTRIENT_FIELDS)]


def to_fixed(value: float, decimals: int = 1) -> str:
    """Format a number with fixed decimals, rounding ties away from zero."""
    if value == 0:
        value = 0
    step = Decimal(10) ** -decimals
    return str(Decimal(value).quantize(step, rounding=ROUND_HALF_UP))


def format_deficit(value: float, decimals: int = 1) -> str:
    """Format a deficit; a surplus is shown as '+' and its magnitude."""
    if value >= 0:
        return to_fixed(value, decimals)
    return f"+{to_fixed(abs(value), decimals)}"


def parse_deficit(value: str) -> float:
    """Invert :func:`format_deficit`."""
    if value.startswith("+"):
        return -float(value[1:])
    return float(value)


def format_raw_number(value: float) -> str:
    """Format a stored number without a trailing '.0' for whole values."""
    number = float(value or 0)
    if number.is_integer():
        return str(int(number))
    return repr(number)


def export_to_csv(entries: Sequence[DailyEntry], targets: NutrientTargets) -> str:
    """Serialize entries and their averages/medians to CSV text."""
    averages: list[str] = []
    medians: list[str] = []
    for column, population, selector in _summary_columns(entries, targets):
        formatter = format_deficit if column == "deficit" else to_fixed
        averages.append(formatter(average(population, selector)))
        medians.append(formatter(median(population, selector)))

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["Statistic", *CSV_COLUMNS])
    writer.writerow(["Averages", *averages])
    writer.writerow(["Medians", *medians])
    writer.writerow([])
    writer.writerow(["Date", *CSV_COLUMNS])
    for entry in entries:
        writer.writerow(
            [
                entry.date,
                *(format_raw_number(getattr(entry, name)) for name in NUTRIENT_FIELDS),
                format_deficit(compute_daily_deficit(entry, targets.calories)),
                "" if entry.drinks is None else format_raw_number(entry.drinks),
            ]
        )
    return buffer.getvalue()


def _summary_columns(
    entries: Sequence[DailyEntry], targets: NutrientTargets
) -> list[tuple[str, Sequence[DailyEntry], Selector]]:
    columns: list[tuple[str, Sequence[DailyEntry], Selector]] = [
        (column, entries, nutrient_selector(name))
        for column, name in zip(_RAW_COLUMNS, NUTRIENT_FIELDS, strict=True)
    ]
    columns.append(
        (
            "deficit",
            entries,
            lambda entry: compute_daily_deficit(entry, targets.calories),
        )
    )
    columns.append(
        ("drinks", tracked_drink_entries(entries), lambda entry: entry.drinks or 0)
    )
    return columns


def read_exported_rows(csv_text: str) -> list[ExportedRow]:
    """Parse the per-day section of an exported CSV back into rows."""
    reader = csv.reader(io.StringIO(csv_text))
    rows: list[ExportedRow] = []
    in_data = False
    for record in reader:
        if not record:
            continue
        if record[0] == "Date":
            in_data = True
            continue
        if not in_data:
            continue
        date_value, *numbers, deficit, drinks = record
        (calories, burned, carbs, sugar, protein, fiber, fat, sodium) = (
            float(number) for number in numbers
        )
        rows.append(
            ExportedRow(
                date=date_value,
                calories=calories,
                calories_burned=burned,
                carbs=carbs,
                sugar=sugar,
                protein=protein,
                fiber=fiber,
                fat=fat,
                sodium=sodium,
                deficit=parse_deficit(deficit),
                drinks=float(drinks) if drinks else None,
            )
        )
    return rows
