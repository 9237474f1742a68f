"""Tests for CSV export."""

from nutrition_dashboard.domain.settings import NutrientTargets
from nutrition_dashboard.services.export import (
    export_to_csv,
    format_deficit,
    format_raw_number,
    read_exported_rows,
    to_fixed,
)
from tests.conftest import make_entry

HEADER = "calories,caloriesBurned,carbs,sugar,protein,fiber,fat,sodium,deficit,drinks"


def _entries() -> list:
    return [
        make_entry(
            "2024-01-02",
            calories=2150,
            calories_burned=2000,
            carbs=200,
            sugar=40,
            protein=120,
            fiber=25,
            fat=60,
            sodium=2000,
            drinks=2,
        ),
        make_entry(
            "2024-01-01",
            calories=1800,
            carbs=100,
            sugar=20,
            protein=80.5,
            fiber=15,
            fat=50,
            sodium=1500,
        ),
    ]


def test_export_layout() -> None:
    csv_text = export_to_csv(_entries(), NutrientTargets())

    summary = "1975.0,1000.0,150.0,30.0,100.3,20.0,55.0,1750.0,25.0,2.0"
    assert csv_text == (
        f"Statistic,{HEADER}\n"
        f"Averages,{summary}\n"
        f"Medians,{summary}\n"
        "\n"
        f"Date,{HEADER}\n"
        "2024-01-02,2150,2000,200,40,120,25,60,2000,+150.0,2\n"
        "2024-01-01,1800,0,100,20,80.5,15,50,1500,200.0,\n"
    )


def test_export_empty_collection() -> None:
    csv_text = export_to_csv([], NutrientTargets())

    lines = csv_text.split("\n")
    assert lines[1] == "Averages," + ",".join(["0.0"] * 10)
    assert lines[4] == f"Date,{HEADER}"
    assert lines[5] == ""


def test_export_deficit_sign_convention() -> None:
    surplus = export_to_csv(
        [make_entry("2024-01-01", calories=2150, calories_burned=2000)],
        NutrientTargets(),
    )
    deficit = export_to_csv(
        [make_entry("2024-01-01", calories=1800, calories_burned=2000)],
        NutrientTargets(),
    )

    assert surplus.split("\n")[1].split(",")[9] == "+150.0"
    assert deficit.split("\n")[1].split(",")[9] == "200.0"


def test_export_deficit_uses_calorie_target_as_default_burn() -> None:
    csv_text = export_to_csv(
        [make_entry("2024-01-01", calories=1800)], NutrientTargets(calories=2500)
    )

    assert csv_text.split("\n")[5].split(",")[9] == "700.0"


def test_export_drinks_summary_ignores_untracked_days() -> None:
    entries = [
        make_entry("2024-01-01", drinks=0),
        make_entry("2024-01-02", drinks=4),
        make_entry("2024-01-03"),
    ]

    averages = export_to_csv(entries, NutrientTargets()).split("\n")[1]

    assert averages.split(",")[10] == "2.0"


def test_to_fixed_rounds_ties_away_from_zero() -> None:
    assert to_fixed(0.25) == "0.3"
    assert to_fixed(-0.25) == "-0.3"
    assert to_fixed(2) == "2.0"
    assert to_fixed(-0.0) == "0.0"
    assert to_fixed(-0.04) == "-0.0"


def test_format_deficit() -> None:
    assert format_deficit(-150) == "+150.0"
    assert format_deficit(200) == "200.0"
    assert format_deficit(0) == "0.0"


def test_format_deficit_whole_numbers() -> None:
    assert format_deficit(-149.5, decimals=0) == "+150"
    assert format_deficit(200.4, decimals=0) == "200"
    assert to_fixed(2.5, decimals=0) == "3"


def test_format_raw_number() -> None:
    assert format_raw_number(1800.0) == "1800"
    assert format_raw_number(80.5) == "80.5"
    assert format_raw_number(0) == "0"


def test_exported_rows_round_trip() -> None:
    entries = _entries()

    rows = read_exported_rows(export_to_csv(entries, NutrientTargets()))

    assert len(rows) == 2
    for row, entry in zip(rows, entries, strict=True):
        assert row.date == entry.date
        assert row.calories == entry.calories
        assert row.calories_burned == entry.calories_burned
        assert row.protein == entry.protein
        assert row.sodium == entry.sodium
        assert row.drinks == entry.drinks
    assert rows[0].deficit == -150
    assert rows[1].deficit == 200
