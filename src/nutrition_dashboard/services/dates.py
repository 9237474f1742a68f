"""Calendar date helpers for YYYY-MM-DD strings."""

from datetime import date, timedelta

_DATE_FORMAT = "%Y-%m-%d"


def parse_local_date(value: str) -> date:
    """Parse a YYYY-MM-DD string as a calendar date."""
    year, month, day = (int(part) for part in value.split("-"))
    return date(year, month, day)


def format_local_date(value: date) -> str:
    """Format a date as a zero-padded YYYY-MM-DD string."""
    return value.strftime(_DATE_FORMAT)


def days_between(start: str | date, end: str | date) -> int:
    """Return the number of whole days from start to end."""
    if isinstance(start, str):
        start = parse_local_date(start)
    if isinstance(end, str):
        end = parse_local_date(end)
    return (end - start).days


def range_cutoff(days: int, today: date | None = None) -> str:
    """Return the inclusive lower bound date string for a trailing range."""
    current = today or date.today()
    return format_local_date(current - timedelta(days=days))


def format_display_date(value: str) -> str:
    """Format a YYYY-MM-DD string as e.g. 'Thu. Nov. 20th, 2025'.

    Strings that do not parse as a date are returned unchanged.
    """
    try:
        parsed = parse_local_date(value)
    except ValueError:
        return value
    weekday = parsed.strftime("%a")
    month = parsed.strftime("%b")
    return f"{weekday}. {month}. {parsed.day}{_day_suffix(parsed.day)}, {parsed.year}"


def _day_suffix(day: int) -> str:
    if 11 <= day <= 13:  # noqa: PLR2004
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
