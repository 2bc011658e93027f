"""
Calendar-date helpers for events and availability.

Dates are local calendar days stored as ``YYYY-MM-DD`` strings. Nothing
here converts through UTC, so a date never shifts by a day near midnight.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple


def parse_date_string(date_string: str) -> date:
    """Parse ``YYYY-MM-DD`` into a date.

    Raises:
        ValueError: If the string is not a valid ISO date
    """
    return date.fromisoformat(date_string.strip())


def format_date(value: date) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    return value.isoformat()


def get_today_string(today: Optional[date] = None) -> str:
    """Today's local date as ``YYYY-MM-DD``."""
    return format_date(today or date.today())


def get_yesterday(today: Optional[date] = None) -> date:
    """The local calendar day before ``today``."""
    return (today or date.today()) - timedelta(days=1)


def compare_date_strings(first: str, second: str) -> int:
    """Compare two ``YYYY-MM-DD`` strings chronologically (-1, 0, 1)."""
    return (first > second) - (first < second)


def is_date_future_or_today(date_string: str, today: Optional[date] = None) -> bool:
    return compare_date_strings(date_string, get_today_string(today)) >= 0


def is_date_in_past(value: date, today: Optional[date] = None) -> bool:
    """True if ``value`` is strictly before today (time of day is ignored)."""
    return value < (today or date.today())


def get_date_strings_between(start: str, end: str) -> List[str]:
    """Every date from start to end, inclusive. Empty if end < start.

    Example:
        >>> get_date_strings_between("2024-02-28", "2024-03-01")
        ['2024-02-28', '2024-02-29', '2024-03-01']
    """
    current = parse_date_string(start)
    last = parse_date_string(end)
    dates = []
    while current <= last:
        dates.append(format_date(current))
        current += timedelta(days=1)
    return dates


def sort_date_strings(date_strings: Iterable[str]) -> List[str]:
    return sorted(date_strings)


def get_month_bounds(today: Optional[date] = None) -> Tuple[str, str]:
    """First and last day of the current month as ``YYYY-MM-DD`` strings."""
    today = today or date.today()
    first = today.replace(day=1)
    next_month = (first + timedelta(days=32)).replace(day=1)
    return format_date(first), format_date(next_month - timedelta(days=1))
