"""Calendar-date helpers — naive local days, no time of day, no zones.

Every function here is pure: dates are immutable `datetime.date` values and
arithmetic always returns a new value.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, timedelta

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)
# Sunday-first, matching the calendar week used for display grouping
WEEKDAY_ABBREVIATIONS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_DATE_PARAM_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")


class MalformedDateError(ValueError):
    """Raised when a date string is not in yyyy-mm-dd form."""


def parse_date_param(text: str) -> date:
    """Parse a yyyy-mm-dd string (optionally followed by a time) as a local date.

    The string is never treated as a UTC instant, so the day cannot shift.
    """
    if not isinstance(text, str):
        raise MalformedDateError(f"Expected a yyyy-mm-dd string, got {text!r}")

    match = _DATE_PARAM_RE.match(text.strip())
    if not match:
        raise MalformedDateError(f"Not a yyyy-mm-dd date: {text!r}")

    year, month, day = map(int, match.groups())
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise MalformedDateError(f"Invalid calendar date: {text!r}") from exc


def format_date_param(day: date) -> str:
    """Format a date as zero-padded yyyy-mm-dd."""
    return f"{day.year:04d}-{day.month:02d}-{day.day:02d}"


def add_days(day: date, days: int) -> date:
    return day + timedelta(days=days)


def add_months(day: date, months: int) -> date:
    """Shift by whole months, rolling the year and clamping to the month length."""
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def sunday_weekday(day: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (day.weekday() + 1) % 7
