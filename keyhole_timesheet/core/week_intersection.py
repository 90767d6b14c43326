"""Week/period intersection — how a Sunday..Saturday week meets a pay period.

The result only drives display (date range and a "(partial week)" marker);
hour totals always use the upstream per-week hours as reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from keyhole_timesheet.core.calendar_dates import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_ABBREVIATIONS,
    add_days,
    format_date_param,
    parse_date_param,
    sunday_weekday,
)
from keyhole_timesheet.core.pay_period import PayPeriod

DAYS_PER_WEEK = 7


@dataclass(frozen=True)
class WeekIntersection:
    """Overlap of one calendar week with a pay period."""

    from_date: date
    to_date: date
    is_partial: bool


def get_week_start(day: date) -> date:
    """Return the Sunday of the calendar week containing *day*."""
    return add_days(day, -sunday_weekday(day))


def get_week_end(day: date) -> date:
    """Return the Saturday of the calendar week containing *day*."""
    return add_days(get_week_start(day), DAYS_PER_WEEK - 1)


def get_week_start_key(day: date | str) -> str:
    """Canonical yyyy-mm-dd key of the week containing *day*.

    Used to join daily detail records back to their week summary row.
    """
    if isinstance(day, str):
        day = parse_date_param(day)
    return format_date_param(get_week_start(day))


def intersect_week(week_start: date | str, period: PayPeriod) -> WeekIntersection:
    """Clip the calendar week containing *week_start* to *period*."""
    if isinstance(week_start, str):
        week_start = parse_date_param(week_start)

    sunday = get_week_start(week_start)
    saturday = add_days(sunday, DAYS_PER_WEEK - 1)

    return WeekIntersection(
        from_date=max(sunday, period.start),
        to_date=min(saturday, period.end),
        is_partial=sunday < period.start or saturday > period.end,
    )


# ---------------------------------------------------------------------------
# Display labels
# ---------------------------------------------------------------------------


def _month_day(day: date) -> str:
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def format_date_range(from_date: date, to_date: date) -> str:
    """Range label: "Feb 9", "Feb 9–15" within a month, else "Jan 26 – Feb 1"."""
    if from_date == to_date:
        return _month_day(from_date)
    if (from_date.year, from_date.month) == (to_date.year, to_date.month):
        return f"{_month_day(from_date)}–{to_date.day}"
    return f"{_month_day(from_date)} – {_month_day(to_date)}"


def format_day_label(day: date) -> str:
    """e.g. "Sun Feb 9"."""
    return f"{WEEKDAY_ABBREVIATIONS[sunday_weekday(day)]} {_month_day(day)}"
