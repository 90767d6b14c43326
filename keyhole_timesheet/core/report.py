"""Plain-text rendering of a TimesheetView.

Mirrors the timesheet page: period header, one block per client with its
week rows and indented daily detail, then the grand total.
"""

from __future__ import annotations

from keyhole_timesheet.core.calendar_dates import parse_date_param
from keyhole_timesheet.core.pay_period import format_pay_period_label
from keyhole_timesheet.core.week_intersection import (
    format_date_range,
    format_day_label,
    intersect_week,
)
from keyhole_timesheet.data.models import ClientEntries, TimesheetView

EMPTY_MESSAGE = "No entries for this pay period."
NO_STATUS = "—"


def format_hours(hours: float) -> str:
    """Week/day hours without a trailing .0 (8, 7.5)."""
    return f"{hours:g}"


def _render_client(ce: ClientEntries, view: TimesheetView) -> list[str]:
    lines = [f"{ce.client.name}: {ce.total_hours:.1f} hrs"]
    for week in ce.entries:
        span = intersect_week(week.date, view.pay_period)
        label = format_date_range(span.from_date, span.to_date)
        if span.is_partial:
            label += " (partial week)"
        lines.append(f"  {label:<28} {format_hours(week.hours):>6}  {week.status or NO_STATUS}")

        for day in ce.daily_entries_for_week(week):
            day_label = format_day_label(parse_date_param(day.day))
            lines.append(
                f"    {day_label:<26} {format_hours(day.hours):>6}  {day.notes or ''}".rstrip()
            )
    return lines


def render_timesheet(view: TimesheetView) -> str:
    """Render *view* as a fixed-width text report."""
    lines = [format_pay_period_label(view.pay_period), ""]

    if not view.client_entries:
        lines.append(EMPTY_MESSAGE)
    for ce in view.client_entries:
        lines.extend(_render_client(ce, view))
        lines.append("")

    if view.client_entries:
        lines.pop()
    lines.append("")
    lines.append(f"Total: {view.grand_total:.1f} hours")
    return "\n".join(lines)
