"""
Keyhole Timesheet — Entry Aggregator.

Turns Sherpa's weekly summaries into one row per calendar week for a pay
period. Sherpa groups by (week, status), so the same week can arrive several
times; those rows are merged by summing hours.

This is also the input boundary for upstream payloads: anything that is not a
list of well-formed records raises UpstreamError. A timesheet is a financial
display, so a bad payload never degrades to "no hours".
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, TypeVar

from pydantic import BaseModel, ValidationError

from keyhole_timesheet.core.calendar_dates import parse_date_param
from keyhole_timesheet.core.week_intersection import (
    get_week_end,
    get_week_start,
    get_week_start_key,
)
from keyhole_timesheet.data.models import SherpaClient, SherpaEntry, SherpaWeek
from keyhole_timesheet.ports.time_tracking_port import UpstreamError

logger = logging.getLogger(__name__)

_Record = TypeVar("_Record", bound=BaseModel)


# ---------------------------------------------------------------------------
# Payload validation
# ---------------------------------------------------------------------------


def _parse_records(payload: Any, model: type[_Record], label: str) -> list[_Record]:
    if not isinstance(payload, list):
        raise UpstreamError(f"Invalid Sherpa {label} response: expected a list")

    records: list[_Record] = []
    for index, item in enumerate(payload):
        if isinstance(item, model):
            records.append(item)
            continue
        try:
            records.append(model.model_validate(item))
        except ValidationError as exc:
            logger.error("Malformed Sherpa %s record #%d: %r", label, index, item)
            raise UpstreamError(f"Invalid Sherpa {label} record #{index}") from exc
    return records


def parse_clients(payload: Any) -> list[SherpaClient]:
    return _parse_records(payload, SherpaClient, "clients")


def parse_weeks(payload: Any) -> list[SherpaWeek]:
    return _parse_records(payload, SherpaWeek, "entries")


def parse_daily_entries(payload: Any) -> list[SherpaEntry]:
    """Validate the daily-detail payload.

    Sherpa answers an expired session with {"code": "ERROR"} and a 200.
    """
    if isinstance(payload, dict) and payload.get("code") == "ERROR":
        raise UpstreamError("Sherpa authentication error")
    return _parse_records(payload, SherpaEntry, "daily entries")


# ---------------------------------------------------------------------------
# Filtering and merging
# ---------------------------------------------------------------------------


def week_key(week: SherpaWeek) -> str:
    """Sunday (yyyy-mm-dd) of the calendar week a record reports on."""
    return get_week_start_key(week.date)


def week_overlaps_period(week_date: str | date, period_start: date, period_end: date) -> bool:
    """True if the Sunday..Saturday week containing *week_date* touches the window."""
    if isinstance(week_date, str):
        week_date = parse_date_param(week_date)
    return get_week_start(week_date) <= period_end and get_week_end(week_date) >= period_start


def merge_and_filter_weeks(
    weeks: Any,
    period_start: date,
    period_end: date,
) -> list[SherpaWeek]:
    """Keep weeks overlapping the window and merge duplicates into one row each.

    Records are grouped by the Sunday of the calendar week they fall in and
    the merged row is dated with that Sunday. Hours are summed per week; the
    other fields come from the first record of the group. Output is chronological, ties kept in input order.
    """
    records = parse_weeks(weeks)

    merged: dict[str, SherpaWeek] = {}
    for week in records:
        if not week_overlaps_period(week.date, period_start, period_end):
            continue
        key = week_key(week)
        existing = merged.get(key)
        if existing is None:
            merged[key] = week.model_copy(update={"date": key})
        else:
            merged[key] = existing.model_copy(
                update={"hours": existing.hours + week.hours},
            )

    result = sorted(merged.values(), key=lambda w: parse_date_param(w.date))
    logger.debug(
        "Merged %d week records into %d rows for %s..%s",
        len(records), len(result), period_start, period_end,
    )
    return result


def total_hours(records: Iterable[SherpaWeek | SherpaEntry]) -> float:
    return sum((record.hours for record in records), 0.0)
