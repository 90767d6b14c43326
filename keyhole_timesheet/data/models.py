"""
Keyhole Timesheet — Data Models.

Wire records arrive from Sherpa as JSON and are validated into pydantic
models. The view models built from them are plain dataclasses, constructed
fresh per request and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, field_validator

from keyhole_timesheet.core.calendar_dates import parse_date_param
from keyhole_timesheet.core.week_intersection import get_week_start_key

if TYPE_CHECKING:
    from keyhole_timesheet.core.pay_period import PayPeriod, PeriodNavigation


# ---------------------------------------------------------------------------
# Sherpa wire records
# ---------------------------------------------------------------------------


class SherpaClient(BaseModel):
    """A billable client the user logs time against.

    JSON example:
    {"id": 42, "name": "Acme Corp", "active": true}
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int
    name: str
    active: bool | None = None


class SherpaWeek(BaseModel):
    """One summarized week of logged time for one client.

    Sherpa groups by (week, status), so several records may share a date.

    JSON example:
    {"date": "2025-02-09", "hours": 32.5, "status": "approved"}
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    date: str          # week start, yyyy-mm-dd (may carry a time component)
    hours: float = 0.0
    status: str | None = None

    @field_validator("date")
    @classmethod
    def date_has_day(cls, v: str) -> str:
        parse_date_param(v)
        return v

    @field_validator("hours", mode="before")
    @classmethod
    def null_hours_to_zero(cls, v: object) -> object:
        return 0.0 if v is None else v


class SherpaEntry(BaseModel):
    """A single day of logged time, used only for drill-down display.

    JSON example:
    {"day": "2025-02-10", "hours": 8, "notes": "Sprint planning"}
    """
    model_config = ConfigDict(extra="ignore", frozen=True)

    day: str           # yyyy-mm-dd
    hours: float = 0.0
    notes: str | None = None

    @field_validator("day")
    @classmethod
    def day_is_date(cls, v: str) -> str:
        parse_date_param(v)
        return v

    @field_validator("hours", mode="before")
    @classmethod
    def null_hours_to_zero(cls, v: object) -> object:
        return 0.0 if v is None else v


# ---------------------------------------------------------------------------
# Derived view models
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ClientEntries:
    """One client's merged weeks for a pay period."""

    client: SherpaClient
    entries: list[SherpaWeek]               # one per week, chronological
    daily_entries: list[SherpaEntry] | None  # None when drill-down failed
    total_hours: float

    def daily_entries_for_week(self, week: SherpaWeek) -> list[SherpaEntry]:
        """Daily records that fall in the same Sunday-start week as *week*."""
        if not self.daily_entries:
            return []
        week_key = get_week_start_key(week.date)
        return [
            entry for entry in self.daily_entries
            if get_week_start_key(entry.day) == week_key
        ]


@dataclass(frozen=True)
class TimesheetView:
    """Everything a caller needs to render one pay period."""

    client_entries: list[ClientEntries]
    pay_period: PayPeriod
    grand_total: float
    navigation: PeriodNavigation | None = field(default=None)
