"""
Keyhole Timesheet — Pay-Period Calculator.

The accounting month is split into two semi-monthly periods:

    Period A: 7th  -> 21st of the same month
    Period B: 22nd -> 6th of the following month

A date falling on the 7th or the 22nd belongs to the period that starts on
that day. Pay runs in arrears: a 7th-start period is paid on the 22nd one
month later, a 22nd-start period on the 7th two months later.

No I/O: this module only transforms dates.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from keyhole_timesheet.core.calendar_dates import (
    MONTH_ABBREVIATIONS,
    add_days,
    add_months,
    format_date_param,
)

PERIOD_A_START_DAY = 7
PERIOD_B_START_DAY = 22


@dataclass(frozen=True)
class PayPeriod:
    """One semi-monthly pay period, both ends inclusive."""

    start: date
    end: date
    pay_date: date

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    @property
    def length_days(self) -> int:
        return (self.end - self.start).days + 1


@dataclass(frozen=True)
class PeriodNavigation:
    """Reference-date params (yyyy-mm-dd) for stepping between periods."""

    previous_start: str
    next_start: str
    current_start: str


def compute_pay_date(period_start: date) -> date:
    """Return the arrears pay date for a period starting on the 7th or 22nd."""
    if period_start.day == PERIOD_A_START_DAY:
        return add_months(period_start, 1).replace(day=PERIOD_B_START_DAY)
    if period_start.day == PERIOD_B_START_DAY:
        return add_months(period_start, 2).replace(day=PERIOD_A_START_DAY)
    raise ValueError(f"Pay periods start on the 7th or 22nd, not {period_start}")


def get_pay_period(reference: date) -> PayPeriod:
    """Return the pay period containing *reference*."""
    if reference.day < PERIOD_A_START_DAY:
        # Tail of the previous month's period B
        start = add_months(reference, -1).replace(day=PERIOD_B_START_DAY)
        end = reference.replace(day=PERIOD_A_START_DAY - 1)
    elif reference.day < PERIOD_B_START_DAY:
        start = reference.replace(day=PERIOD_A_START_DAY)
        end = reference.replace(day=PERIOD_B_START_DAY - 1)
    else:
        start = reference.replace(day=PERIOD_B_START_DAY)
        end = add_months(start, 1).replace(day=PERIOD_A_START_DAY - 1)

    return PayPeriod(start=start, end=end, pay_date=compute_pay_date(start))


def get_previous_pay_period(period: PayPeriod) -> PayPeriod:
    return get_pay_period(add_days(period.start, -1))


def get_next_pay_period(period: PayPeriod) -> PayPeriod:
    return get_pay_period(add_days(period.end, 1))


def get_period_navigation(period: PayPeriod, today: date) -> PeriodNavigation:
    """Build prev/next/current links for a period view."""
    return PeriodNavigation(
        previous_start=format_date_param(get_previous_pay_period(period).start),
        next_start=format_date_param(get_next_pay_period(period).start),
        current_start=format_date_param(today),
    )


def _month_day(day: date) -> str:
    return f"{MONTH_ABBREVIATIONS[day.month - 1]} {day.day}"


def format_pay_period_label(period: PayPeriod) -> str:
    """e.g. "Feb 7 – Feb 21, 2025 (paid Mar 22, 2025)"."""
    start_label = _month_day(period.start)
    end_label = f"{_month_day(period.end)}, {period.end.year}"
    pay_label = f"{_month_day(period.pay_date)}, {period.pay_date.year}"
    return f"{start_label} – {end_label} (paid {pay_label})"
