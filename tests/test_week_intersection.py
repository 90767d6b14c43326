"""Tests for keyhole_timesheet.core.week_intersection — weeks vs pay periods."""

from datetime import date

import pytest

from keyhole_timesheet.core.calendar_dates import MalformedDateError
from keyhole_timesheet.core.pay_period import get_pay_period
from keyhole_timesheet.core.week_intersection import (
    WeekIntersection,
    format_date_range,
    format_day_label,
    get_week_end,
    get_week_start,
    get_week_start_key,
    intersect_week,
)

FEB_A = get_pay_period(date(2025, 2, 15))   # Feb 7 – Feb 21, 2025
JAN_B = get_pay_period(date(2025, 1, 25))   # Jan 22 – Feb 6, 2025


class TestWeekStart:
    def test_sunday_is_its_own_start(self):
        assert get_week_start(date(2025, 2, 9)) == date(2025, 2, 9)

    def test_midweek(self):
        assert get_week_start(date(2025, 2, 12)) == date(2025, 2, 9)

    def test_saturday(self):
        assert get_week_start(date(2025, 2, 15)) == date(2025, 2, 9)

    def test_crosses_year(self):
        assert get_week_start(date(2025, 1, 1)) == date(2024, 12, 29)

    def test_week_end(self):
        assert get_week_end(date(2025, 2, 10)) == date(2025, 2, 15)


class TestGetWeekStartKey:
    def test_from_string(self):
        assert get_week_start_key("2025-02-13") == "2025-02-09"

    def test_from_timestamp_string(self):
        assert get_week_start_key("2025-02-13T15:00:00") == "2025-02-09"

    def test_from_date(self):
        assert get_week_start_key(date(2025, 3, 1)) == "2025-02-23"

    def test_malformed(self):
        with pytest.raises(MalformedDateError):
            get_week_start_key("last week")


class TestIntersectWeek:
    def test_full_week_inside_period(self):
        result = intersect_week(date(2025, 2, 9), FEB_A)
        assert result == WeekIntersection(
            from_date=date(2025, 2, 9), to_date=date(2025, 2, 15), is_partial=False,
        )

    def test_week_straddling_period_start(self):
        result = intersect_week("2025-02-02", FEB_A)
        assert result.from_date == date(2025, 2, 7)
        assert result.to_date == date(2025, 2, 8)
        assert result.is_partial is True

    def test_week_straddling_period_end(self):
        result = intersect_week("2025-02-16", FEB_A)
        assert result.from_date == date(2025, 2, 16)
        assert result.to_date == date(2025, 2, 21)
        assert result.is_partial is True

    def test_week_across_months_inside_period(self):
        result = intersect_week("2025-01-26", JAN_B)
        assert result.from_date == date(2025, 1, 26)
        assert result.to_date == date(2025, 2, 1)
        assert result.is_partial is False

    def test_time_component_ignored(self):
        assert intersect_week("2025-02-09T00:00:00.000Z", FEB_A).is_partial is False

    def test_non_sunday_date_uses_containing_week(self):
        result = intersect_week("2025-02-10", FEB_A)
        assert result.from_date == date(2025, 2, 9)
        assert result.to_date == date(2025, 2, 15)


class TestFormatDateRange:
    def test_single_day(self):
        assert format_date_range(date(2025, 2, 21), date(2025, 2, 21)) == "Feb 21"

    def test_same_month(self):
        assert format_date_range(date(2025, 2, 9), date(2025, 2, 15)) == "Feb 9–15"

    def test_cross_month(self):
        assert format_date_range(date(2025, 1, 26), date(2025, 2, 1)) == "Jan 26 – Feb 1"

    def test_same_month_different_year(self):
        assert format_date_range(date(2024, 12, 29), date(2025, 12, 3)) == "Dec 29 – Dec 3"


class TestFormatDayLabel:
    def test_sunday(self):
        assert format_day_label(date(2025, 2, 9)) == "Sun Feb 9"

    def test_friday(self):
        assert format_day_label(date(2025, 2, 7)) == "Fri Feb 7"
