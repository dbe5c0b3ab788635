"""Tests for weekly period counting and the calendar interface."""

import math
from datetime import date, datetime, timedelta

import pytest

from loanswitch import InvalidRangeError, periods_to_maturity
from loanswitch.temporal import GregorianCalendar, Period, TimeUnit, parse_date


class TestPeriodsToMaturity:
    """Tests for periods_to_maturity."""

    def test_exact_week_boundary(self):
        """Dates exactly 13 weeks apart give 13 periods."""
        start = date(2024, 1, 1)
        assert periods_to_maturity(start, start + timedelta(weeks=13)) == 13

    def test_partial_week_rounds_up(self):
        """One extra day starts another period."""
        start = date(2024, 1, 1)
        assert periods_to_maturity(start, start + timedelta(weeks=13, days=1)) == 14

    def test_single_day(self):
        """Any positive span gives at least one period."""
        assert periods_to_maturity(date(2024, 1, 1), date(2024, 1, 2)) == 1

    def test_datetimes(self):
        """Datetimes a fraction of a week past a boundary round up."""
        start = datetime(2024, 1, 1, 9, 0)
        assert periods_to_maturity(start, start + timedelta(weeks=2)) == 2
        assert periods_to_maturity(start, start + timedelta(weeks=2, hours=1)) == 3

    def test_thirteen_months(self):
        """2024-01-01 to 2025-02-01 is 397 days, 57 weeks rounded up."""
        start = date(2024, 1, 1)
        maturity = Period(13, TimeUnit.MONTHS).add_to_date(start)
        assert maturity == date(2025, 2, 1)
        assert periods_to_maturity(start, maturity) == 57

    def test_same_day_rejected(self):
        """Maturity equal to start is an invalid range."""
        with pytest.raises(InvalidRangeError):
            periods_to_maturity(date(2024, 1, 1), date(2024, 1, 1))

    def test_maturity_before_start_rejected(self):
        """Maturity before start is an invalid range."""
        with pytest.raises(InvalidRangeError):
            periods_to_maturity(date(2024, 6, 1), date(2024, 1, 1))

    def test_invalid_range_is_value_error(self):
        """InvalidRangeError can be caught as ValueError."""
        with pytest.raises(ValueError):
            periods_to_maturity(date(2024, 6, 1), date(2024, 1, 1))

    def test_custom_calendar(self):
        """The period count comes from the calendar passed in."""

        class HalfWeekCalendar:
            def weeks_between(self, start, end):
                return 2.5

            def periods_between(self, start, end):
                return math.ceil(self.weeks_between(start, end))

            def add_weeks(self, value, weeks):
                return value + timedelta(weeks=weeks)

            def add_period(self, value, period):
                return period.add_to_date(value)

            def is_after(self, value, other):
                return value > other

        assert periods_to_maturity(date(2024, 1, 1), date(2024, 2, 1), HalfWeekCalendar()) == 3

    def test_calendar_subclass_override(self):
        """A GregorianCalendar subclass overriding periods_between is honoured."""

        class FortnightCalendar(GregorianCalendar):
            def periods_between(self, start, end):
                return math.ceil(self.weeks_between(start, end) / 2)

        start = date(2024, 1, 1)
        assert periods_to_maturity(start, start + timedelta(weeks=13), FortnightCalendar()) == 7


class TestGregorianCalendar:
    """Tests for GregorianCalendar."""

    def test_weeks_between(self):
        """Fractional weeks are reported as floats."""
        cal = GregorianCalendar()
        assert cal.weeks_between(date(2024, 1, 1), date(2024, 1, 15)) == 2.0
        assert cal.weeks_between(date(2024, 1, 1), date(2024, 1, 4)) == pytest.approx(3 / 7)

    def test_add_weeks(self):
        """Adding weeks steps seven days at a time."""
        cal = GregorianCalendar()
        assert cal.add_weeks(date(2024, 12, 30), 1) == date(2025, 1, 6)

    def test_add_period(self):
        """Adding a month period clamps to month end."""
        cal = GregorianCalendar()
        assert cal.add_period(date(2024, 1, 31), Period(1, TimeUnit.MONTHS)) == date(2024, 2, 29)

    def test_periods_between(self):
        """Whole weeks are exact; any remainder rounds up."""
        cal = GregorianCalendar()
        assert cal.periods_between(date(2024, 1, 1), date(2024, 4, 1)) == 13
        assert cal.periods_between(date(2024, 1, 1), date(2024, 4, 2)) == 14

    def test_is_after(self):
        """is_after is strict."""
        cal = GregorianCalendar()
        assert cal.is_after(date(2024, 1, 2), date(2024, 1, 1))
        assert not cal.is_after(date(2024, 1, 1), date(2024, 1, 1))


class TestParseDate:
    """Tests for parse_date."""

    def test_values(self):
        """Dates, datetimes, ISO strings and None are accepted."""
        assert parse_date(date(2024, 1, 1)) == date(2024, 1, 1)
        assert parse_date(datetime(2024, 1, 1, 12, 30)) == date(2024, 1, 1)
        assert parse_date("2024-01-01") == date(2024, 1, 1)
        assert parse_date(None) is None

    def test_invalid_type(self):
        """Unsupported types raise TypeError."""
        with pytest.raises(TypeError):
            parse_date(20240101)
