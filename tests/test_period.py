"""Tests for Period class."""

from datetime import date

import pytest

from loanswitch.temporal import Period
from loanswitch.temporal.period import TimeUnit


class TestPeriod:
    """Test cases for Period class."""

    def test_create_period(self):
        """Test creating a Period."""
        p = Period(3, TimeUnit.MONTHS)
        assert p.length == 3
        assert p.unit == TimeUnit.MONTHS

    def test_from_string(self):
        """Test parsing period from string."""
        assert Period.from_string("3M") == Period(3, TimeUnit.MONTHS)
        assert Period.from_string("6m") == Period(6, TimeUnit.MONTHS)
        assert Period.from_string("1Y") == Period(1, TimeUnit.YEARS)
        assert Period.from_string("90D") == Period(90, TimeUnit.DAYS)
        assert Period.from_string("13W") == Period(13, TimeUnit.WEEKS)

    def test_from_string_invalid(self):
        """Test that malformed strings are rejected."""
        with pytest.raises(ValueError):
            Period.from_string("three months")
        with pytest.raises(ValueError):
            Period.from_string("3Q")

    def test_negative_length_rejected(self):
        """Test that negative lengths raise ValueError."""
        with pytest.raises(ValueError):
            Period(-1, TimeUnit.WEEKS)

    def test_add_to_date_weeks(self):
        """Test adding weeks to a date."""
        assert Period(13, TimeUnit.WEEKS).add_to_date(date(2024, 1, 1)) == date(2024, 4, 1)

    def test_add_to_date_months(self):
        """Test adding months to a date."""
        start = date(2024, 1, 15)
        assert Period(3, TimeUnit.MONTHS).add_to_date(start) == date(2024, 4, 15)

    def test_add_to_date_months_end_of_month(self):
        """Test adding months handles month-end correctly."""
        # Jan 31 + 1 month should give Feb 29 (2024 is leap year)
        start = date(2024, 1, 31)
        assert Period(1, TimeUnit.MONTHS).add_to_date(start) == date(2024, 2, 29)

    def test_add_to_date_years(self):
        """Test adding years to a date."""
        start = date(2024, 2, 29)
        assert Period(1, TimeUnit.YEARS).add_to_date(start) == date(2025, 2, 28)

    def test_to_days(self):
        """Test converting period to days."""
        assert Period(7, TimeUnit.DAYS).to_days() == 7
        assert Period(2, TimeUnit.WEEKS).to_days() == 14
        assert Period(1, TimeUnit.MONTHS).to_days(approximate=True) == 30
        assert Period(1, TimeUnit.YEARS).to_days(approximate=True) == 365

    def test_to_days_non_exact(self):
        """Test that non-exact conversions raise error when approximate=False."""
        with pytest.raises(ValueError):
            Period(1, TimeUnit.MONTHS).to_days(approximate=False)

    def test_str(self):
        """Test compact string form round-trips through from_string."""
        assert str(Period(3, TimeUnit.MONTHS)) == "3M"
        assert Period.from_string(str(Period(52, TimeUnit.WEEKS))) == Period(52, TimeUnit.WEEKS)
