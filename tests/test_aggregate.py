"""Tests for schedule aggregation."""

from datetime import date

import pytest

from loanswitch import (
    EmptyScheduleError,
    FixedRate,
    Schedule,
    ScheduleField,
    ScheduleTotals,
    WeekRecord,
    generate_schedule,
    schedule_sum,
)


@pytest.fixture
def small_schedule() -> Schedule:
    """Three weeks with hand-checkable numbers (zero rate)."""
    return generate_schedule(
        date(2024, 1, 1), 1000.0, date(2024, 1, 22), FixedRate(0.0), 100.0
    )


@pytest.fixture
def interest_schedule() -> Schedule:
    """Ten weeks at 5.2%, i.e. 0.1% per week."""
    return generate_schedule(
        date(2024, 1, 1), 10000.0, date(2024, 3, 11), FixedRate(5.2), 1000.0
    )


class TestScheduleSum:
    """Tests for schedule_sum."""

    def test_sum_payment(self, small_schedule: Schedule):
        """Sum of payments over the whole schedule."""
        assert len(small_schedule) == 3
        assert schedule_sum(small_schedule, ScheduleField.PAYMENT) == 300.0

    def test_sum_by_name(self, small_schedule: Schedule):
        """Field names are accepted in place of enum members."""
        assert schedule_sum(small_schedule, "principalPayment") == 300.0
        assert schedule_sum(small_schedule, "interest_payment") == 0.0

    def test_from_index(self, small_schedule: Schedule):
        """Only periods from from_index onward are summed."""
        assert schedule_sum(small_schedule, ScheduleField.PAYMENT, 1) == 200.0
        assert schedule_sum(small_schedule, ScheduleField.PAYMENT, 2) == 100.0

    def test_from_index_past_end(self, small_schedule: Schedule):
        """An empty slice sums to zero."""
        assert schedule_sum(small_schedule, ScheduleField.PAYMENT, 3) == 0.0
        assert schedule_sum(small_schedule, ScheduleField.PAYMENT, 100) == 0.0

    def test_empty_schedule(self):
        """An empty schedule sums to zero."""
        assert schedule_sum(Schedule(), ScheduleField.INTEREST_PAYMENT) == 0.0

    def test_negative_from_index(self, small_schedule: Schedule):
        """Negative start indices are rejected."""
        with pytest.raises(ValueError):
            schedule_sum(small_schedule, ScheduleField.PAYMENT, -1)

    def test_unknown_field(self, small_schedule: Schedule):
        """Unknown fields are rejected."""
        with pytest.raises(ValueError):
            schedule_sum(small_schedule, "rate")

    def test_interest_matches_records(self, interest_schedule: Schedule):
        """Suffix interest equals the sum of the individual records."""
        expected = sum(rec.interest_payment for rec in interest_schedule.records[4:])
        assert schedule_sum(interest_schedule, ScheduleField.INTEREST_PAYMENT, 4) == pytest.approx(expected)

    def test_first_interest(self, interest_schedule: Schedule):
        """0.1% of 10,000 is 10 for the first week."""
        assert interest_schedule[0].interest_payment == pytest.approx(10.0)

    def test_payment_split(self, interest_schedule: Schedule):
        """Interest plus principal adds up to payments."""
        total = schedule_sum(interest_schedule, ScheduleField.PAYMENT)
        interest = schedule_sum(interest_schedule, ScheduleField.INTEREST_PAYMENT)
        principal = schedule_sum(interest_schedule, ScheduleField.PRINCIPAL_PAYMENT)
        assert total == pytest.approx(10 * 1000.0)
        assert interest + principal == pytest.approx(total)


class TestScheduleTotals:
    """Tests for ScheduleTotals."""

    def test_from_schedule(self, small_schedule: Schedule):
        """Totals for a zero-rate schedule."""
        totals = ScheduleTotals.from_schedule(small_schedule)
        assert totals.total_payment == 300.0
        assert totals.total_interest == 0.0
        assert totals.total_principal == 300.0
        assert totals.remaining == 700.0

    def test_to_dict(self, small_schedule: Schedule):
        """Dict form carries all four figures."""
        row = ScheduleTotals.from_schedule(small_schedule).to_dict()
        assert row == {
            "total_payment": 300.0,
            "total_interest": 0.0,
            "total_principal": 300.0,
            "remaining": 700.0,
        }

    def test_empty_schedule(self):
        """Totals need a final period."""
        with pytest.raises(EmptyScheduleError):
            ScheduleTotals.from_schedule(Schedule())

    def test_single_record(self):
        """A one-week schedule."""
        rec = WeekRecord.accrue(date(2024, 1, 1), 5200.0, 100.0, 10.0)
        totals = ScheduleTotals.from_schedule(Schedule((rec,)))
        assert totals.total_interest == pytest.approx(10.0)
        assert totals.remaining == pytest.approx(5110.0)
