"""Week arithmetic behind schedule generation.

The engine only needs three things from a calendar: the (fractional) number
of weeks between two dates, stepping a date forward by whole weeks or by a
calendar period, and ordering. ``Calendar`` names that surface so tests and
callers can substitute their own implementation.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Protocol

from ..errors import InvalidRangeError
from .period import Period

logger = logging.getLogger(__name__)

ONE_WEEK = timedelta(weeks=1)


class Calendar(Protocol):
    """Minimal calendar interface used by the schedule generator."""

    def weeks_between(self, start: date, end: date) -> float: ...

    def periods_between(self, start: date, end: date) -> int: ...

    def add_weeks(self, value: date, weeks: int) -> date: ...

    def add_period(self, value: date, period: Period) -> date: ...

    def is_after(self, value: date, other: date) -> bool: ...


class GregorianCalendar:
    """Calendar over ``datetime.date`` and ``datetime.datetime`` values.

    Week differences use exact ``timedelta`` division so that dates a whole
    number of weeks apart never pick up floating-point residue.
    """

    def weeks_between(self, start: date, end: date) -> float:
        return (end - start) / ONE_WEEK

    def periods_between(self, start: date, end: date) -> int:
        """Number of weeks from start to end, rounded up."""
        weeks, remainder = divmod(end - start, ONE_WEEK)
        return weeks + 1 if remainder else weeks

    def add_weeks(self, value: date, weeks: int) -> date:
        return value + weeks * ONE_WEEK

    def add_period(self, value: date, period: Period) -> date:
        return period.add_to_date(value)

    def is_after(self, value: date, other: date) -> bool:
        return value > other


DEFAULT_CALENDAR = GregorianCalendar()


def periods_to_maturity(
    start: date,
    maturity: date,
    calendar: Calendar = DEFAULT_CALENDAR,
) -> int:
    """
    Count the weekly payment periods between start and maturity.

    The count is the ceiling of the elapsed weeks: dates exactly 13 weeks
    apart give 13 periods, one extra day gives 14.

    Args:
        start: First payment date.
        maturity: Maturity date, strictly after start.
        calendar: Calendar that counts the weekly periods.

    Returns:
        Number of weekly periods (always >= 1).

    Raises:
        InvalidRangeError: If maturity is not after start.
    """
    if not calendar.is_after(maturity, start):
        raise InvalidRangeError(
            f"maturity ({maturity}) must be after start ({start})"
        )

    periods = calendar.periods_between(start, maturity)

    logger.debug("%s weekly periods between %s and %s", periods, start, maturity)
    return periods
