"""Weekly amortization schedule generation."""

from __future__ import annotations

import logging
import math
from datetime import date
from itertools import accumulate, islice
from typing import NamedTuple

from ..temporal import DEFAULT_CALENDAR, Calendar, Period, TimeUnit, periods_to_maturity
from .record import Schedule, WeekRecord
from .regime import FixedRate, RateRegime, SwitchedRate

logger = logging.getLogger(__name__)

DEFAULT_REFERENCE_WINDOW = Period(3, TimeUnit.MONTHS)


class _Carry(NamedTuple):
    """Fold state: balance and date entering the next period."""

    balance: float
    date: date
    record: WeekRecord | None = None


def generate_schedule(
    start: date,
    principal: float,
    maturity: date,
    regime: RateRegime,
    payment: float,
    *,
    calendar: Calendar = DEFAULT_CALENDAR,
) -> Schedule:
    """
    Generate a fixed-payment weekly amortization schedule.

    The schedule is a left fold over period indices: each step accrues one
    week of interest on the carried balance at ``regime.rate_for(index)``,
    emits the WeekRecord, and carries the ending balance and the next
    weekly date forward.

    Payments below the interest due are not rejected. The balance then grows
    from period to period; see ``warn_if_non_amortizing``.

    Args:
        start: Date of the first period.
        principal: Opening balance (must be positive).
        maturity: Maturity date; sets the number of periods.
        regime: FixedRate or SwitchedRate.
        payment: Fixed weekly payment, same unit as principal.
        calendar: Calendar for week arithmetic.

    Returns:
        Schedule with exactly ``periods_to_maturity(start, maturity)`` records.

    Raises:
        InvalidRangeError: If maturity is not after start.
        ValueError: If principal is not a positive finite number.
        TypeError: If regime is not a FixedRate or SwitchedRate.
    """
    if not isinstance(regime, (FixedRate, SwitchedRate)):
        raise TypeError(f"regime must be FixedRate or SwitchedRate, got {type(regime)}")
    if not (math.isfinite(principal) and principal > 0):
        raise ValueError(f"principal must be positive and finite, got {principal}")

    periods = periods_to_maturity(start, maturity, calendar)

    def step(carry: _Carry, index: int) -> _Carry:
        record = WeekRecord.accrue(carry.date, carry.balance, payment, regime.rate_for(index))
        return _Carry(record.remaining, calendar.add_weeks(carry.date, 1), record)

    folded = accumulate(range(periods), step, initial=_Carry(principal, start))
    records = tuple(carry.record for carry in islice(folded, 1, None))

    logger.debug(
        "Generated %s-week schedule from %s at %s (principal=%s, payment=%s)",
        periods,
        start,
        regime,
        principal,
        payment,
    )
    return Schedule(records)  # type: ignore[arg-type]


def reference_window_schedule(
    start: date,
    principal: float,
    rate: float,
    payment: float,
    window: Period = DEFAULT_REFERENCE_WINDOW,
    *,
    calendar: Calendar = DEFAULT_CALENDAR,
) -> Schedule:
    """
    Single-rate schedule over a short window starting at ``start``.

    Its total interest is the minimum switch penalty. The window is anchored
    at the loan start and uses the original rate, so it does not depend on
    when a switch happens.

    Args:
        start: Loan start date.
        principal: Opening balance.
        rate: Original annual percentage rate.
        payment: Fixed weekly payment.
        window: Length of the reference window (three months by default).
        calendar: Calendar for week and month arithmetic.
    """
    return generate_schedule(
        start,
        principal,
        calendar.add_period(start, window),
        FixedRate(rate),
        payment,
        calendar=calendar,
    )
