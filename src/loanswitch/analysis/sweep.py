"""Gain as a function of the switch period."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any

from ..schedule import (
    DEFAULT_REFERENCE_WINDOW,
    FixedRate,
    Schedule,
    SwitchedRate,
    generate_schedule,
    reference_window_schedule,
)
from ..temporal import DEFAULT_CALENDAR, Calendar, Period
from .gain import gain
from .penalty import switch_penalty

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SensitivityPoint:
    """Net gain of switching at one period."""

    switch_period: int
    date: date
    gain: float

    def to_dict(self) -> dict[str, Any]:
        return {"switch_period": self.switch_period, "date": self.date, "gain": self.gain}


def gain_at(
    original: Schedule,
    short_window: Schedule,
    start: date,
    principal: float,
    maturity: date,
    interest_rate: float,
    comparison_rate: float,
    new_rate: float,
    payment: float,
    switch_period: int,
    *,
    calendar: Calendar = DEFAULT_CALENDAR,
) -> float:
    """Gain of switching to ``new_rate`` at one period against ``original``."""
    switched = generate_schedule(
        start,
        principal,
        maturity,
        SwitchedRate(interest_rate, switch_period, new_rate),
        payment,
        calendar=calendar,
    )
    comparison = generate_schedule(
        start,
        principal,
        maturity,
        SwitchedRate(interest_rate, switch_period, comparison_rate),
        payment,
        calendar=calendar,
    )
    penalty = switch_penalty(original, comparison, short_window, switch_period)
    return gain(original, switched, penalty)


def sensitivity_series(
    start: date,
    principal: float,
    maturity: date,
    interest_rate: float,
    comparison_rate: float,
    new_rate: float,
    payment: float,
    *,
    reference_window: Period = DEFAULT_REFERENCE_WINDOW,
    calendar: Calendar = DEFAULT_CALENDAR,
) -> list[SensitivityPoint]:
    """
    Gain for every possible switch period, one point per week.

    The original and reference-window schedules are computed once; each
    candidate period regenerates the switched and comparison schedules, so
    the sweep costs O(N^2) in the number of weeks. That is fine for horizons
    of a few years.

    Args:
        start: Loan start date.
        principal: Opening balance.
        maturity: Maturity date.
        interest_rate: Original annual percentage rate.
        comparison_rate: Reference rate used to price the forgone interest.
        new_rate: Rate after the switch.
        payment: Fixed weekly payment.
        reference_window: Window whose interest is the minimum penalty.
        calendar: Calendar for date arithmetic.

    Returns:
        One SensitivityPoint per period, ordered by switch period.

    Raises:
        InvalidRangeError: If maturity is not after start.
    """
    original = generate_schedule(
        start, principal, maturity, FixedRate(interest_rate), payment, calendar=calendar
    )
    short_window = reference_window_schedule(
        start, principal, interest_rate, payment, reference_window, calendar=calendar
    )

    points = [
        SensitivityPoint(
            switch_period=i,
            date=record.date,
            gain=gain_at(
                original,
                short_window,
                start,
                principal,
                maturity,
                interest_rate,
                comparison_rate,
                new_rate,
                payment,
                i,
                calendar=calendar,
            ),
        )
        for i, record in enumerate(original)
    ]
    logger.debug("Swept %s switch periods from %s", len(points), start)
    return points


def best_switch(series: list[SensitivityPoint]) -> SensitivityPoint:
    """
    Point with the highest gain; the earliest one on ties.

    Raises:
        ValueError: If the series is empty.
    """
    if not series:
        raise ValueError("Cannot pick a switch period from an empty series")
    return max(series, key=lambda point: (point.gain, -point.switch_period))
