"""Cost of switching a loan to a new rate mid-term."""

from __future__ import annotations

from ..schedule import Schedule, ScheduleField, schedule_sum


def switch_penalty(
    orig_schedule: Schedule,
    comparison_schedule: Schedule,
    short_window_schedule: Schedule,
    switch_period: int,
) -> float:
    """
    Penalty for switching rates at ``switch_period``.

    The lender charges the interest it forgoes from the switch onward,
    measured against a comparison rate, but never less than the total
    interest of the short reference-window schedule.

    Args:
        orig_schedule: Schedule at the original rate throughout.
        comparison_schedule: Schedule switching to the comparison rate at
            ``switch_period``.
        short_window_schedule: Original-rate schedule over the reference
            window; summed in full.
        switch_period: Period index of the switch. Past the end, only the
            floor applies.

    Returns:
        The penalty as a non-positive amount (a cost).
    """
    forgone = schedule_sum(orig_schedule, ScheduleField.INTEREST_PAYMENT, switch_period)
    comparison = schedule_sum(
        comparison_schedule, ScheduleField.INTEREST_PAYMENT, switch_period
    )
    floor = schedule_sum(short_window_schedule, ScheduleField.INTEREST_PAYMENT)
    return -max(forgone - comparison, floor)
