"""Net benefit of ending a loan on one schedule instead of another."""

from __future__ import annotations

from ..schedule import Schedule


def paydown_benefit(schedule_a: Schedule, schedule_b: Schedule) -> float:
    """
    Extra principal paid down by schedule B relative to schedule A.

    Raises:
        EmptyScheduleError: If either schedule has no periods.
    """
    return schedule_a.final_remaining - schedule_b.final_remaining


def gain(schedule_a: Schedule, schedule_b: Schedule, switch_penalty: float) -> float:
    """
    Net gain of ending with schedule B instead of schedule A, after penalty.

    Args:
        schedule_a: Baseline schedule (typically the original rate).
        schedule_b: Alternative schedule (typically after a rate switch).
        switch_penalty: Penalty as returned by ``switch_penalty`` (<= 0).

    Returns:
        ``a.remaining - b.remaining + switch_penalty`` at maturity.

    Raises:
        EmptyScheduleError: If either schedule has no periods.
    """
    return paydown_benefit(schedule_a, schedule_b) + switch_penalty
