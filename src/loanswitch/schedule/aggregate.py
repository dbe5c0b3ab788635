"""Field sums and summary totals over schedules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .record import Schedule, ScheduleField

if TYPE_CHECKING:
    from typing import Self


def schedule_sum(
    schedule: Schedule,
    field: ScheduleField | str,
    from_index: int = 0,
) -> float:
    """
    Sum a numeric field over ``schedule[from_index:]``.

    Args:
        schedule: Schedule to aggregate.
        field: PAYMENT, INTEREST_PAYMENT or PRINCIPAL_PAYMENT (names accepted).
        from_index: First period included. Indices past the end give 0.0.

    Returns:
        The sum, 0.0 for an empty slice.

    Raises:
        ValueError: If the field is unknown or from_index is negative.
    """
    attr = ScheduleField.parse(field).value
    if from_index < 0:
        raise ValueError(f"from_index must be non-negative, got {from_index}")
    return sum((getattr(record, attr) for record in schedule[from_index:]), 0.0)


@dataclass(frozen=True)
class ScheduleTotals:
    """Summary figures of a schedule for display next to the table."""

    total_payment: float
    total_interest: float
    total_principal: float
    remaining: float

    @classmethod
    def from_schedule(cls, schedule: Schedule) -> Self:
        """
        Compute totals for a schedule.

        Raises:
            EmptyScheduleError: If the schedule has no periods.
        """
        remaining = schedule.final_remaining
        return cls(
            total_payment=schedule_sum(schedule, ScheduleField.PAYMENT),
            total_interest=schedule_sum(schedule, ScheduleField.INTEREST_PAYMENT),
            total_principal=schedule_sum(schedule, ScheduleField.PRINCIPAL_PAYMENT),
            remaining=remaining,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_payment": self.total_payment,
            "total_interest": self.total_interest,
            "total_principal": self.total_principal,
            "remaining": self.remaining,
        }
