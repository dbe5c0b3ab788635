"""Weekly amortization records and the immutable schedule container."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING, Any, Iterator, overload

from ..errors import EmptyScheduleError

if TYPE_CHECKING:
    from typing import Self

WEEKS_PER_YEAR = 52


class ScheduleField(Enum):
    """Numeric WeekRecord fields that can be summed across a schedule."""

    PAYMENT = "payment"
    INTEREST_PAYMENT = "interest_payment"
    PRINCIPAL_PAYMENT = "principal_payment"

    @classmethod
    def parse(cls, value: ScheduleField | str) -> ScheduleField:
        """
        Resolve a field from an enum member, attribute name or camelCase name.

        Accepts "interest_payment", "interestPayment" and "INTEREST_PAYMENT"
        alike.

        Raises:
            ValueError: If the name does not match a summable field.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            for member in cls:
                camel = _snake_to_camel(member.value)
                if key in (member.value, member.name, camel):
                    return member
        raise ValueError(
            f"Unknown schedule field {value!r}. "
            f"Use one of: {', '.join(m.value for m in cls)}"
        )


def _snake_to_camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


@dataclass(frozen=True)
class WeekRecord:
    """
    One weekly period of an amortization schedule.

    Attributes:
        date: Payment date of the period.
        initial: Balance at the start of the period.
        payment: Fixed periodic payment.
        rate: Annual percentage rate in effect (3.2 means 3.2%).
        interest_payment: Interest accrued for the week.
        principal_payment: Part of the payment that reduces the balance.
        remaining: Balance at the end of the period.
    """

    date: date
    initial: float
    payment: float
    rate: float
    interest_payment: float
    principal_payment: float
    remaining: float

    @classmethod
    def accrue(cls, when: date, initial: float, payment: float, rate: float) -> Self:
        """
        Build the record for one week of simple weekly interest.

        Interest is ``initial * rate / 100 / 52``; whatever the payment does
        not spend on interest reduces the balance. A payment below the
        interest due yields a negative principal payment.
        """
        interest_payment = initial * rate / 100 / WEEKS_PER_YEAR
        principal_payment = payment - interest_payment
        return cls(
            date=when,
            initial=initial,
            payment=payment,
            rate=rate,
            interest_payment=interest_payment,
            principal_payment=principal_payment,
            remaining=initial - principal_payment,
        )

    @property
    def is_amortizing(self) -> bool:
        """True when the period does not grow the balance."""
        return self.principal_payment >= 0

    def value_of(self, field: ScheduleField | str) -> float:
        return getattr(self, ScheduleField.parse(field).value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a flat dict suitable for a DataFrame row."""
        return {
            "date": self.date,
            "initial": self.initial,
            "payment": self.payment,
            "rate": self.rate,
            "interest_payment": self.interest_payment,
            "principal_payment": self.principal_payment,
            "remaining": self.remaining,
        }


@dataclass(frozen=True)
class Schedule:
    """
    Ordered, immutable sequence of weekly records.

    Slicing returns a new Schedule, so suffixes of a schedule can be passed
    anywhere a full schedule is accepted.
    """

    records: tuple[WeekRecord, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.records, tuple):
            object.__setattr__(self, "records", tuple(self.records))

    @classmethod
    def from_list(cls, records: list[WeekRecord]) -> Self:
        return cls(tuple(records))

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[WeekRecord]:
        return iter(self.records)

    @overload
    def __getitem__(self, index: int) -> WeekRecord: ...

    @overload
    def __getitem__(self, index: slice) -> Schedule: ...

    def __getitem__(self, index: int | slice) -> WeekRecord | Schedule:
        if isinstance(index, slice):
            return Schedule(self.records[index])
        return self.records[index]

    def is_empty(self) -> bool:
        return not self.records

    @property
    def first(self) -> WeekRecord:
        if not self.records:
            raise EmptyScheduleError("Schedule has no periods")
        return self.records[0]

    @property
    def last(self) -> WeekRecord:
        """Final period of the schedule.

        Raises:
            EmptyScheduleError: If the schedule has no periods.
        """
        if not self.records:
            raise EmptyScheduleError("Schedule has no periods")
        return self.records[-1]

    @property
    def final_remaining(self) -> float:
        """Balance left after the last period."""
        return self.last.remaining

    def dates(self) -> list[date]:
        return [record.date for record in self.records]

    def __str__(self) -> str:
        if not self.records:
            return "Schedule(empty)"
        return (
            f"Schedule({len(self)} weeks, {self.first.date} to {self.last.date}, "
            f"remaining={self.final_remaining:,.2f})"
        )
