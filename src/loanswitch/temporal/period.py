"""Calendar periods (days, weeks, months, years) and date arithmetic."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import TYPE_CHECKING

from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from typing import Self


class TimeUnit(Enum):
    """Unit of a calendar period."""

    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


_PERIOD_PATTERN = re.compile(r"^\s*(\d+)\s*([DWMYdwmy])\s*$")

# Approximate day counts used only when approximate=True
_APPROX_DAYS = {
    TimeUnit.DAYS: 1,
    TimeUnit.WEEKS: 7,
    TimeUnit.MONTHS: 30,
    TimeUnit.YEARS: 365,
}


@dataclass(frozen=True)
class Period:
    """
    A length of calendar time such as 13 weeks or 3 months.

    Month and year steps follow calendar rules rather than fixed day counts,
    so adding one month to January 31 lands on the last day of February.

    Attributes:
        length: Number of units (non-negative).
        unit: The time unit.
    """

    length: int
    unit: TimeUnit

    def __post_init__(self) -> None:
        if not isinstance(self.length, int) or isinstance(self.length, bool):
            raise TypeError(f"length must be int, got {type(self.length)}")
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")
        if not isinstance(self.unit, TimeUnit):
            raise TypeError(f"unit must be TimeUnit, got {type(self.unit)}")

    @classmethod
    def from_string(cls, value: str) -> Self:
        """
        Parse a period from a compact string like "3M", "13W" or "1Y".

        Args:
            value: Length followed by a unit letter (D, W, M or Y, any case).

        Returns:
            The parsed Period.

        Raises:
            ValueError: If the string cannot be parsed.
        """
        match = _PERIOD_PATTERN.match(value)
        if match is None:
            raise ValueError(f"Cannot parse period from {value!r}")
        return cls(int(match.group(1)), TimeUnit(match.group(2).upper()))

    def to_relativedelta(self) -> relativedelta:
        if self.unit is TimeUnit.DAYS:
            return relativedelta(days=self.length)
        if self.unit is TimeUnit.WEEKS:
            return relativedelta(weeks=self.length)
        if self.unit is TimeUnit.MONTHS:
            return relativedelta(months=self.length)
        return relativedelta(years=self.length)

    def add_to_date(self, value: date) -> date:
        """Return ``value`` moved forward by this period."""
        return value + self.to_relativedelta()

    def to_days(self, approximate: bool = False) -> int:
        """
        Convert the period to a day count.

        Raises:
            ValueError: If the unit is months or years and approximate is False.
        """
        if self.unit in (TimeUnit.DAYS, TimeUnit.WEEKS) or approximate:
            return self.length * _APPROX_DAYS[self.unit]
        raise ValueError(
            f"{self} has no exact day count; pass approximate=True to estimate"
        )

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"
