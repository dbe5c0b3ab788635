"""Interest-rate regimes for schedule generation.

A schedule either runs at one rate throughout (``FixedRate``) or moves to a
new rate at a given period (``SwitchedRate``). Keeping the switch period and
the new rate on the same object means neither can be supplied without the
other.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def _check_rate(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value)}")


@dataclass(frozen=True)
class FixedRate:
    """Single annual percentage rate for every period."""

    rate: float

    def __post_init__(self) -> None:
        _check_rate("rate", self.rate)

    def rate_for(self, index: int) -> float:
        return self.rate

    def __str__(self) -> str:
        return f"{self.rate}%"


@dataclass(frozen=True)
class SwitchedRate:
    """
    Original rate up to a switch period, new rate from then on.

    Attributes:
        rate: Annual percentage rate before the switch.
        switch_period: Zero-based index of the first period at the new rate.
        new_rate: Annual percentage rate from ``switch_period`` onward.
    """

    rate: float
    switch_period: int
    new_rate: float

    def __post_init__(self) -> None:
        _check_rate("rate", self.rate)
        _check_rate("new_rate", self.new_rate)
        if isinstance(self.switch_period, bool) or not isinstance(
            self.switch_period, int
        ):
            raise TypeError(
                f"switch_period must be int, got {type(self.switch_period)}"
            )
        if self.switch_period < 0:
            raise ValueError(
                f"switch_period must be non-negative, got {self.switch_period}"
            )

    def rate_for(self, index: int) -> float:
        return self.new_rate if index >= self.switch_period else self.rate

    def __str__(self) -> str:
        return f"{self.rate}% -> {self.new_rate}% at period {self.switch_period}"


RateRegime = Union[FixedRate, SwitchedRate]
