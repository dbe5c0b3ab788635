"""Single entry point that derives every output from one parameter set."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from ..errors import InvalidRangeError
from ..schedule import (
    DEFAULT_REFERENCE_WINDOW,
    FixedRate,
    Schedule,
    ScheduleTotals,
    SwitchedRate,
    generate_schedule,
    reference_window_schedule,
    warn_if_non_amortizing,
)
from ..temporal import Period, parse_date
from .gain import gain, paydown_benefit
from .penalty import switch_penalty
from .sweep import SensitivityPoint, sensitivity_series

if TYPE_CHECKING:
    from typing import Self

logger = logging.getLogger(__name__)


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(value)}")
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")


def _parse_switch_period(value: Any) -> int:
    """Convert a row value to a switch period, rejecting fractional values."""
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return 0
    if isinstance(value, bool):
        raise TypeError(f"switch_period must be int, got {type(value)}")
    if isinstance(value, int):
        return value
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"switch_period must be a whole number, got {value!r}")
    return int(number)


@dataclass(frozen=True)
class SwitchParameters:
    """
    Inputs of a rate-switch analysis.

    Attributes:
        start: Loan start date (first weekly period).
        maturity: Maturity date, strictly after start.
        principal: Opening balance.
        interest_rate: Current annual percentage rate.
        comparison_rate: Rate used to price the interest forgone by the lender.
        new_rate: Rate after the switch.
        payment: Fixed weekly payment.
        switch_period: Period index of the switch (not clamped to the term).
        reference_window: Window whose interest is the minimum penalty.
    """

    start: date
    maturity: date
    principal: float
    interest_rate: float
    comparison_rate: float
    new_rate: float
    payment: float
    switch_period: int = 0
    reference_window: Period = field(default=DEFAULT_REFERENCE_WINDOW)

    def __post_init__(self) -> None:
        if not isinstance(self.start, date):
            raise TypeError(f"start must be date, got {type(self.start)}")
        if not isinstance(self.maturity, date):
            raise TypeError(f"maturity must be date, got {type(self.maturity)}")
        if isinstance(self.start, datetime) != isinstance(self.maturity, datetime):
            raise TypeError(
                f"start and maturity must both be date or both be datetime, "
                f"got {type(self.start).__name__} and {type(self.maturity).__name__}"
            )
        for name in ("principal", "interest_rate", "comparison_rate", "new_rate", "payment"):
            _check_number(name, getattr(self, name))
        if isinstance(self.switch_period, bool) or not isinstance(self.switch_period, int):
            raise TypeError(f"switch_period must be int, got {type(self.switch_period)}")
        if not isinstance(self.reference_window, Period):
            raise TypeError(
                f"reference_window must be Period, got {type(self.reference_window)}"
            )

        if not self.principal > 0:
            raise ValueError(f"principal must be positive, got {self.principal}")
        if self.switch_period < 0:
            raise ValueError(f"switch_period must be non-negative, got {self.switch_period}")
        if self.maturity <= self.start:
            raise InvalidRangeError(
                f"maturity ({self.maturity}) must be after start ({self.start})"
            )

    @classmethod
    def default(cls, start: date) -> Self:
        """Parameters of a 500,000 loan at 3.2% with a 500 weekly payment.

        Maturity is 13 months after start; the comparison and new rates are
        1.1% and 1.9%, switching in the first period.
        """
        return cls(
            start=start,
            maturity=Period.from_string("13M").add_to_date(start),
            principal=500000.0,
            interest_rate=3.2,
            comparison_rate=1.1,
            new_rate=1.9,
            payment=500.0,
        )

    # -----------------------------------------------------------------------
    # Dict serialization
    # -----------------------------------------------------------------------

    #: Fields required by ``from_dict()``. switch_period and reference_window
    #: fall back to their defaults.
    REQUIRED_DICT_FIELDS = frozenset(
        {
            "start",
            "maturity",
            "principal",
            "interest_rate",
            "comparison_rate",
            "new_rate",
            "payment",
        }
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert to a flat dict (dates as ``date``, window as "3M")."""
        return {
            "start": self.start,
            "maturity": self.maturity,
            "principal": self.principal,
            "interest_rate": self.interest_rate,
            "comparison_rate": self.comparison_rate,
            "new_rate": self.new_rate,
            "payment": self.payment,
            "switch_period": self.switch_period,
            "reference_window": str(self.reference_window),
        }

    @classmethod
    def from_dict(cls, row: dict[str, Any]) -> Self:
        """Reconstruct parameters from a flat dict.

        Dates may be ``date`` objects or ISO strings; the reference window may
        be a Period or a string such as "3M".

        Raises:
            ValueError: If required fields are missing or invalid.
        """
        missing = cls.REQUIRED_DICT_FIELDS - row.keys()
        if missing:
            raise ValueError(
                f"Missing required fields for SwitchParameters: {sorted(missing)}"
            )

        try:
            start = parse_date(row["start"])
            maturity = parse_date(row["maturity"])
            if start is None or maturity is None:
                raise ValueError("start and maturity must not be null")

            window = row.get("reference_window")
            if window is None:
                reference_window = DEFAULT_REFERENCE_WINDOW
            elif isinstance(window, Period):
                reference_window = window
            else:
                reference_window = Period.from_string(str(window))

            return cls(
                start=start,
                maturity=maturity,
                principal=float(row["principal"]),
                interest_rate=float(row["interest_rate"]),
                comparison_rate=float(row["comparison_rate"]),
                new_rate=float(row["new_rate"]),
                payment=float(row["payment"]),
                switch_period=_parse_switch_period(row.get("switch_period")),
                reference_window=reference_window,
            )
        except InvalidRangeError:
            raise
        except (KeyError, ValueError, TypeError) as exc:
            raise ValueError(f"Error converting row to SwitchParameters: {exc}") from exc


@dataclass(frozen=True)
class SwitchAnalysis:
    """
    Every derived output of a rate-switch analysis.

    Attributes:
        parameters: The inputs the analysis was computed from.
        original: Schedule at the current rate throughout.
        short_window: Reference-window schedule behind the penalty floor.
        comparison: Schedule switching to the comparison rate.
        switched: Schedule switching to the new rate.
        original_totals: Summary totals of the original schedule.
        switched_totals: Summary totals of the switched schedule.
        paydown_benefit: Extra principal paid down by switching.
        switch_penalty: Cost of switching (non-positive).
        gain: Benefit net of the penalty.
        sensitivity: Gain for every switch period.
    """

    parameters: SwitchParameters
    original: Schedule
    short_window: Schedule
    comparison: Schedule
    switched: Schedule
    original_totals: ScheduleTotals
    switched_totals: ScheduleTotals
    paydown_benefit: float
    switch_penalty: float
    gain: float
    sensitivity: tuple[SensitivityPoint, ...]

    @property
    def periods(self) -> int:
        """Number of weekly periods to maturity."""
        return len(self.original)

    @property
    def switch_date(self) -> date | None:
        """Date of the switch period, or None when it lies past maturity."""
        index = self.parameters.switch_period
        return self.original[index].date if index < len(self.original) else None


def analyze(params: SwitchParameters) -> SwitchAnalysis:
    """
    Compute schedules, totals, penalty, gain and sensitivity in one call.

    The result is a fresh value on every call; nothing is cached between
    calls. Payments below the interest due trigger a
    NonAmortizingPaymentWarning but still produce a result.

    Raises:
        InvalidRangeError: If maturity is not after start.
    """
    p = params
    original = generate_schedule(
        p.start, p.principal, p.maturity, FixedRate(p.interest_rate), p.payment
    )
    short_window = reference_window_schedule(
        p.start, p.principal, p.interest_rate, p.payment, p.reference_window
    )
    comparison = generate_schedule(
        p.start,
        p.principal,
        p.maturity,
        SwitchedRate(p.interest_rate, p.switch_period, p.comparison_rate),
        p.payment,
    )
    switched = generate_schedule(
        p.start,
        p.principal,
        p.maturity,
        SwitchedRate(p.interest_rate, p.switch_period, p.new_rate),
        p.payment,
    )

    warn_if_non_amortizing(original, "original schedule")
    warn_if_non_amortizing(switched, "switched schedule")

    penalty = switch_penalty(original, comparison, short_window, p.switch_period)
    series = sensitivity_series(
        p.start,
        p.principal,
        p.maturity,
        p.interest_rate,
        p.comparison_rate,
        p.new_rate,
        p.payment,
        reference_window=p.reference_window,
    )

    result = SwitchAnalysis(
        parameters=p,
        original=original,
        short_window=short_window,
        comparison=comparison,
        switched=switched,
        original_totals=ScheduleTotals.from_schedule(original),
        switched_totals=ScheduleTotals.from_schedule(switched),
        paydown_benefit=paydown_benefit(original, switched),
        switch_penalty=penalty,
        gain=gain(original, switched, penalty),
        sensitivity=tuple(series),
    )
    logger.debug(
        "Analysis over %s weeks: switch at %s gives gain %.2f (penalty %.2f)",
        result.periods,
        p.switch_period,
        result.gain,
        result.switch_penalty,
    )
    return result
