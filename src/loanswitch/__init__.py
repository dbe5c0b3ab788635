"""
loanswitch: weekly loan amortization and rate-switch analysis.

Generates fixed-payment weekly amortization schedules, prices the penalty of
switching a loan to a new rate mid-term, and measures the net gain of the
switch for one or every possible switch period.

Example:
    >>> from datetime import date
    >>> from loanswitch import SwitchParameters, analyze
    >>> result = analyze(SwitchParameters.default(date(2024, 1, 1)))
    >>> result.periods
    57
"""

from .analysis import (
    SensitivityPoint,
    SwitchAnalysis,
    SwitchParameters,
    analyze,
    best_switch,
    gain,
    gain_at,
    paydown_benefit,
    sensitivity_series,
    switch_penalty,
)
from .errors import (
    EmptyScheduleError,
    InvalidRangeError,
    LoanSwitchError,
    NonAmortizingPaymentWarning,
)
from .schedule import (
    DEFAULT_REFERENCE_WINDOW,
    WEEKS_PER_YEAR,
    FixedRate,
    RateRegime,
    Schedule,
    ScheduleField,
    ScheduleTotals,
    SwitchedRate,
    WeekRecord,
    generate_schedule,
    non_amortizing_periods,
    reference_window_schedule,
    schedule_sum,
    warn_if_non_amortizing,
)
from .temporal import (
    DEFAULT_CALENDAR,
    Calendar,
    GregorianCalendar,
    Period,
    TimeUnit,
    periods_to_maturity,
)

__version__ = "0.1.0"

__all__ = [
    # Temporal
    "Calendar",
    "GregorianCalendar",
    "DEFAULT_CALENDAR",
    "Period",
    "TimeUnit",
    "periods_to_maturity",
    # Schedules
    "WeekRecord",
    "Schedule",
    "ScheduleField",
    "ScheduleTotals",
    "WEEKS_PER_YEAR",
    "FixedRate",
    "SwitchedRate",
    "RateRegime",
    "generate_schedule",
    "reference_window_schedule",
    "DEFAULT_REFERENCE_WINDOW",
    "schedule_sum",
    "non_amortizing_periods",
    "warn_if_non_amortizing",
    # Analysis
    "switch_penalty",
    "gain",
    "paydown_benefit",
    "SensitivityPoint",
    "sensitivity_series",
    "gain_at",
    "best_switch",
    "SwitchParameters",
    "SwitchAnalysis",
    "analyze",
    # Errors
    "LoanSwitchError",
    "InvalidRangeError",
    "EmptyScheduleError",
    "NonAmortizingPaymentWarning",
]
