"""Weekly amortization schedules: records, rate regimes, generation and sums."""

from .aggregate import ScheduleTotals, schedule_sum
from .diagnostics import non_amortizing_periods, warn_if_non_amortizing
from .generator import (
    DEFAULT_REFERENCE_WINDOW,
    generate_schedule,
    reference_window_schedule,
)
from .record import WEEKS_PER_YEAR, Schedule, ScheduleField, WeekRecord
from .regime import FixedRate, RateRegime, SwitchedRate

__all__ = [
    # Records
    "WeekRecord",
    "Schedule",
    "ScheduleField",
    "WEEKS_PER_YEAR",
    # Regimes
    "FixedRate",
    "SwitchedRate",
    "RateRegime",
    # Generation
    "generate_schedule",
    "reference_window_schedule",
    "DEFAULT_REFERENCE_WINDOW",
    # Aggregation
    "schedule_sum",
    "ScheduleTotals",
    # Diagnostics
    "non_amortizing_periods",
    "warn_if_non_amortizing",
]
