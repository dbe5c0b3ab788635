"""Calendar periods, date coercion and weekly period counting."""

from .calendar import (
    DEFAULT_CALENDAR,
    Calendar,
    GregorianCalendar,
    periods_to_maturity,
)
from .dates import parse_date
from .period import Period, TimeUnit

__all__ = [
    "Calendar",
    "GregorianCalendar",
    "DEFAULT_CALENDAR",
    "periods_to_maturity",
    "parse_date",
    "Period",
    "TimeUnit",
]
