"""Detection of periods where the payment does not cover interest."""

from __future__ import annotations

import logging
import warnings

from ..errors import NonAmortizingPaymentWarning
from .record import Schedule

logger = logging.getLogger(__name__)


def non_amortizing_periods(schedule: Schedule) -> list[int]:
    """Indices of periods with a negative principal payment."""
    return [i for i, record in enumerate(schedule) if not record.is_amortizing]


def warn_if_non_amortizing(schedule: Schedule, label: str = "schedule") -> list[int]:
    """
    Issue a NonAmortizingPaymentWarning if any period grows the balance.

    Args:
        schedule: Schedule to inspect.
        label: Name used in the warning message.

    Returns:
        Indices of the non-amortizing periods (empty when none).
    """
    periods = non_amortizing_periods(schedule)
    if periods:
        first = schedule[periods[0]]
        message = (
            f"{label}: payment {first.payment} is below the interest due "
            f"({first.interest_payment:.2f}) in {len(periods)} of "
            f"{len(schedule)} periods, starting {first.date}"
        )
        logger.warning(message)
        warnings.warn(message, NonAmortizingPaymentWarning, stacklevel=2)
    return periods
