"""Exception and warning types raised by the loanswitch engine."""


class LoanSwitchError(Exception):
    """Base class for loanswitch errors."""


class InvalidRangeError(LoanSwitchError, ValueError):
    """Raised when a maturity date does not fall strictly after the start date."""

    pass


class EmptyScheduleError(LoanSwitchError, IndexError):
    """Raised when the final period of a zero-length schedule is requested."""

    pass


class NonAmortizingPaymentWarning(UserWarning):
    """Issued when a payment does not cover the interest due in some period.

    The balance grows instead of shrinking for those periods. The engine does
    not reject such schedules; callers decide whether the inputs are usable.
    """
