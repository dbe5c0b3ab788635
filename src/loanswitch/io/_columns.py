"""Column name constants for DataFrame export."""

# Schedule columns, in table order
COL_DATE = "date"
COL_INITIAL = "initial"
COL_PAYMENT = "payment"
COL_RATE = "rate"
COL_INTEREST_PAYMENT = "interest_payment"
COL_PRINCIPAL_PAYMENT = "principal_payment"
COL_REMAINING = "remaining"

SCHEDULE_COLUMNS = (
    COL_DATE,
    COL_INITIAL,
    COL_PAYMENT,
    COL_RATE,
    COL_INTEREST_PAYMENT,
    COL_PRINCIPAL_PAYMENT,
    COL_REMAINING,
)

# Sensitivity series columns
COL_SWITCH_PERIOD = "switch_period"
COL_GAIN = "gain"

SENSITIVITY_COLUMNS = (COL_SWITCH_PERIOD, COL_DATE, COL_GAIN)

# Summary columns
COL_SCHEDULE = "schedule"
COL_TOTAL_PAYMENT = "total_payment"
COL_TOTAL_INTEREST = "total_interest"
COL_TOTAL_PRINCIPAL = "total_principal"

SUMMARY_COLUMNS = (
    COL_SCHEDULE,
    COL_TOTAL_PAYMENT,
    COL_TOTAL_INTEREST,
    COL_TOTAL_PRINCIPAL,
    COL_REMAINING,
)
