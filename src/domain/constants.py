"""Domain constants for the office ledger."""

DEFAULT_CATEGORY = "General"

MANUAL_LOAD_COMPANY = "Manual Load"
MANUAL_LOAD_PLATFORM = "Manual Entry"
DEFAULT_COMPANY_NAME = "N/A"

# Decimal places kept by the store for amounts and exchange rates.
AMOUNT_PLACES = 4
RATE_PLACES = 6

MIN_REPORT_YEAR = 1970
MAX_REPORT_YEAR = 2100

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


__all__ = [
    "DEFAULT_CATEGORY",
    "MANUAL_LOAD_COMPANY",
    "MANUAL_LOAD_PLATFORM",
    "DEFAULT_COMPANY_NAME",
    "AMOUNT_PLACES",
    "RATE_PLACES",
    "MIN_REPORT_YEAR",
    "MAX_REPORT_YEAR",
    "MONTH_NAMES",
]
