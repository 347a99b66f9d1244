"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Payroll always works on a 30-day month, whatever the calendar says.
PAYRUN_BASELINE_DAYS = 30

# Placeholder written for missing project code/name and enteredBy cells.
MISSING_VALUE = "--"

# Excel 1900 date system: serial of 1970-01-01.
EXCEL_EPOCH_OFFSET = 25569
SECONDS_PER_DAY = 86400

ANNUAL_LEAVE_CODE = "A/L"
ANNUAL_LEAVE_PHRASE = "annual leave"

ALLOCATION_REVIEW_TOLERANCE = 0.1
UNASSIGNED_PROJECT = "Unassigned"

TOP_ISSUES_LIMIT = 3
