"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Contract hours
DEFAULT_CONTRACT_HOURS_DAY = 8
WORKING_DAYS_PER_WEEK = 6

# Night band (22:00-06:00)
NIGHT_START_HOUR = 22
NIGHT_END_HOUR = 6

# Fallback rate multipliers applied to the base hourly rate
DEFAULT_OVERTIME_MULTIPLIER = 1.25
DEFAULT_HOLIDAY_MULTIPLIER = 1.5
DEFAULT_NIGHT_MULTIPLIER = 1.15

# Accepted reporting period
MIN_REPORT_YEAR = 2020
MAX_REPORT_YEAR = 2100

EMPLOYEE_CODE_WIDTH = 3
