import os

from config import env_list

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Empty list -> built-in Italian calendar
FIXED_HOLIDAYS = env_list("PAYROLL_FIXED_HOLIDAYS")

# Fallback multipliers of the base hourly rate
OVERTIME_RATE_MULTIPLIER = float(os.getenv("OVERTIME_RATE_MULTIPLIER", "1.25"))
HOLIDAY_RATE_MULTIPLIER = float(os.getenv("HOLIDAY_RATE_MULTIPLIER", "1.5"))
NIGHT_RATE_MULTIPLIER = float(os.getenv("NIGHT_RATE_MULTIPLIER", "1.15"))

# Thread pool size for large rosters (0 = sequential)
MAX_WORKERS = int(os.getenv("PAYROLL_MAX_WORKERS", "0"))
