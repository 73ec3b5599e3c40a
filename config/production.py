import os

from config import env_list

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

FIXED_HOLIDAYS = env_list("PAYROLL_FIXED_HOLIDAYS")

OVERTIME_RATE_MULTIPLIER = float(os.getenv("OVERTIME_RATE_MULTIPLIER", "1.25"))
HOLIDAY_RATE_MULTIPLIER = float(os.getenv("HOLIDAY_RATE_MULTIPLIER", "1.5"))
NIGHT_RATE_MULTIPLIER = float(os.getenv("NIGHT_RATE_MULTIPLIER", "1.15"))

# threads only help when repositories are slow; the hour math is CPU-bound
MAX_WORKERS = int(os.getenv("PAYROLL_MAX_WORKERS", "0"))
