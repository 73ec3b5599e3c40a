DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

FIXED_HOLIDAYS = []

OVERTIME_RATE_MULTIPLIER = 1.25
HOLIDAY_RATE_MULTIPLIER = 1.5
NIGHT_RATE_MULTIPLIER = 1.15

MAX_WORKERS = 0
