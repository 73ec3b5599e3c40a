from __future__ import annotations

import calendar

from ..core.constants import MAX_REPORT_YEAR, MIN_REPORT_YEAR
from ..core.exceptions import ValidationError

# leap year, so 02-29 is accepted
_REFERENCE_YEAR = 2000


def _as_int(value, message: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(message) from None


def require_month(value: int) -> int:
    message = f"Mese non valido: {value}"
    month = _as_int(value, message)
    if not 1 <= month <= 12:
        raise ValidationError(message)
    return month


def require_year(value: int) -> int:
    message = f"Anno non valido: {value} (ammessi {MIN_REPORT_YEAR}-{MAX_REPORT_YEAR})"
    year = _as_int(value, message)
    if not MIN_REPORT_YEAR <= year <= MAX_REPORT_YEAR:
        raise ValidationError(message)
    return year


def require_month_day(value: str) -> tuple[int, int]:
    """Parse a fixed-holiday entry in MM-DD form; the day must exist in that month."""
    try:
        month_s, day_s = value.strip().split("-")
        month, day = int(month_s), int(day_s)
    except (AttributeError, ValueError):
        raise ValidationError(f"Festività non valida (MM-DD): {value!r}")
    if not 1 <= month <= 12 or not 1 <= day <= calendar.monthrange(_REFERENCE_YEAR, month)[1]:
        raise ValidationError(f"Festività non valida (MM-DD): {value!r}")
    return month, day
