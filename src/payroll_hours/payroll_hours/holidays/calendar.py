"""Italian holiday calendar.

Fixed-date national holidays come from an injectable ``MM-DD`` table; Easter
Sunday and Easter Monday are computed per year. Sundays are not part of the
table: ``is_pay_holiday`` adds them for payroll purposes.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable

from ..common.validators import require_month_day

ITALIAN_FIXED_HOLIDAYS: tuple[str, ...] = (
    "01-01",  # Capodanno
    "01-06",  # Epifania
    "04-25",  # Liberazione
    "05-01",  # Festa del lavoro
    "06-02",  # Festa della Repubblica
    "08-15",  # Ferragosto
    "11-01",  # Ognissanti
    "12-08",  # Immacolata
    "12-25",  # Natale
    "12-26",  # Santo Stefano
)

SUNDAY = 6


def easter_sunday(year: int) -> date:
    """Anonymous Gregorian algorithm (Gauss / Meeus-Jones-Butcher)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = ((h + l - 7 * m + 114) % 31) + 1
    return date(year, month, day)


def easter_monday(year: int) -> date:
    return easter_sunday(year) + timedelta(days=1)


class HolidayCalendar:
    def __init__(self, fixed_holidays: Iterable[str] = ITALIAN_FIXED_HOLIDAYS):
        self._fixed = frozenset(require_month_day(v) for v in fixed_holidays)

    def is_holiday(self, day: date) -> bool:
        """Fixed table or Easter/Easter Monday of ``day.year``. Sundays excluded."""
        if (day.month, day.day) in self._fixed:
            return True
        return day in (easter_sunday(day.year), easter_monday(day.year))

    def is_pay_holiday(self, day: date) -> bool:
        """Holiday for pay purposes: calendar holiday or any Sunday."""
        return self.is_holiday(day) or day.weekday() == SUNDAY

    def holidays_for_year(self, year: int) -> list[date]:
        days = set()
        for month, day in self._fixed:
            try:
                days.add(date(year, month, day))
            except ValueError:
                # e.g. 02-29 outside leap years
                continue
        days.add(easter_sunday(year))
        days.add(easter_monday(year))
        return sorted(days)
