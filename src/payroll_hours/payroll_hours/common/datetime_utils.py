from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone


def month_bounds(year: int, month: int) -> tuple[date, date]:
    """First and last calendar day of a month."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)


def month_days(year: int, month: int) -> list[date]:
    first, last = month_bounds(year, month)
    return days_between(first, last)


def days_between(start: date, end: date) -> list[date]:
    """Every day in [start, end], both ends included. Empty if end < start."""
    days = []
    current = start
    while current <= end:
        days.append(current)
        current += timedelta(days=1)
    return days


def start_of_day(value: date) -> datetime:
    return datetime.combine(value, time.min)


def end_of_day(value: date) -> datetime:
    return datetime.combine(value, time.max)


def as_utc(value: datetime) -> datetime:
    """Aware datetimes moved to UTC; naive ones are returned unchanged."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole elapsed minutes from start to end (partial minutes are dropped).

    Aware values are compared in UTC, so a DST change does not add or remove
    an hour.
    """
    return int((as_utc(end) - as_utc(start)).total_seconds() // 60)
