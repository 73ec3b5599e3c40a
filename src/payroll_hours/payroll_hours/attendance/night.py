from __future__ import annotations

from datetime import datetime, timedelta

from ..common.datetime_utils import as_utc
from ..core.constants import NIGHT_END_HOUR, NIGHT_START_HOUR

_ONE_MINUTE = timedelta(minutes=1)


def is_night_hour(hour: int, *, night_start_hour: int = NIGHT_START_HOUR, night_end_hour: int = NIGHT_END_HOUR) -> bool:
    return hour >= night_start_hour or hour < night_end_hour


def night_hours(
    start: datetime,
    end: datetime,
    *,
    night_start_hour: int = NIGHT_START_HOUR,
    night_end_hour: int = NIGHT_END_HOUR,
) -> float:
    """Hours of [start, end) that fall in the night band, at minute resolution.

    Walks the interval one minute at a time from ``start``; a minute is night
    when its wall-clock hour is >= 22 or < 6. Aware intervals are stepped in
    UTC and each minute is read back in the zone of ``start``.
    """
    zone = start.tzinfo
    night_minutes = 0
    current, stop = as_utc(start), as_utc(end)
    while current < stop:
        local = current.astimezone(zone) if zone is not None else current
        if is_night_hour(local.hour, night_start_hour=night_start_hour, night_end_hour=night_end_hour):
            night_minutes += 1
        current += _ONE_MINUTE
    return night_minutes / 60
