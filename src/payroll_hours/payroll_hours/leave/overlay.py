from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import days_between
from .model import LeaveInterval

LeaveIndex = dict[tuple[str, date], str]


def build_leave_index(leaves: Iterable[LeaveInterval], range_start: date, range_end: date) -> LeaveIndex:
    """Expand leave intervals into one entry per (user_id, day) inside the range.

    Intervals are clipped to [range_start, range_end]. When two intervals of
    the same employee overlap, the later one in ``leaves`` wins.
    """
    index: LeaveIndex = {}
    for leave in leaves:
        first = max(leave.start_date, range_start)
        last = min(leave.end_date, range_end)
        for day in days_between(first, last):
            index[(leave.user_id, day)] = leave.leave_type_code
    return index


def leave_code_for(index: LeaveIndex, user_id: str, day: date) -> Optional[str]:
    """Leave code covering the day, if any. A code overrides the day's punches."""
    return index.get((user_id, day))
