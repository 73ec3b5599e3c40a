from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import minutes_between
from ..core.enums import PunchType
from .model import PunchEvent, WorkedSpan


def _of_type(punches: Sequence[PunchEvent], punch_type: PunchType) -> list[PunchEvent]:
    return [p for p in punches if p.punch_type == punch_type]


def first_clock_in(punches: Sequence[PunchEvent]) -> Optional[datetime]:
    ins = _of_type(punches, PunchType.IN)
    return min(p.timestamp for p in ins) if ins else None


def last_clock_out(punches: Sequence[PunchEvent]) -> Optional[datetime]:
    outs = _of_type(punches, PunchType.OUT)
    return max(p.timestamp for p in outs) if outs else None


def break_minutes(punches: Sequence[PunchEvent]) -> int:
    """Sum of break durations.

    Each BREAK_START is matched with the earliest BREAK_END strictly after it.
    A BREAK_START without a later BREAK_END adds nothing. One BREAK_END can
    close more than one BREAK_START.
    """
    ends = [p.timestamp for p in _of_type(punches, PunchType.BREAK_END)]
    total = 0
    for start in _of_type(punches, PunchType.BREAK_START):
        later = [t for t in ends if t > start.timestamp]
        if later:
            total += minutes_between(start.timestamp, min(later))
    return total


def reconstruct_shift(punches: Sequence[PunchEvent]) -> Optional[WorkedSpan]:
    """Collapse a day of punches into one span: first IN to last OUT.

    Multiple IN/OUT pairs are not paired per shift, so a gap between two
    separate shifts counts as worked time. Returns None without an IN or an OUT.
    """
    start = first_clock_in(punches)
    end = last_clock_out(punches)
    if start is None or end is None:
        return None
    return WorkedSpan(start=start, end=end, break_minutes=break_minutes(punches))
