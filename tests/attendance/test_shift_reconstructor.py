from datetime import datetime

from payroll_hours.attendance.model import PunchEvent
from payroll_hours.attendance.reconstructor import break_minutes, reconstruct_shift
from payroll_hours.core.enums import PunchType


def _p(kind: PunchType, hh: int, mm: int = 0, ss: int = 0) -> PunchEvent:
    return PunchEvent(user_id="u1", punch_type=kind, timestamp=datetime(2024, 3, 5, hh, mm, ss))


def test_single_shift_with_break():
    span = reconstruct_shift(
        [
            _p(PunchType.IN, 9),
            _p(PunchType.BREAK_START, 12),
            _p(PunchType.BREAK_END, 12, 30),
            _p(PunchType.OUT, 17),
        ]
    )

    assert span.start == datetime(2024, 3, 5, 9)
    assert span.end == datetime(2024, 3, 5, 17)
    assert span.break_minutes == 30
    assert span.worked_minutes == 450
    assert span.total_hours == 7.5


def test_multiple_in_out_pairs_collapse_to_one_span():
    span = reconstruct_shift(
        [
            _p(PunchType.IN, 8),
            _p(PunchType.OUT, 12),
            _p(PunchType.IN, 14),
            _p(PunchType.OUT, 18),
        ]
    )

    # the 12:00-14:00 gap is counted as worked time
    assert span.worked_minutes == 600


def test_missing_out_or_in_gives_none():
    assert reconstruct_shift([_p(PunchType.IN, 9)]) is None
    assert reconstruct_shift([_p(PunchType.OUT, 17)]) is None
    assert reconstruct_shift([]) is None


def test_unmatched_break_start_contributes_zero():
    punches = [
        _p(PunchType.IN, 9),
        _p(PunchType.BREAK_START, 12),
        _p(PunchType.OUT, 17),
    ]

    assert break_minutes(punches) == 0
    assert reconstruct_shift(punches).worked_minutes == 480


def test_break_end_before_start_is_not_matched():
    punches = [_p(PunchType.BREAK_END, 11), _p(PunchType.BREAK_START, 12)]

    assert break_minutes(punches) == 0


def test_break_matches_earliest_later_end():
    punches = [
        _p(PunchType.BREAK_START, 10),
        _p(PunchType.BREAK_END, 10, 15),
        _p(PunchType.BREAK_START, 13),
        _p(PunchType.BREAK_END, 13, 45),
    ]

    assert break_minutes(punches) == 15 + 45


def test_breaks_longer_than_span_floor_at_zero():
    span = reconstruct_shift(
        [
            _p(PunchType.IN, 9),
            _p(PunchType.OUT, 10),
            _p(PunchType.BREAK_START, 8),
            _p(PunchType.BREAK_END, 11),
        ]
    )

    assert span.worked_minutes == 0


def test_partial_minutes_are_dropped():
    span = reconstruct_shift([_p(PunchType.IN, 9, 0, 30), _p(PunchType.OUT, 17)])

    assert span.worked_minutes == 479
