from datetime import date

from payroll_hours.leave.model import LeaveInterval
from payroll_hours.leave.overlay import build_leave_index, leave_code_for

MARCH_START = date(2024, 3, 1)
MARCH_END = date(2024, 3, 31)


def test_leave_is_clipped_to_range():
    index = build_leave_index(
        [LeaveInterval(user_id="u1", start_date=date(2024, 2, 27), end_date=date(2024, 3, 2), leave_type_code="FE")],
        MARCH_START,
        MARCH_END,
    )

    assert sorted(index) == [("u1", date(2024, 3, 1)), ("u1", date(2024, 3, 2))]


def test_leave_bounds_are_inclusive():
    index = build_leave_index(
        [LeaveInterval(user_id="u1", start_date=date(2024, 3, 10), end_date=date(2024, 3, 12), leave_type_code="MA")],
        MARCH_START,
        MARCH_END,
    )

    assert leave_code_for(index, "u1", date(2024, 3, 9)) is None
    assert leave_code_for(index, "u1", date(2024, 3, 10)) == "MA"
    assert leave_code_for(index, "u1", date(2024, 3, 12)) == "MA"
    assert leave_code_for(index, "u1", date(2024, 3, 13)) is None
    assert leave_code_for(index, "u2", date(2024, 3, 10)) is None


def test_overlapping_leaves_later_wins():
    index = build_leave_index(
        [
            LeaveInterval(user_id="u1", start_date=date(2024, 3, 1), end_date=date(2024, 3, 5), leave_type_code="FE"),
            LeaveInterval(user_id="u1", start_date=date(2024, 3, 4), end_date=date(2024, 3, 4), leave_type_code="ROL"),
        ],
        MARCH_START,
        MARCH_END,
    )

    assert leave_code_for(index, "u1", date(2024, 3, 3)) == "FE"
    assert leave_code_for(index, "u1", date(2024, 3, 4)) == "ROL"


def test_leave_outside_range_is_ignored():
    index = build_leave_index(
        [LeaveInterval(user_id="u1", start_date=date(2024, 4, 1), end_date=date(2024, 4, 3), leave_type_code="FE")],
        MARCH_START,
        MARCH_END,
    )

    assert index == {}
