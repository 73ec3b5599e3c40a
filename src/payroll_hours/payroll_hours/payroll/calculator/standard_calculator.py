from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ...attendance.model import PunchEvent
from ...attendance.night import night_hours
from ...attendance.reconstructor import reconstruct_shift
from ...holidays.calendar import HolidayCalendar
from ..model import DailyHours
from .base import HourCalculator


class StandardHourCalculator(HourCalculator):
    """Standard rule: first IN to last OUT minus breaks, split into buckets.

    Non-holiday days: ordinary up to the daily contract hours (less night
    hours), overtime beyond it. Holidays and Sundays: everything is holiday.
    Night hours are reported alongside in both cases.
    """

    def __init__(self, calendar: Optional[HolidayCalendar] = None):
        self._calendar = calendar or HolidayCalendar()

    @staticmethod
    def bucketize(
        total_hours: float,
        night: float,
        is_holiday: bool,
        contract_hours_day: float,
        *,
        break_minutes: int = 0,
    ) -> DailyHours:
        ordinary = min(total_hours, contract_hours_day)
        overtime = max(0.0, total_hours - contract_hours_day)

        if is_holiday:
            # holiday takes the whole total, night is not subtracted from it
            return DailyHours(
                ordinary=0.0,
                overtime=0.0,
                night=night,
                holiday=total_hours,
                total=total_hours,
                break_minutes=break_minutes,
            )
        return DailyHours(
            ordinary=max(0.0, ordinary - night),
            overtime=overtime,
            night=night,
            holiday=0.0,
            total=total_hours,
            break_minutes=break_minutes,
        )

    def daily_hours(self, punches: Sequence[PunchEvent], work_date: date, contract_hours_day: float) -> DailyHours:
        span = reconstruct_shift(punches)
        if span is None:
            return DailyHours.zero()

        return self.bucketize(
            span.total_hours,
            night_hours(span.start, span.end),
            self._calendar.is_pay_holiday(work_date),
            contract_hours_day,
            break_minutes=span.break_minutes,
        )
