from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Sequence

from ...attendance.model import PunchEvent
from ..model import DailyHours


class HourCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll hours)."""

    @abstractmethod
    def daily_hours(self, punches: Sequence[PunchEvent], work_date: date, contract_hours_day: float) -> DailyHours:
        raise NotImplementedError
