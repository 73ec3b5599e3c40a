from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import minutes_between
from ..core.enums import PunchType


@dataclass(frozen=True)
class PunchEvent:
    """Timbratura grezza (read-only, fornita dal sistema presenze)."""

    user_id: str
    punch_type: PunchType
    timestamp: datetime
    venue_id: Optional[str] = None

    @property
    def work_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class AnomalyFlag:
    """Anomalia presenze non risolta, solo informativa."""

    user_id: str
    date: date
    anomaly_type: str


@dataclass(frozen=True)
class WorkedSpan:
    """Single span reconstructed from one day of punches."""

    start: datetime
    end: datetime
    break_minutes: int

    @property
    def worked_minutes(self) -> int:
        return max(minutes_between(self.start, self.end) - self.break_minutes, 0)

    @property
    def total_hours(self) -> float:
        return self.worked_minutes / 60
