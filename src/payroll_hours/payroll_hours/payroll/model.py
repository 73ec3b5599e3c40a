from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class DailyHours:
    """Ore di una giornata per voce paga.

    The buckets are not a partition of ``total``: on holidays ``holiday`` is the
    whole ``total`` and ``night`` is counted on top of it.
    """

    ordinary: float = 0.0
    overtime: float = 0.0
    night: float = 0.0
    holiday: float = 0.0
    total: float = 0.0
    break_minutes: int = 0

    @classmethod
    def zero(cls) -> "DailyHours":
        return cls()


@dataclass(frozen=True)
class PayrollRecord:
    """One row per (employee, day) of the period."""

    user_id: str
    employee_code: str
    first_name: str
    last_name: str
    work_date: date
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    hours: DailyHours
    leave_code: Optional[str] = None
    notes: list[str] = field(default_factory=list)
    contract_type: Optional[str] = None
    contract_hours_week: Optional[float] = None
    hourly_rate_base: Optional[float] = None
    hourly_rate_extra: Optional[float] = None
    hourly_rate_holiday: Optional[float] = None
    hourly_rate_night: Optional[float] = None


@dataclass(frozen=True)
class PayrollSummary:
    user_id: str
    employee_code: str
    first_name: str
    last_name: str
    total_ordinary: float = 0.0
    total_overtime: float = 0.0
    total_night: float = 0.0
    total_holiday: float = 0.0
    total_hours: float = 0.0
    total_leave_days: int = 0
    leave_summary: dict[str, int] = field(default_factory=dict)
    estimated_cost: float = 0.0


@dataclass(frozen=True)
class PayrollReport:
    records: list[PayrollRecord]
    summaries: list[PayrollSummary]
    warnings: list[str]
