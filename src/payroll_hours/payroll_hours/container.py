from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.repository import AnomalyRepository, PunchRepository
from .employees.repository import EmployeeRepository
from .holidays.calendar import HolidayCalendar
from .leave.repository import LeaveRepository
from .payroll.calculator.standard_calculator import StandardHourCalculator
from .payroll.engine import PayrollAggregator
from .payroll.rates import RateMultipliers
from .payroll.service import PayrollReportService
from .settings import Settings


@dataclass(frozen=True)
class Container:
    settings: Settings

    calendar: HolidayCalendar
    calculator: StandardHourCalculator
    aggregator: PayrollAggregator

    payroll_report_service: PayrollReportService


def build_container(
    *,
    employees: EmployeeRepository,
    punches: PunchRepository,
    leaves: LeaveRepository,
    anomalies: AnomalyRepository,
    settings: Optional[Settings] = None,
) -> Container:
    settings = settings or Settings()

    calendar = HolidayCalendar(settings.fixed_holidays)
    calculator = StandardHourCalculator(calendar)
    aggregator = PayrollAggregator(
        calculator,
        multipliers=RateMultipliers(
            overtime=settings.overtime_multiplier,
            holiday=settings.holiday_multiplier,
            night=settings.night_multiplier,
        ),
        max_workers=settings.max_workers,
    )
    payroll_report_service = PayrollReportService(
        employees,
        punches,
        leaves,
        anomalies,
        aggregator=aggregator,
    )

    return Container(
        settings=settings,
        calendar=calendar,
        calculator=calculator,
        aggregator=aggregator,
        payroll_report_service=payroll_report_service,
    )
