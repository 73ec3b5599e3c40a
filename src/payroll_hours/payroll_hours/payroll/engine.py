from __future__ import annotations

import logging
from collections import defaultdict
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.anomalies import AnomalyIndex, annotate, build_anomaly_index
from ..attendance.model import AnomalyFlag, PunchEvent
from ..attendance.reconstructor import first_clock_in, last_clock_out
from ..common.datetime_utils import month_days
from ..core.constants import EMPLOYEE_CODE_WIDTH
from ..employees.model import Employee
from ..leave.model import LeaveInterval
from ..leave.overlay import LeaveIndex, build_leave_index, leave_code_for
from .calculator.base import HourCalculator
from .calculator.standard_calculator import StandardHourCalculator
from .model import DailyHours, PayrollRecord, PayrollReport, PayrollSummary
from .rates import RateMultipliers, contract_hours_day, effective_rates, estimated_cost, optional_amount

logger = logging.getLogger(__name__)

PunchIndex = dict[tuple[str, date], list[PunchEvent]]


def index_punches(punches: Iterable[PunchEvent]) -> PunchIndex:
    """Group punches by (user_id, calendar day of the punch), ordered by time."""
    index: defaultdict[tuple[str, date], list[PunchEvent]] = defaultdict(list)
    for p in punches:
        index[(p.user_id, p.work_date)].append(p)
    return {key: sorted(day, key=lambda p: p.timestamp) for key, day in index.items()}


def select_roster(roster: Iterable[Employee], venue_id: Optional[str] = None) -> list[Employee]:
    """Active, portal-enabled employees (of the venue, if given) by surname then name."""
    selected = [
        e
        for e in roster
        if e.is_active and e.portal_enabled and (venue_id is None or e.venue_id == venue_id)
    ]
    return sorted(selected, key=lambda e: (e.last_name, e.first_name))


def employee_code(position: int) -> str:
    """Run-local code from roster position (1 -> "001"). Not a stable identifier."""
    return str(position).zfill(EMPLOYEE_CODE_WIDTH)


@dataclass(frozen=True)
class _DayIndexes:
    punches: PunchIndex
    leaves: LeaveIndex
    anomalies: AnomalyIndex


@dataclass(frozen=True)
class _EmployeeResult:
    records: list[PayrollRecord]
    summary: PayrollSummary
    warnings: list[str]


class PayrollAggregator:
    """Builds the monthly payroll report from pre-fetched data.

    Pure computation: inputs are never mutated and each employee is processed
    independently, so ``max_workers > 1`` spreads employees over a thread pool
    without changing the output.
    """

    def __init__(
        self,
        calculator: Optional[HourCalculator] = None,
        *,
        multipliers: Optional[RateMultipliers] = None,
        max_workers: Optional[int] = None,
    ):
        self._calculator = calculator or StandardHourCalculator()
        self._multipliers = multipliers or RateMultipliers()
        self._max_workers = max_workers

    def generate(
        self,
        month: int,
        year: int,
        *,
        roster: Sequence[Employee],
        punches: Iterable[PunchEvent] = (),
        leaves: Iterable[LeaveInterval] = (),
        anomalies: Iterable[AnomalyFlag] = (),
        venue_id: Optional[str] = None,
    ) -> PayrollReport:
        days = month_days(year, month)
        employees = select_roster(roster, venue_id)
        indexes = _DayIndexes(
            punches=index_punches(punches),
            leaves=build_leave_index(leaves, days[0], days[-1]),
            anomalies=build_anomaly_index(anomalies),
        )

        logger.info(
            "Payroll run %02d/%d: %d employees, %d days (venue=%s)",
            month, year, len(employees), len(days), venue_id or "-",
        )

        jobs = [(position, employee) for position, employee in enumerate(employees, start=1)]
        if self._max_workers and self._max_workers > 1 and len(jobs) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                results = list(pool.map(lambda job: self._process_employee(*job, days, indexes), jobs))
        else:
            results = [self._process_employee(position, employee, days, indexes) for position, employee in jobs]

        records: list[PayrollRecord] = []
        summaries: list[PayrollSummary] = []
        warnings: list[str] = []
        for result in results:
            records.extend(result.records)
            summaries.append(result.summary)
            warnings.extend(result.warnings)

        if warnings:
            logger.warning("Payroll run %02d/%d: %d days with unresolved anomalies", month, year, len(warnings))
        logger.info("Payroll run %02d/%d done: %d records", month, year, len(records))
        return PayrollReport(records=records, summaries=summaries, warnings=warnings)

    def _process_employee(
        self,
        position: int,
        employee: Employee,
        days: Sequence[date],
        indexes: _DayIndexes,
    ) -> _EmployeeResult:
        code = employee_code(position)
        hours_day = contract_hours_day(employee.rates.contract_hours_week)

        records: list[PayrollRecord] = []
        warnings: list[str] = []
        totals = defaultdict(float)
        leave_summary: dict[str, int] = {}

        for day in days:
            punches = indexes.punches.get((employee.user_id, day), [])
            leave_code = leave_code_for(indexes.leaves, employee.user_id, day)

            notes, warning = annotate(indexes.anomalies, employee, day)
            if warning:
                warnings.append(warning)

            if leave_code:
                hours = DailyHours.zero()
                leave_summary[leave_code] = leave_summary.get(leave_code, 0) + 1
            elif punches:
                hours = self._calculator.daily_hours(punches, day, hours_day)
                totals["ordinary"] += hours.ordinary
                totals["overtime"] += hours.overtime
                totals["night"] += hours.night
                totals["holiday"] += hours.holiday
                totals["total"] += hours.total
            else:
                hours = DailyHours.zero()

            records.append(self._record(employee, code, day, punches, hours, leave_code, notes))

        cost = estimated_cost(
            ordinary=totals["ordinary"],
            overtime=totals["overtime"],
            holiday=totals["holiday"],
            night=totals["night"],
            rates=effective_rates(employee.rates, self._multipliers),
        )
        summary = PayrollSummary(
            user_id=employee.user_id,
            employee_code=code,
            first_name=employee.first_name,
            last_name=employee.last_name,
            total_ordinary=totals["ordinary"],
            total_overtime=totals["overtime"],
            total_night=totals["night"],
            total_holiday=totals["holiday"],
            total_hours=totals["total"],
            total_leave_days=sum(leave_summary.values()),
            leave_summary=leave_summary,
            estimated_cost=cost,
        )
        logger.debug(
            "Employee %s (%s): %.2fh worked, %d leave days, cost %.2f",
            code, employee.full_name, summary.total_hours, summary.total_leave_days, cost,
        )
        return _EmployeeResult(records=records, summary=summary, warnings=warnings)

    @staticmethod
    def _record(
        employee: Employee,
        code: str,
        day: date,
        punches: Sequence[PunchEvent],
        hours: DailyHours,
        leave_code: Optional[str],
        notes: list[str],
    ) -> PayrollRecord:
        rates = employee.rates
        return PayrollRecord(
            user_id=employee.user_id,
            employee_code=code,
            first_name=employee.first_name,
            last_name=employee.last_name,
            work_date=day,
            clock_in=first_clock_in(punches),
            clock_out=last_clock_out(punches),
            hours=hours,
            leave_code=leave_code,
            notes=notes,
            contract_type=employee.contract_type,
            contract_hours_week=optional_amount(rates.contract_hours_week),
            hourly_rate_base=optional_amount(rates.hourly_rate_base),
            hourly_rate_extra=optional_amount(rates.hourly_rate_extra),
            hourly_rate_holiday=optional_amount(rates.hourly_rate_holiday),
            hourly_rate_night=optional_amount(rates.hourly_rate_night),
        )
