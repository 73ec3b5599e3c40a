from __future__ import annotations

import logging
from typing import Optional

from ..attendance.repository import AnomalyRepository, PunchRepository
from ..common.datetime_utils import end_of_day, month_bounds, start_of_day
from ..common.validators import require_month, require_year
from ..core.enums import AnomalyStatus, LeaveStatus
from ..core.exceptions import DataLoadError
from ..employees.repository import EmployeeRepository
from ..leave.repository import LeaveRepository
from .engine import PayrollAggregator
from .model import PayrollReport

logger = logging.getLogger(__name__)


class PayrollReportService:
    """Use case: monthly payroll report (presenze per paghe).

    Loads roster, punches, approved leave and unresolved anomalies once each,
    then hands them to the aggregator. A failed load aborts the whole run.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        punches: PunchRepository,
        leaves: LeaveRepository,
        anomalies: AnomalyRepository,
        *,
        aggregator: Optional[PayrollAggregator] = None,
    ):
        self._employees = employees
        self._punches = punches
        self._leaves = leaves
        self._anomalies = anomalies
        self._aggregator = aggregator or PayrollAggregator()

    def generate(self, month: int, year: int, venue_id: Optional[str] = None) -> PayrollReport:
        month = require_month(month)
        year = require_year(year)
        first_day, last_day = month_bounds(year, month)

        try:
            roster = list(self._employees.list_payroll_roster(venue_id=venue_id))
            punches = list(
                self._punches.list_punches(start=start_of_day(first_day), end=end_of_day(last_day), venue_id=venue_id)
            )
            leaves = list(
                self._leaves.list_leaves(start_date=first_day, end_date=last_day, status=LeaveStatus.APPROVED)
            )
            anomalies = list(
                self._anomalies.list_anomalies(
                    start_date=first_day,
                    end_date=last_day,
                    status=AnomalyStatus.PENDING,
                    venue_id=venue_id,
                )
            )
        except Exception as exc:
            logger.exception("Payroll data load failed for %02d/%d", month, year)
            raise DataLoadError(f"Impossibile caricare i dati presenze per {month:02d}/{year}") from exc

        logger.debug(
            "Loaded %d employees, %d punches, %d leaves, %d anomalies",
            len(roster), len(punches), len(leaves), len(anomalies),
        )
        return self._aggregator.generate(
            month,
            year,
            roster=roster,
            punches=punches,
            leaves=leaves,
            anomalies=anomalies,
            venue_id=venue_id,
        )
