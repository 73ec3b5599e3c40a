from __future__ import annotations

from datetime import date, datetime

import pytest

from payroll_hours.attendance.model import AnomalyFlag, PunchEvent
from payroll_hours.core.enums import AnomalyStatus, LeaveStatus, PunchType
from payroll_hours.core.exceptions import DataLoadError, ValidationError
from payroll_hours.employees.model import ContractRates, Employee
from payroll_hours.leave.model import LeaveInterval
from payroll_hours.payroll.service import PayrollReportService


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = employees
        self.last_args = None

    def list_payroll_roster(self, *, venue_id=None):
        self.last_args = {"venue_id": venue_id}
        return self._employees


class FakePunchRepo:
    def __init__(self, punches):
        self._punches = punches
        self.last_args = None

    def list_punches(self, *, start, end, venue_id=None):
        self.last_args = {"start": start, "end": end, "venue_id": venue_id}
        return [p for p in self._punches if start <= p.timestamp <= end]


class FakeLeaveRepo:
    def __init__(self, leaves):
        self._leaves = leaves
        self.last_args = None

    def list_leaves(self, *, start_date, end_date, status):
        self.last_args = {"start_date": start_date, "end_date": end_date, "status": status}
        return [lv for lv in self._leaves if lv.start_date <= end_date and lv.end_date >= start_date]


class FakeAnomalyRepo:
    def __init__(self, anomalies):
        self._anomalies = anomalies
        self.last_args = None

    def list_anomalies(self, *, start_date, end_date, status, venue_id=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "status": status, "venue_id": venue_id}
        return self._anomalies


class BrokenPunchRepo:
    def list_punches(self, *, start, end, venue_id=None):
        raise ConnectionError("db down")


def _service(employees=(), punches=(), leaves=(), anomalies=(), punch_repo=None):
    return PayrollReportService(
        FakeEmployeeRepo(list(employees)),
        punch_repo or FakePunchRepo(list(punches)),
        FakeLeaveRepo(list(leaves)),
        FakeAnomalyRepo(list(anomalies)),
    )


EMP = Employee(user_id="u1", first_name="Giulia", last_name="Conti", rates=ContractRates(hourly_rate_base=12))


def test_report_for_month_with_punches_leave_and_anomaly():
    punches = [
        PunchEvent(user_id="u1", punch_type=PunchType.IN, timestamp=datetime(2025, 4, 24, 9, 0)),
        PunchEvent(user_id="u1", punch_type=PunchType.BREAK_START, timestamp=datetime(2025, 4, 24, 13, 0)),
        PunchEvent(user_id="u1", punch_type=PunchType.BREAK_END, timestamp=datetime(2025, 4, 24, 13, 30)),
        PunchEvent(user_id="u1", punch_type=PunchType.OUT, timestamp=datetime(2025, 4, 24, 18, 0)),
        # previous month, filtered out by the repository
        PunchEvent(user_id="u1", punch_type=PunchType.IN, timestamp=datetime(2025, 3, 31, 9, 0)),
    ]
    leaves = [LeaveInterval(user_id="u1", start_date=date(2025, 4, 28), end_date=date(2025, 5, 2), leave_type_code="FE")]
    anomalies = [AnomalyFlag(user_id="u1", date=date(2025, 4, 24), anomaly_type="LATE_ARRIVAL")]

    report = _service([EMP], punches, leaves, anomalies).generate(4, 2025)

    assert len(report.records) == 30
    day = next(r for r in report.records if r.work_date == date(2025, 4, 24))
    assert day.hours.total == 8.5
    assert day.hours.ordinary == 8
    assert day.hours.overtime == 0.5
    assert day.hours.break_minutes == 30

    summary = report.summaries[0]
    assert summary.leave_summary == {"FE": 3}
    assert summary.estimated_cost == pytest.approx(8 * 12 + 0.5 * 15)
    assert report.warnings == ["Conti Giulia: anomalie non risolte il 24/04/2025"]


def test_service_forwards_range_status_and_venue():
    employees = FakeEmployeeRepo([])
    punches = FakePunchRepo([])
    leaves = FakeLeaveRepo([])
    anomalies = FakeAnomalyRepo([])
    svc = PayrollReportService(employees, punches, leaves, anomalies)

    svc.generate(2, 2024, venue_id="venue-1")

    assert employees.last_args == {"venue_id": "venue-1"}
    assert punches.last_args["start"] == datetime(2024, 2, 1, 0, 0)
    assert punches.last_args["end"].date() == date(2024, 2, 29)
    assert punches.last_args["end"].hour == 23
    assert punches.last_args["venue_id"] == "venue-1"
    assert leaves.last_args == {"start_date": date(2024, 2, 1), "end_date": date(2024, 2, 29), "status": LeaveStatus.APPROVED}
    assert anomalies.last_args["status"] == AnomalyStatus.PENDING
    assert anomalies.last_args["venue_id"] == "venue-1"


@pytest.mark.parametrize("month, year", [(0, 2024), (13, 2024), (5, 2019), (5, 2101), ("abc", 2024), (5, "abc"), (None, 2024)])
def test_invalid_period_is_rejected(month, year):
    with pytest.raises(ValidationError):
        _service().generate(month, year)


def test_failed_load_aborts_the_run():
    with pytest.raises(DataLoadError) as exc_info:
        _service([EMP], punch_repo=BrokenPunchRepo()).generate(3, 2024)

    assert isinstance(exc_info.value.__cause__, ConnectionError)
