from __future__ import annotations

import logging

from .attendance.repository import AnomalyRepository, PunchRepository
from .container import Container, build_container
from .employees.repository import EmployeeRepository
from .leave.repository import LeaveRepository
from .settings import Settings, load_settings

LOG_FORMAT = "[payroll-hours] %(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO), format=LOG_FORMAT)


def create_container(
    *,
    employees: EmployeeRepository,
    punches: PunchRepository,
    leaves: LeaveRepository,
    anomalies: AnomalyRepository,
) -> Container:
    """Entry point for the reporting layer: settings, logging and wiring."""
    settings = load_settings()
    configure_logging(settings)

    if settings.debug:
        logging.getLogger(__name__).debug(
            "settings loaded: holidays=%d max_workers=%s", len(settings.fixed_holidays), settings.max_workers
        )

    return build_container(
        employees=employees,
        punches=punches,
        leaves=leaves,
        anomalies=anomalies,
        settings=settings,
    )
