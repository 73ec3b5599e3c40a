from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from ..employees.model import Employee
from .model import AnomalyFlag

AnomalyIndex = dict[tuple[str, date], list[str]]


def build_anomaly_index(anomalies: Iterable[AnomalyFlag]) -> AnomalyIndex:
    index: defaultdict[tuple[str, date], list[str]] = defaultdict(list)
    for a in anomalies:
        index[(a.user_id, a.date)].append(a.anomaly_type)
    return dict(index)


def annotate(index: AnomalyIndex, employee: Employee, day: date) -> tuple[list[str], Optional[str]]:
    """Return (record notes, batch warning) for unresolved anomalies of the day.

    Advisory only: hours are never changed here.
    """
    types = index.get((employee.user_id, day))
    if not types:
        return [], None
    note = f"Anomalie: {', '.join(types)}"
    warning = f"{employee.full_name}: anomalie non risolte il {day.strftime('%d/%m/%Y')}"
    return [note], warning
