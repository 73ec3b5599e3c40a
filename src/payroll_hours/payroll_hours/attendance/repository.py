from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AnomalyStatus
from .model import AnomalyFlag, PunchEvent


class PunchRepository(Protocol):
    """Sorgente timbrature (DIP: il servizio dipende da questa interfaccia)."""

    def list_punches(
        self,
        *,
        start: datetime,
        end: datetime,
        venue_id: Optional[str] = None,
    ) -> Sequence[PunchEvent]:
        """Punches with start <= timestamp <= end, ordered by timestamp."""

        raise NotImplementedError


class AnomalyRepository(Protocol):
    def list_anomalies(
        self,
        *,
        start_date: date,
        end_date: date,
        status: AnomalyStatus,
        venue_id: Optional[str] = None,
    ) -> Sequence[AnomalyFlag]:
        raise NotImplementedError
