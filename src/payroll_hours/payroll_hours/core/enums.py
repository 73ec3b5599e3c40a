from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Tipo di timbratura registrata dal terminale presenze."""

    IN = "IN"
    OUT = "OUT"
    BREAK_START = "BREAK_START"
    BREAK_END = "BREAK_END"


class LeaveStatus(str, Enum):
    """Stato della richiesta di assenza (solo APPROVED entra nelle paghe)."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class AnomalyStatus(str, Enum):
    """Stato di un'anomalia presenze (solo PENDING genera avvisi)."""

    PENDING = "PENDING"
    RESOLVED = "RESOLVED"
