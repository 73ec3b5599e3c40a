from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class ContractRates:
    """Dati contrattuali usati per ore giornaliere e costo stimato.

    Any field may be missing; defaults are resolved in ``payroll.rates``.
    """

    contract_hours_week: Optional[float] = None
    hourly_rate_base: Optional[float] = None
    hourly_rate_extra: Optional[float] = None
    hourly_rate_holiday: Optional[float] = None
    hourly_rate_night: Optional[float] = None


@dataclass(frozen=True)
class Employee:
    """Domain entity: dipendente in anagrafica.

    Note: plain data object (no DB access code).
    """

    user_id: str
    first_name: str
    last_name: str
    contract_type: Optional[str] = None
    rates: ContractRates = field(default_factory=ContractRates)
    venue_id: Optional[str] = None
    is_active: bool = True
    portal_enabled: bool = True

    @property
    def full_name(self) -> str:
        return f"{self.last_name} {self.first_name}"
