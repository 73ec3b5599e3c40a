"""Contract hours and hourly rates.

Missing (or zero) values fall back to defaults: 8 contract hours a day, and
overtime/holiday/night rates derived from the base rate with fixed
multipliers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import (
    DEFAULT_CONTRACT_HOURS_DAY,
    DEFAULT_HOLIDAY_MULTIPLIER,
    DEFAULT_NIGHT_MULTIPLIER,
    DEFAULT_OVERTIME_MULTIPLIER,
    WORKING_DAYS_PER_WEEK,
)
from ..employees.model import ContractRates


@dataclass(frozen=True)
class RateMultipliers:
    overtime: float = DEFAULT_OVERTIME_MULTIPLIER
    holiday: float = DEFAULT_HOLIDAY_MULTIPLIER
    night: float = DEFAULT_NIGHT_MULTIPLIER


@dataclass(frozen=True)
class EffectiveRates:
    base: float
    extra: float
    holiday: float
    night: float


def optional_amount(value) -> Optional[float]:
    return float(value) if value else None


def contract_hours_day(contract_hours_week) -> float:
    """Weekly contract hours spread over a six-day week, 8h when unset."""
    weekly = optional_amount(contract_hours_week)
    if weekly is None:
        return float(DEFAULT_CONTRACT_HOURS_DAY)
    return weekly / WORKING_DAYS_PER_WEEK


def effective_rates(rates: ContractRates, multipliers: Optional[RateMultipliers] = None) -> EffectiveRates:
    multipliers = multipliers or RateMultipliers()
    base = optional_amount(rates.hourly_rate_base) or 0.0
    extra = optional_amount(rates.hourly_rate_extra)
    holiday = optional_amount(rates.hourly_rate_holiday)
    night = optional_amount(rates.hourly_rate_night)
    return EffectiveRates(
        base=base,
        extra=extra if extra is not None else base * multipliers.overtime,
        holiday=holiday if holiday is not None else base * multipliers.holiday,
        night=night if night is not None else base * multipliers.night,
    )


def estimated_cost(
    *,
    ordinary: float,
    overtime: float,
    holiday: float,
    night: float,
    rates: EffectiveRates,
) -> float:
    return ordinary * rates.base + overtime * rates.extra + holiday * rates.holiday + night * rates.night
