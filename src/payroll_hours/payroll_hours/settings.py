from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from config import get_settings_module

from .core.constants import DEFAULT_HOLIDAY_MULTIPLIER, DEFAULT_NIGHT_MULTIPLIER, DEFAULT_OVERTIME_MULTIPLIER
from .holidays.calendar import ITALIAN_FIXED_HOLIDAYS


@dataclass(frozen=True)
class Settings:
    debug: bool = False
    log_level: str = "INFO"
    fixed_holidays: tuple[str, ...] = ITALIAN_FIXED_HOLIDAYS
    overtime_multiplier: float = DEFAULT_OVERTIME_MULTIPLIER
    holiday_multiplier: float = DEFAULT_HOLIDAY_MULTIPLIER
    night_multiplier: float = DEFAULT_NIGHT_MULTIPLIER
    max_workers: Optional[int] = None


def load_settings(module_name: Optional[str] = None) -> Settings:
    """Read the active settings module (APP_ENV) after loading ``.env``."""
    load_dotenv(override=False)
    settings = importlib.import_module(module_name or get_settings_module())

    debug = bool(getattr(settings, "DEBUG", False))
    max_workers = getattr(settings, "MAX_WORKERS", None)
    return Settings(
        debug=debug,
        log_level=str(getattr(settings, "LOG_LEVEL", "DEBUG" if debug else "INFO")).upper(),
        fixed_holidays=tuple(getattr(settings, "FIXED_HOLIDAYS", None) or ITALIAN_FIXED_HOLIDAYS),
        overtime_multiplier=float(getattr(settings, "OVERTIME_RATE_MULTIPLIER", DEFAULT_OVERTIME_MULTIPLIER)),
        holiday_multiplier=float(getattr(settings, "HOLIDAY_RATE_MULTIPLIER", DEFAULT_HOLIDAY_MULTIPLIER)),
        night_multiplier=float(getattr(settings, "NIGHT_RATE_MULTIPLIER", DEFAULT_NIGHT_MULTIPLIER)),
        max_workers=int(max_workers) if max_workers else None,
    )

