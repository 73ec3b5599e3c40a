from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LeaveInterval:
    """Assenza approvata (FE, MA, ROL, ...), estremi inclusi."""

    user_id: str
    start_date: date
    end_date: date
    leave_type_code: str
