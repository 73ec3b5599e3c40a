from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveInterval


class LeaveRepository(Protocol):
    def list_leaves(
        self,
        *,
        start_date: date,
        end_date: date,
        status: LeaveStatus,
    ) -> Sequence[LeaveInterval]:
        """Leaves in ``status`` overlapping [start_date, end_date]."""

        raise NotImplementedError
