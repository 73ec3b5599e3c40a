from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Roster source.

    Note (DIP): the payroll service depends on this interface, never on a concrete store.
    """

    def list_payroll_roster(self, *, venue_id: Optional[str] = None) -> Sequence[Employee]:
        """Active, portal-enabled employees, optionally scoped to a venue."""

        raise NotImplementedError
