from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ConfirmedPayroll


class PayrollRepository(Protocol):
    """Confirmed payrolls per (year, month, employee) and month-level locks."""

    def get(self, *, year: int, month: int, employee_id: str) -> Optional[ConfirmedPayroll]:
        raise NotImplementedError

    def save(self, confirmed: ConfirmedPayroll) -> None:
        """Insert or overwrite the entry under its key."""

        raise NotImplementedError

    def list_for_month(self, *, year: int, month: int) -> Sequence[ConfirmedPayroll]:
        raise NotImplementedError

    def is_locked(self, *, year: int, month: int) -> bool:
        raise NotImplementedError

    def lock(self, *, year: int, month: int) -> None:
        raise NotImplementedError
