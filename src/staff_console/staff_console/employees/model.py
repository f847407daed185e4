from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import EmployeeStatus, Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: a staff member on the roster.

    Note: Plain data object, no storage access.
    """

    employee_id: str
    name: str
    role: Role
    salary: float
    status: EmployeeStatus
    join_date: date
