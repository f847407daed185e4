from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..common.validators import non_negative, require_non_empty
from ..core.enums import AttendanceStatus, EmployeeStatus, Role
from ..core.exceptions import ValidationError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_WORKING_STATUSES = {AttendanceStatus.PRESENT, AttendanceStatus.HALF_DAY}


def _as_role(value) -> Role:
    if isinstance(value, Role):
        return value
    try:
        return Role(value)
    except ValueError:
        raise ValidationError(f"Unknown role: {value!r}") from None


def _as_employee_status(value) -> EmployeeStatus:
    if isinstance(value, EmployeeStatus):
        return value
    try:
        return EmployeeStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown employee status: {value!r}") from None


def next_employee_id(employees: Sequence[Employee]) -> str:
    """Highest numeric id plus one; non-numeric ids are ignored."""

    numeric = [int(e.employee_id) for e in employees if e.employee_id.isascii() and e.employee_id.isdigit()]
    return str(max(numeric, default=0) + 1)


class EmployeeService:
    """Use case: manage the roster (admin)."""

    def __init__(self, employees: EmployeeRepository, attendance: Optional[AttendanceRepository] = None):
        self._employees = employees
        self._attendance = attendance

    def list_employees(self, *, search: Optional[str] = None) -> Sequence[Employee]:
        employees = list(self._employees.list_all())
        term = (search or "").strip().lower()
        if not term:
            return employees
        return [e for e in employees if term in e.name.lower() or term in e.role.value.lower()]

    def get(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_id(str(employee_id))

    def next_id(self) -> str:
        return next_employee_id(self._employees.list_all())

    def register(
        self,
        *,
        name: str,
        role,
        salary,
        join_date: Optional[date] = None,
        employee_id: Optional[str] = None,
        today: date | None = None,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        if employee_id is not None:
            employee_id = require_non_empty(employee_id, "Employee id")
            if self._employees.get_by_id(employee_id):
                raise ValidationError(f"Employee id {employee_id} already exists")
        else:
            employee_id = self.next_id()

        employee = Employee(
            employee_id=employee_id,
            name=name,
            role=_as_role(role),
            salary=non_negative(salary),
            status=EmployeeStatus.ACTIVE,
            join_date=join_date or today or today_local(),
        )
        self._employees.add(employee)
        logger.info("Registered employee %s (%s)", employee.employee_id, employee.name)
        return employee

    def edit(
        self,
        employee_id: str,
        *,
        name: Optional[str] = None,
        role=None,
        salary=None,
        status=None,
        join_date: Optional[date] = None,
    ) -> Employee:
        current = self._employees.get_by_id(str(employee_id))
        if not current:
            raise ValidationError("Employee not found")

        updated = replace(
            current,
            name=require_non_empty(name, "Name") if name is not None else current.name,
            role=_as_role(role) if role is not None else current.role,
            salary=non_negative(salary) if salary is not None else current.salary,
            status=_as_employee_status(status) if status is not None else current.status,
            join_date=join_date or current.join_date,
        )
        if not self._employees.update(updated):
            raise ValidationError("Employee update failed")
        logger.info("Updated employee %s", updated.employee_id)
        return updated

    def delete(self, employee_id: str) -> None:
        """Remove from the roster only; attendance and payroll history stay as-is."""

        if not self._employees.delete_by_id(str(employee_id)):
            raise ValidationError("Employee not found")
        logger.info("Deleted employee %s", employee_id)

    def today_status(self, employee_id: str, *, today: date | None = None) -> EmployeeStatus:
        """Active when today's record is a working day, Inactive otherwise."""

        if self._attendance is None:
            return EmployeeStatus.INACTIVE
        rec = self._attendance.get_for_employee_and_date(str(employee_id), today or today_local())
        if rec and rec.status in _WORKING_STATUSES:
            return EmployeeStatus.ACTIVE
        return EmployeeStatus.INACTIVE
