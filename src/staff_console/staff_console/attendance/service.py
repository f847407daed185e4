from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import first_of_month, is_before_current_month, today_local
from ..core.enums import AttendanceStatus
from ..core.exceptions import PolicyError, ValidationError
from ..employees.model import Employee
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

# Statuses that cannot carry an overtime flag.
_NO_OVERTIME = {AttendanceStatus.ABSENT, AttendanceStatus.HOLIDAY}


def _as_status(value) -> AttendanceStatus:
    if isinstance(value, AttendanceStatus):
        return value
    try:
        return AttendanceStatus(value)
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value!r}") from None


class AttendanceService:
    """Attendance ledger: one record per (employee, date) with toggle semantics.

    The status/overtime coupling lives here, on the write path, so every
    caller gets the same rules:

    - logging the status a day already has removes the record (toggle off);
    - Absent and Holiday clear the overtime flag;
    - switching overtime on forces the day to Present.
    """

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    @staticmethod
    def _new_id(employee_id: str, work_date: date) -> str:
        return f"att-{work_date.strftime('%Y%m%d')}-{employee_id}"

    def get_record(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(str(employee_id), work_date)

    def set_status(self, employee_id: str, work_date: date, status) -> Optional[AttendanceRecord]:
        """Log ``status`` for the day and return the resulting record (None when toggled off)."""

        status = _as_status(status)
        employee_id = str(employee_id)
        existing = self.get_record(employee_id, work_date)

        if existing and existing.status == status:
            self._attendance.delete(existing.attendance_id)
            logger.debug("Attendance toggled off: employee=%s date=%s", employee_id, work_date)
            return None

        if existing:
            updated = replace(
                existing,
                status=status,
                is_overtime=False if status in _NO_OVERTIME else existing.is_overtime,
            )
            self._attendance.update(updated)
            logger.debug("Attendance updated: employee=%s date=%s status=%s", employee_id, work_date, status.value)
            return updated

        created = AttendanceRecord(
            attendance_id=self._new_id(employee_id, work_date),
            employee_id=employee_id,
            work_date=work_date,
            status=status,
            is_overtime=False,
        )
        self._attendance.create(created)
        logger.debug("Attendance created: employee=%s date=%s status=%s", employee_id, work_date, status.value)
        return created

    def set_overtime(self, employee_id: str, work_date: date, on: bool) -> Optional[AttendanceRecord]:
        employee_id = str(employee_id)
        on = bool(on)
        existing = self.get_record(employee_id, work_date)

        if existing:
            updated = replace(
                existing,
                is_overtime=on,
                status=AttendanceStatus.PRESENT if on else existing.status,
            )
            self._attendance.update(updated)
            logger.debug("Overtime %s: employee=%s date=%s", "on" if on else "off", employee_id, work_date)
            return updated

        if not on:
            return None

        created = AttendanceRecord(
            attendance_id=self._new_id(employee_id, work_date),
            employee_id=employee_id,
            work_date=work_date,
            status=AttendanceStatus.PRESENT,
            is_overtime=True,
        )
        self._attendance.create(created)
        logger.debug("Overtime on (new record): employee=%s date=%s", employee_id, work_date)
        return created

    def toggle_overtime(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        existing = self.get_record(employee_id, work_date)
        return self.set_overtime(employee_id, work_date, not (existing and existing.is_overtime))

    def select_log_date(self, work_date: date, *, today: date | None = None) -> date:
        """Validate the active log date; months before the current one are locked."""

        today = today or today_local()
        if is_before_current_month(work_date, today):
            logger.warning("Refused log date %s (before %s)", work_date, first_of_month(today))
            raise PolicyError(
                f"Attendance before {first_of_month(today).strftime('%Y-%m-%d')} is locked"
            )
        return work_date

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_date(work_date)

    def day_sheet(self, work_date: date, employees: Sequence[Employee]) -> list[dict]:
        """One row per employee for the logging screen, logged or not."""

        by_employee = {r.employee_id: r for r in self.list_for_date(work_date)}
        rows = []
        for emp in employees:
            rec = by_employee.get(emp.employee_id)
            rows.append(
                {
                    "employee_id": emp.employee_id,
                    "name": emp.name,
                    "role": emp.role.value,
                    "date": work_date.strftime("%Y-%m-%d"),
                    "status": rec.status.value if rec else None,
                    "is_overtime": bool(rec and rec.is_overtime),
                }
            )
        return rows
