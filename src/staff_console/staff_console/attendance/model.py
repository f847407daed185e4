from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one logged attendance fact for (employee, date)."""

    attendance_id: str
    employee_id: str
    work_date: date
    status: AttendanceStatus
    is_overtime: bool = False


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: one employee's month reduced to counts."""

    employee_id: str
    year: int
    month: int
    present_days: int = 0
    absent_days: int = 0
    half_days: int = 0
    holiday_worked_days: int = 0
    overtime_shifts: int = 0
    leave_days: float = 0.0
    overtime_hours: float = 0.0
