"""Pure reductions of attendance records into leave and overtime counts.

None of these functions touch a repository; callers pass the records they
already hold (typically one month of the ledger).
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..common.datetime_utils import in_month
from ..core.constants import DEFAULT_OVERTIME_UNIT_HOURS
from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceSummary


def filter_month(
    records: Iterable[AttendanceRecord],
    *,
    year: int,
    month: int,
    employee_id: Optional[str] = None,
) -> list[AttendanceRecord]:
    return [
        r
        for r in records
        if in_month(r.work_date, year, month) and (employee_id is None or r.employee_id == str(employee_id))
    ]


def count_status(records: Iterable[AttendanceRecord], status: AttendanceStatus) -> int:
    return sum(1 for r in records if r.status == status)


def leave_days(records: Iterable[AttendanceRecord]) -> float:
    """Absent counts a full day, Half-Day counts half."""
    total = 0.0
    for r in records:
        if r.status == AttendanceStatus.ABSENT:
            total += 1
        elif r.status == AttendanceStatus.HALF_DAY:
            total += 0.5
    return total


def holiday_worked_days(records: Iterable[AttendanceRecord]) -> int:
    return count_status(records, AttendanceStatus.HOLIDAY)


def overtime_shifts(records: Iterable[AttendanceRecord]) -> int:
    return sum(1 for r in records if r.is_overtime)


def overtime_hours(records: Iterable[AttendanceRecord], *, unit_hours: float = DEFAULT_OVERTIME_UNIT_HOURS) -> float:
    """Each overtime-flagged day is worth a fixed number of hours."""
    return overtime_shifts(records) * float(unit_hours)


def summarize(
    records: Iterable[AttendanceRecord],
    *,
    employee_id: str,
    year: int,
    month: int,
    overtime_unit_hours: float = DEFAULT_OVERTIME_UNIT_HOURS,
) -> AttendanceSummary:
    month_records = filter_month(records, year=year, month=month, employee_id=employee_id)
    return AttendanceSummary(
        employee_id=str(employee_id),
        year=int(year),
        month=int(month),
        present_days=count_status(month_records, AttendanceStatus.PRESENT),
        absent_days=count_status(month_records, AttendanceStatus.ABSENT),
        half_days=count_status(month_records, AttendanceStatus.HALF_DAY),
        holiday_worked_days=holiday_worked_days(month_records),
        overtime_shifts=overtime_shifts(month_records),
        leave_days=leave_days(month_records),
        overtime_hours=overtime_hours(month_records, unit_hours=overtime_unit_hours),
    )
