from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Job role of a staff member."""

    BARISTA = "Barista"
    CHEF = "Chef"
    WAITER = "Waiter"
    MANAGER = "Manager"
    CLEANER = "Cleaner"


class EmployeeStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class AttendanceStatus(str, Enum):
    """Daily attendance status logged by the admin."""

    PRESENT = "Present"
    ABSENT = "Absent"
    HALF_DAY = "Half-Day"
    HOLIDAY = "Holiday"


class ExtraPayPolicy(str, Enum):
    """How holiday-worked days and overtime hours combine into extra pay.

    ADDITIVE sums both day-equivalents. HOLIDAY_PRECEDENCE applies only one
    rule: holiday-worked days when non-zero, otherwise overtime hours.
    """

    ADDITIVE = "additive"
    HOLIDAY_PRECEDENCE = "holiday_precedence"


class ReportKind(str, Enum):
    ATTENDANCE = "attendance"
    SALARY = "salary"
    LEAVES = "leaves"
    LEDGER = "ledger"
    TAX = "tax"
