from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime

from ..common.validators import non_negative
from ..core.constants import DEFAULT_STANDARD_HOURS


def month_key(year: int, month: int) -> str:
    return f"{int(year)}-{int(month)}"


def payroll_key(year: int, month: int, employee_id: str) -> str:
    return f"{month_key(year, month)}-{employee_id}"


@dataclass(frozen=True)
class PayrollInput:
    """Per-employee, per-month working set fed to the calculator."""

    employee_id: str
    monthly_salary: float
    leave_days: float = 0.0
    holiday_worked_days: float = 0.0
    extra_hours: float = 0.0
    standard_hours: float = DEFAULT_STANDARD_HOURS

    def normalized(self, *, default_standard_hours: float = DEFAULT_STANDARD_HOURS) -> "PayrollInput":
        """Clamp negatives to zero; a non-positive divisor falls back to the default."""

        standard_hours = non_negative(self.standard_hours) or float(default_standard_hours)
        return replace(
            self,
            employee_id=str(self.employee_id),
            monthly_salary=non_negative(self.monthly_salary),
            leave_days=non_negative(self.leave_days),
            holiday_worked_days=non_negative(self.holiday_worked_days),
            extra_hours=non_negative(self.extra_hours),
            standard_hours=standard_hours,
        )


@dataclass(frozen=True)
class PayrollResult:
    per_day_salary: float
    payable_days: float
    extra_days: float
    extra_pay: float
    final_total: float


@dataclass(frozen=True)
class ConfirmedPayroll:
    """A frozen payroll computation; wins over automatic recomputation."""

    year: int
    month: int
    input: PayrollInput
    result: PayrollResult
    confirmed_at: datetime

    @property
    def key(self) -> str:
        return payroll_key(self.year, self.month, self.input.employee_id)

    @property
    def employee_id(self) -> str:
        return self.input.employee_id

    @property
    def final_total(self) -> float:
        return self.result.final_total
