from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional

from ..attendance import aggregator
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import has_month_elapsed, now_local, today_local
from ..common.validators import require_month
from ..core.constants import CURRENCY_SYMBOL, DEFAULT_OVERTIME_UNIT_HOURS, FIRST_PAYROLL_YEAR, MONTH_NAMES
from ..core.exceptions import MonthLockedError, PolicyError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import ConfirmedPayroll, PayrollInput, PayrollResult
from .repository import PayrollRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PayrollView:
    """What the calculator screen shows for one (year, month, employee)."""

    year: int
    month: int
    input: PayrollInput
    result: PayrollResult
    confirmed: bool
    locked: bool
    confirmed_at: Optional[datetime] = None


def period_label(year: int, month: int) -> str:
    return f"{MONTH_NAMES[int(month) - 1]} {int(year)}"


class PayrollService:
    """Use case: compute, confirm and lock monthly payroll.

    Confirmed entries always take precedence over a fresh computation from the
    attendance ledger; a locked month refuses every payroll mutation.
    """

    def __init__(
        self,
        payrolls: PayrollRepository,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PayrollCalculator] = None,
        overtime_unit_hours: float = DEFAULT_OVERTIME_UNIT_HOURS,
    ):
        self._payrolls = payrolls
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardPayrollCalculator()
        self._overtime_unit_hours = float(overtime_unit_hours)

    @property
    def calculator(self) -> PayrollCalculator:
        return self._calculator

    def compute(self, data: PayrollInput) -> PayrollResult:
        return self._calculator.compute(data)

    def automatic_input(self, *, year: int, month: int, employee: Employee) -> PayrollInput:
        """Seed the calculator from the live ledger."""

        records = self._attendance.list_for_month(year=year, month=month, employee_id=employee.employee_id)
        summary = aggregator.summarize(
            records,
            employee_id=employee.employee_id,
            year=year,
            month=month,
            overtime_unit_hours=self._overtime_unit_hours,
        )
        return PayrollInput(
            employee_id=employee.employee_id,
            monthly_salary=employee.salary,
            leave_days=summary.leave_days,
            holiday_worked_days=summary.holiday_worked_days,
            extra_hours=summary.overtime_hours,
            standard_hours=self._calculator.default_standard_hours,
        )

    def open_calculator(self, *, year: int, month: int, employee_id: str) -> PayrollView:
        year, month = require_month(year, month)
        locked = self._payrolls.is_locked(year=year, month=month)

        confirmed = self._payrolls.get(year=year, month=month, employee_id=str(employee_id))
        if confirmed:
            return PayrollView(
                year=year,
                month=month,
                input=confirmed.input,
                result=confirmed.result,
                confirmed=True,
                locked=locked,
                confirmed_at=confirmed.confirmed_at,
            )

        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise ValidationError("Employee not found")

        data = self.automatic_input(year=year, month=month, employee=employee)
        return PayrollView(
            year=year,
            month=month,
            input=data,
            result=self.compute(data),
            confirmed=False,
            locked=locked,
        )

    def get(self, *, year: int, month: int, employee_id: str) -> Optional[ConfirmedPayroll]:
        return self._payrolls.get(year=year, month=month, employee_id=str(employee_id))

    def is_locked(self, *, year: int, month: int) -> bool:
        return self._payrolls.is_locked(year=year, month=month)

    def confirm(
        self,
        *,
        year: int,
        month: int,
        employee_id: str,
        data: PayrollInput,
        result: Optional[PayrollResult] = None,
        now: datetime | None = None,
    ) -> ConfirmedPayroll:
        """Write (or overwrite) the confirmed payroll with a fresh timestamp."""

        year, month = require_month(year, month)
        if self._payrolls.is_locked(year=year, month=month):
            logger.warning("Refused confirm for %s-%s employee=%s: month locked", year, month, employee_id)
            raise MonthLockedError(f"Payroll for {period_label(year, month)} is locked")

        data = replace(data, employee_id=str(employee_id)).normalized(
            default_standard_hours=self._calculator.default_standard_hours
        )
        confirmed = ConfirmedPayroll(
            year=year,
            month=month,
            input=data,
            result=result or self.compute(data),
            confirmed_at=now or now_local(),
        )
        self._payrolls.save(confirmed)
        logger.info(
            "Confirmed payroll %s final_total=%.2f",
            confirmed.key,
            confirmed.final_total,
        )
        return confirmed

    def lock_month(self, *, year: int, month: int, today: date | None = None) -> None:
        """Lock an elapsed month permanently. Locking twice is a no-op."""

        year, month = require_month(year, month)
        today = today or today_local()
        if not has_month_elapsed(year, month, today):
            logger.warning("Refused lock for %s-%s: month has not ended", year, month)
            raise PolicyError(f"{period_label(year, month)} hasn't ended yet")

        if self._payrolls.is_locked(year=year, month=month):
            return
        self._payrolls.lock(year=year, month=month)
        logger.info("Locked payroll month %s-%s", year, month)

    def resolve(self, *, year: int, month: int, employee: Employee) -> tuple[PayrollInput, PayrollResult, Optional[ConfirmedPayroll]]:
        """Confirmed values when present, otherwise a fresh automatic computation."""

        confirmed = self._payrolls.get(year=year, month=month, employee_id=employee.employee_id)
        if confirmed:
            return confirmed.input, confirmed.result, confirmed
        data = self.automatic_input(year=year, month=month, employee=employee)
        return data, self.compute(data), None

    def receipt_rows(self, *, year: int, month: int, employee_id: str) -> list[dict]:
        employee = self._employees.get_by_id(str(employee_id))
        if not employee:
            raise ValidationError("Employee not found")

        view = self.open_calculator(year=year, month=month, employee_id=employee_id)
        return [
            {"Desc": "Staff", "Val": employee.name},
            {"Desc": "Month", "Val": period_label(year, month)},
            {"Desc": "Base", "Val": f"{CURRENCY_SYMBOL}{view.input.monthly_salary:g}"},
            {"Desc": "Leaves", "Val": view.input.leave_days},
            {"Desc": "Extra Pay", "Val": f"{CURRENCY_SYMBOL}{view.result.extra_pay:.2f}"},
            {"Desc": "Final", "Val": f"{CURRENCY_SYMBOL}{view.result.final_total:.2f}"},
        ]


def available_periods(*, today: date | None = None) -> dict[int, list[int]]:
    """Selectable payroll/report periods: no month after the current one."""

    today = today or today_local()
    periods: dict[int, list[int]] = {}
    for year in range(FIRST_PAYROLL_YEAR, today.year + 1):
        last = 12 if year < today.year else today.month
        periods[year] = list(range(1, last + 1))
    return periods
