from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance import aggregator
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import today_local
from ..common.validators import require_month
from ..core.constants import (
    EMPLOYER_PF_RATE,
    HIGH_ABSENTEEISM_DAYS,
    HIGH_RISK_LEAVE_DAYS,
    MODERATE_ABSENTEEISM_DAYS,
    MODERATE_RISK_LEAVE_DAYS,
    PROFESSIONAL_TAX_RATE,
    SERVICE_TAX_RATE,
)
from ..core.enums import AttendanceStatus, ReportKind
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.service import PayrollService

REPORT_TITLES = {
    ReportKind.ATTENDANCE: "Attendance Summary",
    ReportKind.SALARY: "Salary Expenditure",
    ReportKind.LEAVES: "Leave Patterns",
    ReportKind.LEDGER: "Staff Ledger",
    ReportKind.TAX: "Tax & Compliance",
}


@dataclass(frozen=True)
class ReportData:
    kind: ReportKind
    year: int
    month: int
    rows: list[dict]

    @property
    def title(self) -> str:
        return REPORT_TITLES[self.kind]


def _money(value: float) -> float:
    return round(float(value), 2)


def leave_pattern(leaves: float) -> str:
    if leaves > HIGH_ABSENTEEISM_DAYS:
        return "High Absenteeism"
    if leaves > MODERATE_ABSENTEEISM_DAYS:
        return "Moderate"
    return "Regular"


def leave_risk(leaves: float) -> str:
    if leaves > HIGH_RISK_LEAVE_DAYS:
        return "High Risk"
    if leaves > MODERATE_RISK_LEAVE_DAYS:
        return "Moderate"
    return "Healthy"


class ReportService:
    """Read-only projections of roster, ledger and payroll for one month.

    Nothing here writes to a repository; exporters and views consume the rows.
    """

    def __init__(self, employees: EmployeeRepository, attendance: AttendanceRepository, payroll: PayrollService):
        self._employees = employees
        self._attendance = attendance
        self._payroll = payroll

    def build(self, kind, *, year: int, month: int) -> ReportData:
        try:
            kind = ReportKind(kind)
        except ValueError:
            raise ValidationError(f"Unknown report: {kind!r}") from None
        year, month = require_month(year, month)

        builder = {
            ReportKind.ATTENDANCE: self._attendance_rows,
            ReportKind.SALARY: self._salary_rows,
            ReportKind.LEAVES: self._leave_rows,
            ReportKind.LEDGER: self._ledger_rows,
            ReportKind.TAX: self._tax_rows,
        }[kind]
        return ReportData(kind=kind, year=year, month=month, rows=builder(year, month))

    def _attendance_rows(self, year: int, month: int) -> list[dict]:
        records = self._attendance.list_for_month(year=year, month=month)
        rows = []
        for emp in self._employees.list_all():
            s = aggregator.summarize(records, employee_id=emp.employee_id, year=year, month=month)
            rows.append(
                {
                    "Employee Name": emp.name,
                    "Role": emp.role.value,
                    "Present Days": s.present_days,
                    "Absent Days": s.absent_days,
                    "Half-Days": s.half_days,
                    "Overtime Shifts": s.overtime_shifts,
                    "Holidays Worked": s.holiday_worked_days,
                }
            )
        return rows

    def _salary_rows(self, year: int, month: int) -> list[dict]:
        rows = []
        for emp in self._employees.list_all():
            data, result, confirmed = self._payroll.resolve(year=year, month=month, employee=emp)
            rows.append(
                {
                    "Employee Name": emp.name,
                    "Base Salary": data.monthly_salary,
                    "Leaves": data.leave_days,
                    "Payable Days": result.payable_days,
                    "Extra Pay": _money(result.extra_pay),
                    "Total Payout": _money(result.final_total),
                    "Status": "Confirmed" if confirmed else "Estimated",
                }
            )
        return rows

    def _leave_rows(self, year: int, month: int) -> list[dict]:
        records = self._attendance.list_for_month(year=year, month=month)
        rows = []
        for emp in self._employees.list_all():
            leaves = aggregator.leave_days(aggregator.filter_month(records, year=year, month=month, employee_id=emp.employee_id))
            rows.append({"Employee Name": emp.name, "Total Leaves": leaves, "Status": leave_pattern(leaves)})
        return rows

    def _ledger_rows(self, year: int, month: int) -> list[dict]:
        rows = []
        for emp in self._employees.list_all():
            confirmed = self._payroll.get(year=year, month=month, employee_id=emp.employee_id)
            if confirmed:
                rows.append(
                    {
                        "Employee Name": emp.name,
                        "Monthly Base": confirmed.input.monthly_salary,
                        "Leaves": confirmed.input.leave_days,
                        "Extra Days Eq": _money(confirmed.result.extra_days),
                        "Final Disbursement": _money(confirmed.result.final_total),
                        "Ref": "Locked Ledger",
                    }
                )
            else:
                rows.append(
                    {
                        "Employee Name": emp.name,
                        "Monthly Base": emp.salary,
                        "Leaves": "N/A",
                        "Extra Days Eq": "N/A",
                        "Final Disbursement": "N/A",
                        "Ref": "Draft",
                    }
                )
        return rows

    def _tax_rows(self, year: int, month: int) -> list[dict]:
        base = sum(e.salary for e in self._employees.list_all())
        lines = [
            ("Professional Tax", PROFESSIONAL_TAX_RATE),
            ("Employer PF", EMPLOYER_PF_RATE),
            ("Service Tax", SERVICE_TAX_RATE),
        ]
        rows = [
            {"Tax Category": name, "Rate": f"{rate * 100:g}%", "Amount": _money(base * rate)}
            for name, rate in lines
        ]
        total = sum(rate for _, rate in lines)
        rows.append({"Tax Category": "Total Liability", "Rate": "Total", "Amount": _money(base * total)})
        return rows

    def leave_ranking(self, *, year: int, month: int) -> list[dict]:
        """Leave days per employee for the month, highest first."""

        year, month = require_month(year, month)
        records = self._attendance.list_for_month(year=year, month=month)
        ranking = []
        for emp in self._employees.list_all():
            leaves = aggregator.leave_days(
                aggregator.filter_month(records, year=year, month=month, employee_id=emp.employee_id)
            )
            ranking.append({"employee_id": emp.employee_id, "name": emp.name, "leaves": leaves, "risk": leave_risk(leaves)})
        ranking.sort(key=lambda x: x["leaves"], reverse=True)
        return ranking

    def dashboard(self, *, today: Optional[date] = None) -> dict:
        today = today or today_local()
        employees = self._employees.list_all()
        today_records = list(self._attendance.list_for_date(today))
        month_records = self._attendance.list_for_month(year=today.year, month=today.month)

        present = aggregator.count_status(today_records, AttendanceStatus.PRESENT)
        absent = aggregator.count_status(today_records, AttendanceStatus.ABSENT)
        half = aggregator.count_status(today_records, AttendanceStatus.HALF_DAY)

        return {
            "total_employees": len(employees),
            "present_today": present + half * 0.5,
            "absent_today": absent + half * 0.5,
            "overtime_today": aggregator.overtime_shifts(today_records),
            "leaves_this_month": aggregator.leave_days(month_records),
            "salary_this_month": sum(e.salary for e in employees),
        }
