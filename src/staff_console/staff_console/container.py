from __future__ import annotations

from dataclasses import dataclass

from .attendance.kv_attendance_repository import KVAttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .core.constants import DEFAULT_OVERTIME_UNIT_HOURS, DEFAULT_STANDARD_HOURS
from .core.enums import ExtraPayPolicy
from .employees.kv_employee_repository import KVEmployeeRepository
from .employees.service import EmployeeService
from .payroll.calculator.factory import PayrollCalculatorFactory
from .payroll.kv_payroll_repository import KVPayrollRepository
from .payroll.service import PayrollService
from .reports.service import ReportService
from .storage.connection import KeyValueStore, StoreConfig, open_store


@dataclass(frozen=True)
class Container:
    store: KeyValueStore

    employees_repo: KVEmployeeRepository
    attendance_repo: KVAttendanceRepository
    payroll_repo: KVPayrollRepository

    auth_service: AuthService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    report_service: ReportService


def build_container(
    *,
    store_config: StoreConfig | None = None,
    store: KeyValueStore | None = None,
    admin_username: str = "admin",
    admin_password: str = "admin123",
    default_standard_hours: float = DEFAULT_STANDARD_HOURS,
    overtime_unit_hours: float = DEFAULT_OVERTIME_UNIT_HOURS,
    extra_pay_policy: str = ExtraPayPolicy.ADDITIVE.value,
) -> Container:
    store = store if store is not None else open_store(store_config or StoreConfig())

    employees_repo = KVEmployeeRepository(store)
    attendance_repo = KVAttendanceRepository(store)
    payroll_repo = KVPayrollRepository(store)

    calculator = PayrollCalculatorFactory(default_standard_hours=default_standard_hours).for_policy(extra_pay_policy)

    auth_service = AuthService(username=admin_username, password=admin_password)
    employee_service = EmployeeService(employees_repo, attendance_repo)
    attendance_service = AttendanceService(attendance_repo)
    payroll_service = PayrollService(
        payroll_repo,
        attendance_repo,
        employees_repo,
        calculator=calculator,
        overtime_unit_hours=overtime_unit_hours,
    )
    report_service = ReportService(employees_repo, attendance_repo, payroll_service)

    return Container(
        store=store,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        payroll_repo=payroll_repo,
        auth_service=auth_service,
        employee_service=employee_service,
        attendance_service=attendance_service,
        payroll_service=payroll_service,
        report_service=report_service,
    )
