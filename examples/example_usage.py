"""Example: use the service layer directly (no Flask).

Goal: controllers are a thin layer; the business rules live in the services.
"""

from datetime import date

from staff_console.container import build_container
from staff_console.core.enums import AttendanceStatus
from staff_console.payroll.model import PayrollInput
from staff_console.storage.bootstrap import ensure_demo_data


def main():
    container = build_container()
    ensure_demo_data(container.store)

    ledger = container.attendance_service
    ledger.set_status("1", date(2024, 5, 2), AttendanceStatus.HOLIDAY)
    ledger.set_overtime("1", date(2024, 5, 3), True)

    view = container.payroll_service.open_calculator(year=2024, month=5, employee_id="1")
    print("automatic:", view.input, view.result)

    manual = PayrollInput(employee_id="1", monthly_salary=3000, leave_days=2, holiday_worked_days=1, standard_hours=8)
    print("manual:", container.payroll_service.compute(manual))

    for row in container.report_service.build("salary", year=2024, month=5).rows:
        print(row)


if __name__ == "__main__":
    main()
