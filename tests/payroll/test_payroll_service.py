from __future__ import annotations

from datetime import date, datetime

import pytest

from staff_console.core.enums import AttendanceStatus
from staff_console.core.exceptions import MonthLockedError, PolicyError, ValidationError
from staff_console.payroll.model import PayrollInput
from staff_console.payroll.service import available_periods

TODAY = date(2026, 10, 18)


def _input(**kw):
    base = dict(employee_id="1", monthly_salary=3000, leave_days=2, holiday_worked_days=1, extra_hours=0, standard_hours=8)
    base.update(kw)
    return PayrollInput(**base)


def test_open_calculator_seeds_from_ledger(seeded_container):
    ledger = seeded_container.attendance_service
    ledger.set_status("1", date(2024, 5, 2), AttendanceStatus.ABSENT)
    ledger.set_status("1", date(2024, 5, 3), AttendanceStatus.HALF_DAY)
    ledger.set_status("1", date(2024, 5, 4), AttendanceStatus.HOLIDAY)
    ledger.set_overtime("1", date(2024, 5, 5), True)

    view = seeded_container.payroll_service.open_calculator(year=2024, month=5, employee_id="1")

    assert view.confirmed is False
    assert view.input.monthly_salary == 3200
    assert view.input.leave_days == 1.5
    assert view.input.holiday_worked_days == 1
    assert view.input.extra_hours == 2
    assert view.input.standard_hours == 8


def test_open_calculator_unknown_employee(seeded_container):
    with pytest.raises(ValidationError):
        seeded_container.payroll_service.open_calculator(year=2024, month=5, employee_id="404")


def test_confirm_stores_result_and_timestamp(container, fixed_now):
    svc = container.payroll_service

    confirmed = svc.confirm(year=2024, month=4, employee_id="1", data=_input(), now=fixed_now)

    assert confirmed.key == "2024-4-1"
    assert confirmed.confirmed_at == fixed_now
    assert confirmed.result.final_total == 2900
    assert svc.get(year=2024, month=4, employee_id="1") == confirmed


def test_reconfirm_overwrites_with_new_timestamp(container):
    svc = container.payroll_service
    svc.confirm(year=2024, month=4, employee_id="1", data=_input(), now=datetime(2024, 5, 1, 10, 0))
    second = svc.confirm(year=2024, month=4, employee_id="1", data=_input(leave_days=0), now=datetime(2024, 5, 2, 10, 0))

    stored = svc.get(year=2024, month=4, employee_id="1")
    assert stored.confirmed_at == datetime(2024, 5, 2, 10, 0)
    assert stored.result.final_total == second.result.final_total == 3100


def test_confirm_uses_path_employee_and_clamps(container):
    confirmed = container.payroll_service.confirm(
        year=2024, month=4, employee_id="7", data=_input(employee_id="", leave_days=-3)
    )

    assert confirmed.input.employee_id == "7"
    assert confirmed.input.leave_days == 0


def test_locked_month_rejects_confirm_and_keeps_store(container):
    svc = container.payroll_service
    original = svc.confirm(year=2024, month=4, employee_id="1", data=_input())
    svc.lock_month(year=2024, month=4, today=TODAY)

    with pytest.raises(MonthLockedError):
        svc.confirm(year=2024, month=4, employee_id="1", data=_input(leave_days=10))
    with pytest.raises(MonthLockedError):
        svc.confirm(year=2024, month=4, employee_id="2", data=_input(employee_id="2"))

    assert svc.get(year=2024, month=4, employee_id="1") == original
    assert svc.get(year=2024, month=4, employee_id="2") is None


def test_lock_is_per_month(container):
    svc = container.payroll_service
    svc.lock_month(year=2024, month=4, today=TODAY)

    assert svc.is_locked(year=2024, month=4) is True
    assert svc.is_locked(year=2024, month=5) is False
    svc.confirm(year=2024, month=5, employee_id="1", data=_input())


def test_cannot_lock_current_month(container):
    with pytest.raises(PolicyError):
        container.payroll_service.lock_month(year=TODAY.year, month=TODAY.month, today=TODAY)
    assert container.payroll_service.is_locked(year=TODAY.year, month=TODAY.month) is False


def test_cannot_lock_future_month(container):
    with pytest.raises(PolicyError):
        container.payroll_service.lock_month(year=2027, month=1, today=TODAY)


def test_lock_twice_is_noop(container):
    svc = container.payroll_service
    svc.lock_month(year=2024, month=4, today=TODAY)
    svc.lock_month(year=2024, month=4, today=TODAY)

    assert svc.is_locked(year=2024, month=4)


def test_invalid_month_rejected(container):
    with pytest.raises(ValidationError):
        container.payroll_service.lock_month(year=2024, month=13, today=TODAY)


def test_confirmed_values_win_over_ledger_edits(seeded_container):
    svc = seeded_container.payroll_service
    confirmed = svc.confirm(
        year=2024, month=5, employee_id="1", data=_input(monthly_salary=3200, leave_days=0, holiday_worked_days=0)
    )

    seeded_container.attendance_service.set_status("1", date(2024, 5, 9), AttendanceStatus.ABSENT)
    view = svc.open_calculator(year=2024, month=5, employee_id="1")
    emp = seeded_container.employee_service.get("1")
    _, result, source = svc.resolve(year=2024, month=5, employee=emp)

    assert view.confirmed is True
    assert view.result.final_total == confirmed.final_total
    assert result.final_total == confirmed.final_total
    assert source == confirmed


def test_view_reports_lock_state(seeded_container):
    svc = seeded_container.payroll_service
    svc.lock_month(year=2024, month=5, today=TODAY)

    assert svc.open_calculator(year=2024, month=5, employee_id="2").locked is True


def test_receipt_rows(seeded_container):
    svc = seeded_container.payroll_service
    svc.confirm(year=2024, month=5, employee_id="1", data=_input(monthly_salary=3000))

    rows = svc.receipt_rows(year=2024, month=5, employee_id="1")

    assert [r["Desc"] for r in rows] == ["Staff", "Month", "Base", "Leaves", "Extra Pay", "Final"]
    assert rows[0]["Val"] == "James Wilson"
    assert rows[1]["Val"] == "May 2024"
    assert rows[2]["Val"] == "₹3000"
    assert rows[5]["Val"] == "₹2900.00"


def test_available_periods_stop_at_current_month():
    periods = available_periods(today=date(2025, 3, 10))

    assert list(periods) == [2023, 2024, 2025]
    assert periods[2024] == list(range(1, 13))
    assert periods[2025] == [1, 2, 3]
