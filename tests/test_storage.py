from __future__ import annotations

import json
from datetime import date, datetime

from staff_console.attendance.kv_attendance_repository import KVAttendanceRepository
from staff_console.core.constants import ATTENDANCE_KEY, EMPLOYEES_KEY
from staff_console.core.enums import AttendanceStatus
from staff_console.employees.kv_employee_repository import KVEmployeeRepository
from staff_console.payroll.kv_payroll_repository import KVPayrollRepository
from staff_console.payroll.model import ConfirmedPayroll, PayrollInput, PayrollResult
from staff_console.storage.bootstrap import ensure_demo_data
from staff_console.storage.connection import InMemoryStore, JsonFileStore, StoreConfig, open_store


def test_json_file_store_reads_its_own_writes(tmp_path):
    path = tmp_path / "data" / "store.json"
    store = JsonFileStore(path)

    assert store.get("missing") is None
    store.set("k", "v1")
    store.set("k", "v2")
    assert store.get("k") == "v2"
    assert JsonFileStore(path).get("k") == "v2"

    store.delete("k")
    assert store.get("k") is None


def test_open_store_picks_backend(tmp_path):
    assert isinstance(open_store(StoreConfig()), InMemoryStore)
    assert isinstance(open_store(StoreConfig(path=str(tmp_path / "s.json"))), JsonFileStore)


def test_corrupt_blob_reads_as_empty():
    store = InMemoryStore({EMPLOYEES_KEY: "{not json", ATTENDANCE_KEY: json.dumps({"oops": 1})})

    assert KVEmployeeRepository(store).list_all() == []
    assert KVAttendanceRepository(store).list_all() == []


def test_demo_data_never_overwrites_existing_keys():
    store = InMemoryStore({EMPLOYEES_KEY: "[]"})

    seeded = ensure_demo_data(store)

    assert seeded == [ATTENDANCE_KEY]
    assert store.get(EMPLOYEES_KEY) == "[]"
    assert len(KVAttendanceRepository(store).list_all()) == 5
    assert ensure_demo_data(store) == []


def test_legacy_overtime_status_is_read_as_present():
    rows = [{"id": "x1", "employeeId": "2", "date": "2024-05-03", "status": "Overtime"}]
    repo = KVAttendanceRepository(InMemoryStore({ATTENDANCE_KEY: json.dumps(rows)}))

    rec = repo.get_for_employee_and_date("2", date(2024, 5, 3))

    assert rec.status == AttendanceStatus.PRESENT
    assert rec.is_overtime is True


def test_employee_rows_use_camel_case_join_date():
    store = InMemoryStore()
    ensure_demo_data(store)
    rows = json.loads(store.get(EMPLOYEES_KEY))

    emp = KVEmployeeRepository(store).get_by_id("2")

    assert rows[1]["joinDate"] == "2022-06-10"
    assert emp.join_date == date(2022, 6, 10)


def test_confirmed_payroll_round_trip_and_lock():
    store = InMemoryStore()
    repo = KVPayrollRepository(store)
    confirmed = ConfirmedPayroll(
        year=2024,
        month=4,
        input=PayrollInput(employee_id="1", monthly_salary=3000, leave_days=2, holiday_worked_days=1, standard_hours=8),
        result=PayrollResult(per_day_salary=100, payable_days=28, extra_days=1, extra_pay=100, final_total=2900),
        confirmed_at=datetime(2024, 5, 2, 10, 0, 0),
    )

    repo.save(confirmed)

    assert repo.get(year=2024, month=4, employee_id="1") == confirmed
    assert repo.get(year=2024, month=5, employee_id="1") is None
    assert [c.employee_id for c in repo.list_for_month(year=2024, month=4)] == ["1"]
    assert "2024-4-1" in json.loads(store.get("confirmed_individual_payrolls"))

    assert repo.is_locked(year=2024, month=4) is False
    repo.lock(year=2024, month=4)
    assert repo.is_locked(year=2024, month=4) is True
    assert json.loads(store.get("locked_payrolls")) == {"2024-4": True}
