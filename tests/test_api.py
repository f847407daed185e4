from __future__ import annotations

import pytest

from staff_console.common.datetime_utils import today_local
from staff_console.main import create_app
from staff_console.reports.export import XLSX_MIMETYPE
from staff_console.storage.bootstrap import ensure_demo_data
from staff_console.storage.connection import InMemoryStore


@pytest.fixture
def app():
    app = create_app("config.testing", store=InMemoryStore())
    ensure_demo_data(app.extensions["staff_console"].store)
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin(client):
    resp = client.post("/login", json={"username": "admin", "password": "test-password"})
    assert resp.status_code == 200
    return client


def test_api_requires_login(client):
    resp = client.get("/api/employees")

    assert resp.status_code == 401
    assert resp.get_json()["success"] is False


def test_login_rejects_wrong_password(client):
    resp = client.post("/login", json={"username": "admin", "password": "nope"})

    assert resp.status_code == 401
    assert client.get("/api/dashboard").status_code == 401


def test_logout_clears_session(admin):
    admin.post("/logout")

    assert admin.get("/api/dashboard").status_code == 401


def test_employee_crud(admin):
    listed = admin.get("/api/employees").get_json()
    assert len(listed["employees"]) == 5
    assert listed["nextId"] == "6"

    created = admin.post("/api/employees", json={"name": "Priya Nair", "role": "Waiter", "salary": 2700})
    assert created.status_code == 201
    assert created.get_json()["employee"]["id"] == "6"

    edited = admin.put("/api/employees/6", json={"salary": -5})
    assert edited.get_json()["employee"]["salary"] == 0

    assert admin.delete("/api/employees/6").get_json()["success"] is True
    assert admin.delete("/api/employees/6").status_code == 400


def test_attendance_toggle_on_today(admin):
    today = today_local().strftime("%Y-%m-%d")

    first = admin.post("/api/attendance/status", json={"employeeId": "1", "date": today, "status": "Present"})
    assert first.get_json()["record"]["status"] == "Present"

    ot = admin.post("/api/attendance/overtime", json={"employeeId": "2", "date": today})
    assert ot.get_json()["record"] == {
        "id": f"att-{today.replace('-', '')}-2",
        "employeeId": "2",
        "date": today,
        "status": "Present",
        "isOvertime": True,
    }

    again = admin.post("/api/attendance/status", json={"employeeId": "1", "date": today, "status": "Present"})
    assert again.get_json()["record"] is None

    sheet = admin.get(f"/api/attendance?date={today}").get_json()["rows"]
    assert [r["status"] for r in sheet[:2]] == [None, "Present"]


def test_attendance_refuses_past_month(admin):
    resp = admin.post("/api/attendance/status", json={"employeeId": "1", "date": "2024-05-02", "status": "Absent"})

    assert resp.status_code == 409
    assert resp.get_json()["success"] is False


def test_attendance_rejects_unknown_status(admin):
    today = today_local().strftime("%Y-%m-%d")
    resp = admin.post("/api/attendance/status", json={"employeeId": "1", "date": today, "status": "Overtime"})

    assert resp.status_code == 400


def test_lock_current_month_refused(admin):
    today = today_local()

    resp = admin.post(f"/api/payroll/{today.year}/{today.month}/lock")

    assert resp.status_code == 409


def test_confirm_then_lock_freezes_month(admin):
    view = admin.get("/api/payroll/2024/5/3").get_json()
    assert view["confirmed"] is False
    assert view["input"]["leaveDays"] == 1

    confirmed = admin.post("/api/payroll/2024/5/3/confirm", json={"leaveDays": 0})
    assert confirmed.status_code == 200
    assert confirmed.get_json()["result"]["finalTotal"] == pytest.approx(3800)

    assert admin.post("/api/payroll/2024/5/lock").status_code == 200
    assert admin.post("/api/payroll/2024/5/lock").status_code == 200

    refused = admin.post("/api/payroll/2024/5/3/confirm", json={"leaveDays": 3})
    assert refused.status_code == 409

    after = admin.get("/api/payroll/2024/5/3").get_json()
    assert after["locked"] is True
    assert after["confirmed"] is True
    assert after["result"]["finalTotal"] == pytest.approx(3800)

    month = admin.get("/api/payroll/2024/5").get_json()
    assert [s["confirmed"] for s in month["staff"]] == [False, False, True, False, False]


def test_compute_does_not_persist(admin):
    resp = admin.post("/api/payroll/2024/5/1/compute", json={"leaveDays": 2, "monthlySalary": 3000})

    assert resp.get_json()["result"]["finalTotal"] == 2800
    assert admin.get("/api/payroll/2024/5/1").get_json()["confirmed"] is False


def test_invalid_month_is_rejected(admin):
    assert admin.get("/api/payroll/2024/13/1").status_code == 400
    assert admin.get("/api/payroll/2024/13").status_code == 400
    assert admin.get("/api/payroll/2024/0").status_code == 400


def test_report_rows_and_exports(admin):
    rows = admin.get("/api/reports/tax?year=2024&month=5").get_json()
    assert rows["title"] == "Tax & Compliance"
    assert rows["rows"][-1]["Amount"] == 5376.0

    csv_resp = admin.get("/api/reports/attendance/export.csv?year=2024&month=5")
    assert csv_resp.mimetype == "text/csv"
    text = csv_resp.data.decode("utf-8-sig")
    assert text.splitlines()[0].startswith("Employee Name,Role,Present Days")

    xlsx = admin.get("/api/reports/salary/export.xlsx?year=2024&month=5")
    assert xlsx.mimetype == XLSX_MIMETYPE
    assert xlsx.data[:2] == b"PK"

    assert admin.get("/api/reports/payslips").status_code == 400


def test_receipt_download(admin):
    resp = admin.get("/api/payroll/2024/5/1/receipt.xlsx")

    assert resp.status_code == 200
    assert "Receipt_James_Wilson.xlsx" in resp.headers["Content-Disposition"]


def test_confirm_refuses_non_finite_salary(admin):
    resp = admin.post("/api/payroll/2024/5/2/confirm", json={"monthlySalary": "1e400"})

    assert resp.status_code == 400
    assert admin.get("/api/payroll/2024/5/2").get_json()["confirmed"] is False
