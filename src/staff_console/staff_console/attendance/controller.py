from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.web import admin_required, json_body, parse_date_arg
from ..container import Container
from ..core.exceptions import ValidationError
from .model import AttendanceRecord


def record_to_json(rec: AttendanceRecord | None) -> dict | None:
    if rec is None:
        return None
    return {
        "id": rec.attendance_id,
        "employeeId": rec.employee_id,
        "date": rec.work_date.strftime("%Y-%m-%d"),
        "status": rec.status.value,
        "isOvertime": rec.is_overtime,
    }


def register(app: Flask, container: Container) -> None:
    svc = container.attendance_service

    def _log_date(value):
        today = today_local()
        work_date = parse_date_arg(value, default=today)
        return svc.select_log_date(work_date, today=today)

    def _employee_id(data: dict) -> str:
        employee_id = str(data.get("employeeId") or "").strip()
        if not employee_id:
            raise ValidationError("employeeId is required")
        return employee_id

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_day")
    @admin_required
    def attendance_day():
        work_date = _log_date(request.args.get("date"))
        rows = svc.day_sheet(work_date, container.employee_service.list_employees())
        return jsonify({"date": work_date.strftime("%Y-%m-%d"), "rows": rows})

    @app.route("/api/attendance/status", methods=["POST"], endpoint="attendance_status")
    @admin_required
    def attendance_status():
        data = json_body()
        work_date = _log_date(data.get("date"))
        rec = svc.set_status(_employee_id(data), work_date, data.get("status"))
        return jsonify({"success": True, "record": record_to_json(rec)})

    @app.route("/api/attendance/overtime", methods=["POST"], endpoint="attendance_overtime")
    @admin_required
    def attendance_overtime():
        data = json_body()
        work_date = _log_date(data.get("date"))
        employee_id = _employee_id(data)
        if "on" in data:
            rec = svc.set_overtime(employee_id, work_date, bool(data["on"]))
        else:
            rec = svc.toggle_overtime(employee_id, work_date)
        return jsonify({"success": True, "record": record_to_json(rec)})
