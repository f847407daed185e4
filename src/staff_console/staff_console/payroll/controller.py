from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import today_local
from ..common.validators import require_month
from ..common.web import admin_required, json_body
from ..container import Container
from ..core.exceptions import ValidationError
from ..reports.export import XLSX_MIMETYPE, receipt_filename, rows_to_xlsx_bytes
from .model import PayrollInput, PayrollResult
from .service import PayrollView, available_periods


def input_from_json(employee_id: str, data: dict, *, fallback: PayrollInput) -> PayrollInput:
    """Fields missing from the request keep the calculator's current values."""

    def pick(name: str, current: float):
        return data[name] if data.get(name) not in (None, "") else current

    return PayrollInput(
        employee_id=employee_id,
        monthly_salary=pick("monthlySalary", fallback.monthly_salary),
        leave_days=pick("leaveDays", fallback.leave_days),
        holiday_worked_days=pick("holidayWorkedDays", fallback.holiday_worked_days),
        extra_hours=pick("extraHours", fallback.extra_hours),
        standard_hours=pick("standardHours", fallback.standard_hours),
    )


def input_to_json(data: PayrollInput) -> dict:
    return {
        "employeeId": data.employee_id,
        "monthlySalary": data.monthly_salary,
        "leaveDays": data.leave_days,
        "holidayWorkedDays": data.holiday_worked_days,
        "extraHours": data.extra_hours,
        "standardHours": data.standard_hours,
    }


def result_to_json(result: PayrollResult) -> dict:
    return {
        "perDaySalary": result.per_day_salary,
        "payableDays": result.payable_days,
        "extraDays": result.extra_days,
        "extraPay": result.extra_pay,
        "finalTotal": result.final_total,
    }


def view_to_json(view: PayrollView) -> dict:
    return {
        "year": view.year,
        "month": view.month,
        "input": input_to_json(view.input),
        "result": result_to_json(view.result),
        "confirmed": view.confirmed,
        "locked": view.locked,
        "confirmedAt": view.confirmed_at.isoformat() if view.confirmed_at else None,
    }


def register(app: Flask, container: Container) -> None:
    svc = container.payroll_service

    def _as_float_payload(data: dict) -> dict:
        try:
            return {k: float(v) if k != "employeeId" and v not in (None, "") else v for k, v in data.items()}
        except (TypeError, ValueError):
            raise ValidationError("Payroll fields must be numbers") from None

    @app.route("/api/payroll/periods", methods=["GET"], endpoint="payroll_periods")
    @admin_required
    def payroll_periods():
        periods = available_periods(today=today_local())
        return jsonify({"periods": {str(y): months for y, months in periods.items()}})

    @app.route("/api/payroll/<int:year>/<int:month>", methods=["GET"], endpoint="payroll_month")
    @admin_required
    def payroll_month(year: int, month: int):
        year, month = require_month(year, month)
        confirmed = {c.employee_id: c for c in container.payroll_repo.list_for_month(year=year, month=month)}
        staff = [
            {
                "employeeId": e.employee_id,
                "name": e.name,
                "role": e.role.value,
                "confirmed": e.employee_id in confirmed,
            }
            for e in container.employee_service.list_employees()
        ]
        return jsonify({"year": year, "month": month, "locked": svc.is_locked(year=year, month=month), "staff": staff})

    @app.route("/api/payroll/<int:year>/<int:month>/lock", methods=["POST"], endpoint="payroll_lock")
    @admin_required
    def payroll_lock(year: int, month: int):
        svc.lock_month(year=year, month=month, today=today_local())
        return jsonify({"success": True, "locked": True})

    @app.route("/api/payroll/<int:year>/<int:month>/<employee_id>", methods=["GET"], endpoint="payroll_view")
    @admin_required
    def payroll_view(year: int, month: int, employee_id: str):
        return jsonify(view_to_json(svc.open_calculator(year=year, month=month, employee_id=employee_id)))

    @app.route("/api/payroll/<int:year>/<int:month>/<employee_id>/compute", methods=["POST"], endpoint="payroll_compute")
    @admin_required
    def payroll_compute(year: int, month: int, employee_id: str):
        current = svc.open_calculator(year=year, month=month, employee_id=employee_id)
        data = input_from_json(employee_id, _as_float_payload(json_body()), fallback=current.input)
        data = data.normalized(default_standard_hours=svc.calculator.default_standard_hours)
        return jsonify({"input": input_to_json(data), "result": result_to_json(svc.compute(data)), "locked": current.locked})

    @app.route("/api/payroll/<int:year>/<int:month>/<employee_id>/confirm", methods=["POST"], endpoint="payroll_confirm")
    @admin_required
    def payroll_confirm(year: int, month: int, employee_id: str):
        current = svc.open_calculator(year=year, month=month, employee_id=employee_id)
        data = input_from_json(employee_id, _as_float_payload(json_body()), fallback=current.input)
        confirmed = svc.confirm(year=year, month=month, employee_id=employee_id, data=data)
        return jsonify(
            {
                "success": True,
                "message": "Payroll Confirmed!",
                "input": input_to_json(confirmed.input),
                "result": result_to_json(confirmed.result),
                "confirmedAt": confirmed.confirmed_at.isoformat(),
            }
        )

    @app.route("/api/payroll/<int:year>/<int:month>/<employee_id>/receipt.xlsx", methods=["GET"], endpoint="payroll_receipt")
    @admin_required
    def payroll_receipt(year: int, month: int, employee_id: str):
        rows = svc.receipt_rows(year=year, month=month, employee_id=employee_id)
        employee = container.employee_service.get(employee_id)
        return app.response_class(
            rows_to_xlsx_bytes(rows, sheet_name="Salary"),
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={receipt_filename(employee.name)}"},
        )
