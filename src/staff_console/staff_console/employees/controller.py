from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.web import admin_required, json_body, parse_date_arg
from ..container import Container
from .model import Employee


def employee_to_json(e: Employee, **extra) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "role": e.role.value,
        "salary": e.salary,
        "status": e.status.value,
        "joinDate": e.join_date.strftime("%Y-%m-%d"),
        **extra,
    }


def register(app: Flask, container: Container) -> None:
    svc = container.employee_service

    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    @admin_required
    def list_employees():
        today = today_local()
        employees = svc.list_employees(search=request.args.get("q"))
        return jsonify(
            {
                "employees": [
                    employee_to_json(e, todayStatus=svc.today_status(e.employee_id, today=today).value)
                    for e in employees
                ],
                "nextId": svc.next_id(),
            }
        )

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    @admin_required
    def create_employee():
        data = json_body()
        emp = svc.register(
            name=data.get("name", ""),
            role=data.get("role", "Barista"),
            salary=data.get("salary", 0),
            join_date=parse_date_arg(data.get("joinDate"), default=today_local()),
            employee_id=data.get("id"),
        )
        return jsonify({"success": True, "employee": employee_to_json(emp)}), 201

    @app.route("/api/employees/<employee_id>", methods=["PUT"], endpoint="edit_employee")
    @admin_required
    def edit_employee(employee_id: str):
        data = json_body()
        join_date = parse_date_arg(data.get("joinDate"), default=None)
        emp = svc.edit(
            employee_id,
            name=data.get("name"),
            role=data.get("role"),
            salary=data.get("salary"),
            status=data.get("status"),
            join_date=join_date,
        )
        return jsonify({"success": True, "employee": employee_to_json(emp)})

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    @admin_required
    def delete_employee(employee_id: str):
        svc.delete(employee_id)
        return jsonify({"success": True})
