from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import today_local
from ..common.validators import require_month
from ..common.web import admin_required
from ..container import Container
from .export import XLSX_MIMETYPE, report_filename, rows_to_csv_bytes, rows_to_xlsx_bytes


def register(app: Flask, container: Container) -> None:
    svc = container.report_service

    def _period() -> tuple[int, int]:
        today = today_local()
        return require_month(request.args.get("year") or today.year, request.args.get("month") or today.month)

    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    @admin_required
    def dashboard():
        return jsonify(svc.dashboard(today=today_local()))

    @app.route("/api/leaves", methods=["GET"], endpoint="leaves")
    @admin_required
    def leaves():
        year, month = _period()
        return jsonify({"year": year, "month": month, "ranking": svc.leave_ranking(year=year, month=month)})

    @app.route("/api/reports/<kind>", methods=["GET"], endpoint="report_rows")
    @admin_required
    def report_rows(kind: str):
        year, month = _period()
        data = svc.build(kind, year=year, month=month)
        return jsonify({"kind": data.kind.value, "title": data.title, "year": year, "month": month, "rows": data.rows})

    @app.route("/api/reports/<kind>/export.csv", methods=["GET"], endpoint="report_csv")
    @admin_required
    def report_csv(kind: str):
        year, month = _period()
        data = svc.build(kind, year=year, month=month)
        return app.response_class(
            rows_to_csv_bytes(data.rows),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={report_filename(data.kind.value, year, month, ext='csv')}"},
        )

    @app.route("/api/reports/<kind>/export.xlsx", methods=["GET"], endpoint="report_xlsx")
    @admin_required
    def report_xlsx(kind: str):
        year, month = _period()
        data = svc.build(kind, year=year, month=month)
        return app.response_class(
            rows_to_xlsx_bytes(data.rows, sheet_name=data.title),
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f"attachment; filename={report_filename(data.kind.value, year, month)}"},
        )
