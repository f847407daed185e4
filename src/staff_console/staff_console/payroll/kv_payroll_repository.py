from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.constants import CONFIRMED_PAYROLLS_KEY, DEFAULT_STANDARD_HOURS, LOCKED_PAYROLLS_KEY
from ..storage.connection import KeyValueStore
from ..storage.json_base import dump_json, load_map
from .model import ConfirmedPayroll, PayrollInput, PayrollResult, month_key, payroll_key
from .repository import PayrollRepository


def confirmed_from_row(key: str, r: dict) -> ConfirmedPayroll:
    year_s, month_s, _ = key.split("-", 2)
    return ConfirmedPayroll(
        year=int(year_s),
        month=int(month_s),
        input=PayrollInput(
            employee_id=str(r["employeeId"]),
            monthly_salary=float(r.get("monthlySalary") or 0),
            leave_days=float(r.get("leaveDays") or 0),
            holiday_worked_days=float(r.get("holidayWorkedDays") or 0),
            extra_hours=float(r.get("extraHours") or 0),
            standard_hours=float(r.get("standardHours") or DEFAULT_STANDARD_HOURS),
        ),
        result=PayrollResult(
            per_day_salary=float(r.get("perDaySalary") or 0),
            payable_days=float(r.get("payableDays") or 0),
            extra_days=float(r.get("extraDays") or 0),
            extra_pay=float(r.get("extraPay") or 0),
            final_total=float(r.get("finalTotal") or 0),
        ),
        confirmed_at=datetime.fromisoformat(r["confirmedAt"]),
    )


def confirmed_to_row(c: ConfirmedPayroll) -> dict:
    return {
        "employeeId": c.input.employee_id,
        "monthlySalary": c.input.monthly_salary,
        "leaveDays": c.input.leave_days,
        "holidayWorkedDays": c.input.holiday_worked_days,
        "extraHours": c.input.extra_hours,
        "standardHours": c.input.standard_hours,
        "perDaySalary": c.result.per_day_salary,
        "payableDays": c.result.payable_days,
        "extraDays": c.result.extra_days,
        "extraPay": c.result.extra_pay,
        "finalTotal": c.result.final_total,
        "confirmedAt": c.confirmed_at.isoformat(),
    }


class KVPayrollRepository(PayrollRepository):
    def __init__(
        self,
        store: KeyValueStore,
        *,
        confirmed_key: str = CONFIRMED_PAYROLLS_KEY,
        locked_key: str = LOCKED_PAYROLLS_KEY,
    ):
        self._store = store
        self._confirmed_key = confirmed_key
        self._locked_key = locked_key

    def get(self, *, year: int, month: int, employee_id: str) -> Optional[ConfirmedPayroll]:
        key = payroll_key(year, month, employee_id)
        row = load_map(self._store, self._confirmed_key).get(key)
        return confirmed_from_row(key, row) if row else None

    def save(self, confirmed: ConfirmedPayroll) -> None:
        rows = load_map(self._store, self._confirmed_key)
        rows[confirmed.key] = confirmed_to_row(confirmed)
        dump_json(self._store, self._confirmed_key, rows)

    def list_for_month(self, *, year: int, month: int) -> Sequence[ConfirmedPayroll]:
        prefix = month_key(year, month) + "-"
        rows = load_map(self._store, self._confirmed_key)
        return [confirmed_from_row(k, r) for k, r in rows.items() if k.startswith(prefix)]

    def is_locked(self, *, year: int, month: int) -> bool:
        return bool(load_map(self._store, self._locked_key).get(month_key(year, month)))

    def lock(self, *, year: int, month: int) -> None:
        locks = load_map(self._store, self._locked_key)
        locks[month_key(year, month)] = True
        dump_json(self._store, self._locked_key, locks)
