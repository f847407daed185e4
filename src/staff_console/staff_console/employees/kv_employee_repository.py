from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.constants import EMPLOYEES_KEY
from ..core.enums import EmployeeStatus, Role
from ..storage.connection import KeyValueStore
from ..storage.json_base import dump_json, load_list
from .model import Employee
from .repository import EmployeeRepository


def employee_from_row(r: dict) -> Employee:
    return Employee(
        employee_id=str(r["id"]),
        name=str(r.get("name") or ""),
        role=Role(r.get("role") or Role.BARISTA.value),
        salary=float(r.get("salary") or 0),
        status=EmployeeStatus(r.get("status") or EmployeeStatus.ACTIVE.value),
        join_date=parse_iso_date(r["joinDate"]),
    )


def employee_to_row(e: Employee) -> dict:
    return {
        "id": e.employee_id,
        "name": e.name,
        "role": e.role.value,
        "salary": e.salary,
        "status": e.status.value,
        "joinDate": e.join_date.strftime("%Y-%m-%d"),
    }


class KVEmployeeRepository(EmployeeRepository):
    """Roster persisted as one ``Employee[]`` JSON list, saved on every mutation."""

    def __init__(self, store: KeyValueStore, *, key: str = EMPLOYEES_KEY):
        self._store = store
        self._key = key

    def _rows(self) -> list[dict]:
        return load_list(self._store, self._key)

    def _save(self, rows: list[dict]) -> None:
        dump_json(self._store, self._key, rows)

    def list_all(self) -> Sequence[Employee]:
        return [employee_from_row(r) for r in self._rows()]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        for r in self._rows():
            if str(r.get("id")) == str(employee_id):
                return employee_from_row(r)
        return None

    def add(self, employee: Employee) -> None:
        rows = self._rows()
        rows.append(employee_to_row(employee))
        self._save(rows)

    def update(self, employee: Employee) -> bool:
        rows = self._rows()
        for i, r in enumerate(rows):
            if str(r.get("id")) == employee.employee_id:
                rows[i] = employee_to_row(employee)
                self._save(rows)
                return True
        return False

    def delete_by_id(self, employee_id: str) -> bool:
        rows = self._rows()
        kept = [r for r in rows if str(r.get("id")) != str(employee_id)]
        if len(kept) == len(rows):
            return False
        self._save(kept)
        return True
