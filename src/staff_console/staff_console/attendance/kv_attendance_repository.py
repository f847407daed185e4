from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import in_month, parse_iso_date
from ..core.constants import ATTENDANCE_KEY
from ..core.enums import AttendanceStatus
from ..storage.connection import KeyValueStore
from ..storage.json_base import dump_json, load_list
from .model import AttendanceRecord
from .repository import AttendanceRepository


def record_from_row(r: dict) -> AttendanceRecord:
    status = r.get("status") or AttendanceStatus.PRESENT.value
    is_overtime = bool(r.get("isOvertime", False))
    # Older ledgers stored overtime as its own status.
    if status == "Overtime":
        status, is_overtime = AttendanceStatus.PRESENT.value, True
    return AttendanceRecord(
        attendance_id=str(r["id"]),
        employee_id=str(r["employeeId"]),
        work_date=parse_iso_date(r["date"]),
        status=AttendanceStatus(status),
        is_overtime=is_overtime,
    )


def record_to_row(rec: AttendanceRecord) -> dict:
    return {
        "id": rec.attendance_id,
        "employeeId": rec.employee_id,
        "date": rec.work_date.strftime("%Y-%m-%d"),
        "status": rec.status.value,
        "isOvertime": rec.is_overtime,
    }


class KVAttendanceRepository(AttendanceRepository):
    """Attendance ledger persisted as one ``AttendanceRecord[]`` JSON list."""

    def __init__(self, store: KeyValueStore, *, key: str = ATTENDANCE_KEY):
        self._store = store
        self._key = key

    def _rows(self) -> list[dict]:
        return load_list(self._store, self._key)

    def _save(self, rows: list[dict]) -> None:
        dump_json(self._store, self._key, rows)

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [record_from_row(r) for r in self._rows()]

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        for rec in self.list_all():
            if rec.employee_id == str(employee_id) and rec.work_date == work_date:
                return rec
        return None

    def list_for_date(self, work_date: date) -> Sequence[AttendanceRecord]:
        return [rec for rec in self.list_all() if rec.work_date == work_date]

    def list_for_month(self, *, year: int, month: int, employee_id: Optional[str] = None) -> Sequence[AttendanceRecord]:
        return [
            rec
            for rec in self.list_all()
            if in_month(rec.work_date, year, month) and (employee_id is None or rec.employee_id == str(employee_id))
        ]

    def create(self, record: AttendanceRecord) -> None:
        rows = self._rows()
        rows.append(record_to_row(record))
        self._save(rows)

    def update(self, record: AttendanceRecord) -> bool:
        rows = self._rows()
        for i, r in enumerate(rows):
            if str(r.get("id")) == record.attendance_id:
                rows[i] = record_to_row(record)
                self._save(rows)
                return True
        return False

    def delete(self, attendance_id: str) -> bool:
        rows = self._rows()
        kept = [r for r in rows if str(r.get("id")) != str(attendance_id)]
        if len(kept) == len(rows):
            return False
        self._save(kept)
        return True
