from __future__ import annotations

import logging

from ..core.constants import ATTENDANCE_KEY, EMPLOYEES_KEY
from .connection import KeyValueStore
from .json_base import dump_json

logger = logging.getLogger(__name__)

DEMO_EMPLOYEES = [
    {"id": "1", "name": "James Wilson", "role": "Barista", "salary": 3200, "status": "Active", "joinDate": "2023-01-15"},
    {"id": "2", "name": "Sarah Parker", "role": "Manager", "salary": 4500, "status": "Active", "joinDate": "2022-06-10"},
    {"id": "3", "name": "Michael Chen", "role": "Chef", "salary": 3800, "status": "Active", "joinDate": "2023-03-20"},
    {"id": "4", "name": "Emily Davis", "role": "Waiter", "salary": 2800, "status": "Active", "joinDate": "2023-11-05"},
    {"id": "5", "name": "Robert Brown", "role": "Cleaner", "salary": 2500, "status": "Active", "joinDate": "2024-02-12"},
]

DEMO_ATTENDANCE = [
    {"id": "a1", "employeeId": "1", "date": "2024-05-01", "status": "Present", "isOvertime": False},
    {"id": "a2", "employeeId": "2", "date": "2024-05-01", "status": "Present", "isOvertime": False},
    {"id": "a3", "employeeId": "3", "date": "2024-05-01", "status": "Absent", "isOvertime": False},
    {"id": "a4", "employeeId": "4", "date": "2024-05-01", "status": "Half-Day", "isOvertime": False},
    {"id": "a5", "employeeId": "5", "date": "2024-05-01", "status": "Present", "isOvertime": False},
]


def ensure_demo_data(store: KeyValueStore) -> list[str]:
    """Write the demo roster/ledger under keys that are still empty.

    Returns the keys that were seeded; existing data is never overwritten.
    """

    seeded = []
    for key, rows in ((EMPLOYEES_KEY, DEMO_EMPLOYEES), (ATTENDANCE_KEY, DEMO_ATTENDANCE)):
        if store.get(key) is None:
            dump_json(store, key, rows)
            seeded.append(key)
    if seeded:
        logger.info("Seeded demo data: %s", ", ".join(seeded))
    return seeded
