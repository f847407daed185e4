from __future__ import annotations

from datetime import datetime

import pytest

from staff_console.container import build_container
from staff_console.storage.bootstrap import ensure_demo_data
from staff_console.storage.connection import InMemoryStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 15, 9, 30, 0)


@pytest.fixture
def fixed_today(fixed_now):
    return fixed_now.date()


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def container(store):
    return build_container(
        store=store,
        admin_username="admin",
        admin_password="secret-pw",
        default_standard_hours=8,
        overtime_unit_hours=2,
    )


@pytest.fixture
def seeded_container(container):
    ensure_demo_data(container.store)
    return container
