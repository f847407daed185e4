from __future__ import annotations

from datetime import date, datetime


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def in_month(day: date, year: int, month: int) -> bool:
    return day.year == int(year) and day.month == int(month)


def month_index(year: int, month: int) -> int:
    """Monotonic index so (year, month) pairs compare as plain ints."""
    return int(year) * 12 + (int(month) - 1)


def is_before_current_month(day: date, today: date) -> bool:
    return month_index(day.year, day.month) < month_index(today.year, today.month)


def has_month_elapsed(year: int, month: int, today: date) -> bool:
    """True only for months strictly before the month containing ``today``."""
    return month_index(year, month) < month_index(today.year, today.month)
