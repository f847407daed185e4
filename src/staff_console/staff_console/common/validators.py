from __future__ import annotations

import math
from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_month(year: Any, month: Any) -> tuple[int, int]:
    try:
        y, m = int(year), int(month)
    except (TypeError, ValueError):
        raise ValidationError("Invalid year/month") from None
    if not 1 <= m <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return y, m


def non_negative(value: Any) -> float:
    """Coerce a numeric input, clamping negatives (and blanks) to zero."""
    if value is None or value == "":
        return 0.0
    try:
        num = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Not a number: {value!r}") from None
    if not math.isfinite(num):
        raise ValidationError(f"Not a finite number: {value!r}")
    return num if num > 0 else 0.0
