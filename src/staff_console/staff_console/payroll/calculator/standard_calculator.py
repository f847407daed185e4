from __future__ import annotations

from ...core.enums import ExtraPayPolicy
from ..model import PayrollInput
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: holiday-worked days + overtime hours / standard hours."""

    policy = ExtraPayPolicy.ADDITIVE

    def extra_days(self, data: PayrollInput) -> float:
        return data.holiday_worked_days + self.overtime_days(data)
