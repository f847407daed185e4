from __future__ import annotations

from ...core.enums import ExtraPayPolicy
from ..model import PayrollInput
from .base import PayrollCalculator


class HolidayPrecedencePayrollCalculator(PayrollCalculator):
    """Single rule: holiday-worked days when any, otherwise overtime hours."""

    policy = ExtraPayPolicy.HOLIDAY_PRECEDENCE

    def extra_days(self, data: PayrollInput) -> float:
        if data.holiday_worked_days > 0:
            return data.holiday_worked_days
        return self.overtime_days(data)
