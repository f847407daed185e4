from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.constants import DEFAULT_STANDARD_HOURS, PAYROLL_BASIS_DAYS
from ...core.enums import ExtraPayPolicy
from ..model import PayrollInput, PayrollResult


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for the extra-pay rule).

    Salary is always normalised to a fixed 30-day month. Holiday-worked days
    and overtime hours become day-equivalents paid at the per-day rate; the
    subclasses only decide how those two sources combine.
    """

    policy: ExtraPayPolicy

    def __init__(self, *, default_standard_hours: float = DEFAULT_STANDARD_HOURS):
        self._default_standard_hours = float(default_standard_hours)

    @property
    def default_standard_hours(self) -> float:
        return self._default_standard_hours

    def compute(self, data: PayrollInput) -> PayrollResult:
        data = data.normalized(default_standard_hours=self._default_standard_hours)

        per_day_salary = data.monthly_salary / PAYROLL_BASIS_DAYS
        payable_days = max(0.0, PAYROLL_BASIS_DAYS - data.leave_days)
        extra_days = self.extra_days(data)
        extra_pay = extra_days * per_day_salary
        final_total = payable_days * per_day_salary + extra_pay

        return PayrollResult(
            per_day_salary=per_day_salary,
            payable_days=payable_days,
            extra_days=extra_days,
            extra_pay=extra_pay,
            final_total=final_total,
        )

    @staticmethod
    def overtime_days(data: PayrollInput) -> float:
        return data.extra_hours / data.standard_hours

    @abstractmethod
    def extra_days(self, data: PayrollInput) -> float:
        raise NotImplementedError
