from __future__ import annotations

from dataclasses import dataclass

from ...core.constants import DEFAULT_STANDARD_HOURS
from ...core.enums import ExtraPayPolicy
from ...core.exceptions import ValidationError
from .base import PayrollCalculator
from .holiday_precedence_calculator import HolidayPrecedencePayrollCalculator
from .standard_calculator import StandardPayrollCalculator

_CALCULATORS: dict[ExtraPayPolicy, type[PayrollCalculator]] = {
    ExtraPayPolicy.ADDITIVE: StandardPayrollCalculator,
    ExtraPayPolicy.HOLIDAY_PRECEDENCE: HolidayPrecedencePayrollCalculator,
}


@dataclass
class PayrollCalculatorFactory:
    """Factory Pattern: choose the calculator for the configured extra-pay policy."""

    default_standard_hours: float = DEFAULT_STANDARD_HOURS

    def for_policy(self, policy) -> PayrollCalculator:
        try:
            policy = ExtraPayPolicy(policy)
        except ValueError:
            raise ValidationError(f"Unknown extra pay policy: {policy!r}") from None
        return _CALCULATORS[policy](default_standard_hours=self.default_standard_hours)
