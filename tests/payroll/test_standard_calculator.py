import pytest

from staff_console.core.exceptions import ValidationError
from staff_console.payroll.calculator.standard_calculator import StandardPayrollCalculator
from staff_console.payroll.model import PayrollInput


def test_holiday_worked_day_paid_at_per_day_rate():
    calc = StandardPayrollCalculator()
    result = calc.compute(
        PayrollInput(
            employee_id="1",
            monthly_salary=3000,
            leave_days=2,
            holiday_worked_days=1,
            extra_hours=0,
            standard_hours=8,
        )
    )

    assert result.per_day_salary == 100
    assert result.payable_days == 28
    assert result.extra_days == 1
    assert result.extra_pay == 100
    assert result.final_total == 2900


def test_overtime_hours_converted_to_day_equivalents():
    calc = StandardPayrollCalculator()
    result = calc.compute(
        PayrollInput(employee_id="1", monthly_salary=3000, leave_days=0, holiday_worked_days=0, extra_hours=16, standard_hours=8)
    )

    assert result.payable_days == 30
    assert result.extra_days == 2
    assert result.extra_pay == 200
    assert result.final_total == 3200


def test_payable_days_never_negative():
    calc = StandardPayrollCalculator()
    result = calc.compute(PayrollInput(employee_id="1", monthly_salary=3000, leave_days=35, standard_hours=8))

    assert result.payable_days == 0
    assert result.final_total == 0


def test_half_day_leave_granularity():
    calc = StandardPayrollCalculator()
    result = calc.compute(PayrollInput(employee_id="1", monthly_salary=3000, leave_days=1.5, standard_hours=8))

    assert result.payable_days == 28.5
    assert result.final_total == 2850


def test_negative_inputs_are_clamped_to_zero():
    calc = StandardPayrollCalculator()
    result = calc.compute(
        PayrollInput(
            employee_id="1",
            monthly_salary=3000,
            leave_days=-4,
            holiday_worked_days=-1,
            extra_hours=-10,
            standard_hours=8,
        )
    )

    assert result.payable_days == 30
    assert result.extra_days == 0
    assert result.final_total == 3000


def test_negative_salary_pays_nothing():
    calc = StandardPayrollCalculator()
    result = calc.compute(PayrollInput(employee_id="1", monthly_salary=-500, standard_hours=8))

    assert result.per_day_salary == 0
    assert result.final_total == 0


def test_non_positive_standard_hours_falls_back_to_default():
    calc = StandardPayrollCalculator(default_standard_hours=8)
    result = calc.compute(PayrollInput(employee_id="1", monthly_salary=3000, extra_hours=16, standard_hours=0))

    assert result.extra_days == 2


def test_compute_is_deterministic():
    calc = StandardPayrollCalculator()
    data = PayrollInput(employee_id="1", monthly_salary=3200, leave_days=2.5, holiday_worked_days=1, extra_hours=6, standard_hours=10)

    assert calc.compute(data) == calc.compute(data)


@pytest.mark.parametrize("bad", ["1e400", "inf", float("-inf"), float("nan")])
def test_non_finite_inputs_are_rejected(bad):
    calc = StandardPayrollCalculator()

    with pytest.raises(ValidationError):
        calc.compute(PayrollInput(employee_id="1", monthly_salary=bad, standard_hours=8))
    with pytest.raises(ValidationError):
        calc.compute(PayrollInput(employee_id="1", monthly_salary=3000, extra_hours=bad, standard_hours=8))
