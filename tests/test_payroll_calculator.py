"""Unit tests for PayrollCalculator.

The calculator is pure, so these run without a database.
"""

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from hypothesis import given, strategies as st

from nomina_service.calculators.payroll_calculator import (
    DEFAULT_SUPERVISOR,
    JUNIOR_SUPERVISOR,
    SENIOR_SUPERVISOR,
    PayrollCalculator,
)
from nomina_service.calculators.types import EmployeeInput


def employee(sueldo=None, horas=None, puesto=None) -> EmployeeInput:
    return EmployeeInput(sueldo=sueldo, horas=horas, puesto=puesto)


class TestDeductions:
    """Flat 25% + 13% deduction model."""

    def test_ten_thousand_salary(self):
        result = PayrollCalculator.compute(employee(sueldo="10000"), as_of=date(2024, 5, 15))

        assert result.gross_pay == Decimal("10000.00")
        assert result.income_tax == Decimal("2500.00")
        assert result.social_security == Decimal("1300.00")
        assert result.total_deductions == Decimal("3800.00")
        assert result.net_pay == Decimal("6200.00")

    def test_missing_salary_is_zero(self):
        result = PayrollCalculator.compute(employee())

        assert result.gross_pay == Decimal("0")
        assert result.total_deductions == Decimal("0")
        assert result.net_pay == Decimal("0")

    def test_non_numeric_salary_is_zero(self):
        record = SimpleNamespace(base_salary="n/a", monthly_hours=None, position=None)

        result = PayrollCalculator.compute(record)

        assert result.gross_pay == Decimal("0")
        assert result.net_pay == Decimal("0")

    @given(
        st.decimals(
            min_value=Decimal("0"),
            max_value=Decimal("99999999.99"),
            places=2,
            allow_nan=False,
            allow_infinity=False,
        )
    )
    def test_deductions_are_38_percent(self, salary: Decimal):
        result = PayrollCalculator.compute(employee(sueldo=salary), as_of=date(2024, 1, 1))

        assert abs(result.total_deductions - salary * Decimal("0.38")) <= Decimal("0.005")
        assert abs(result.net_pay - salary * Decimal("0.62")) <= Decimal("0.005")
        assert result.net_pay == result.gross_pay - result.total_deductions


class TestDaysWorked:
    """Days derived from monthly hours at 8 hours per day."""

    @pytest.mark.parametrize(
        "hours,expected",
        [
            (160, Decimal("20.00")),
            (100, Decimal("12.50")),
            (1, Decimal("0.13")),
            (7, Decimal("0.88")),
        ],
    )
    def test_hours_to_days(self, hours, expected):
        assert PayrollCalculator.compute(employee(horas=hours)).days_worked == expected

    def test_zero_hours_defaults_to_twenty(self):
        assert PayrollCalculator.compute(employee(horas=0)).days_worked == Decimal("20")

    def test_missing_hours_defaults_to_twenty(self):
        assert PayrollCalculator.compute(employee()).days_worked == Decimal("20")

    @given(st.integers(min_value=1, max_value=100_000))
    def test_days_within_half_cent_of_exact(self, hours: int):
        days = PayrollCalculator.compute(employee(horas=hours)).days_worked

        assert abs(days - Decimal(hours) / 8) <= Decimal("0.005")
        assert days.as_tuple().exponent == -2


class TestDepartmentAndSupervisor:
    """Position-derived department code and supervisor tier."""

    @pytest.mark.parametrize(
        "position,expected",
        [
            ("Senior Dev", "DEP-SEN"),
            ("contador", "DEP-CON"),
            ("QA", "DEP-QA"),
            (None, "DEP-GEN"),
            ("", "DEP-GEN"),
        ],
    )
    def test_department_code(self, position, expected):
        assert PayrollCalculator.department_code(position) == expected

    @pytest.mark.parametrize(
        "position,expected",
        [
            ("Jr Developer", JUNIOR_SUPERVISOR),
            ("Junior Analyst", JUNIOR_SUPERVISOR),
            ("Senior Dev", SENIOR_SUPERVISOR),
            ("Sr Engineer", SENIOR_SUPERVISOR),
            ("Analyst", DEFAULT_SUPERVISOR),
            (None, DEFAULT_SUPERVISOR),
            # Case-sensitive match
            ("junior dev", DEFAULT_SUPERVISOR),
        ],
    )
    def test_supervisor_tiers(self, position, expected):
        assert PayrollCalculator.supervisor_name(position) == expected

    def test_junior_rule_wins_over_senior(self):
        assert PayrollCalculator.supervisor_name("Sr to Jr transfer") == JUNIOR_SUPERVISOR

    def test_senior_title_value(self):
        assert SENIOR_SUPERVISOR == "Gerente de Área"


class TestPeriodBounds:
    """Pay period is the calendar month of the evaluation date."""

    def test_leap_february(self):
        result = PayrollCalculator.compute(employee(), as_of=date(2024, 2, 10))

        assert result.period_start == date(2024, 2, 1)
        assert result.period_end == date(2024, 2, 29)

    def test_december(self):
        start, end = PayrollCalculator.period_bounds(date(2025, 12, 31))

        assert start == date(2025, 12, 1)
        assert end == date(2025, 12, 31)

    def test_defaults_to_today(self):
        today = date.today()

        result = PayrollCalculator.compute(employee())

        assert result.period_start == today.replace(day=1)
        assert result.period_start <= today <= result.period_end


class TestEmployeeInput:
    """Defaults and validation of incoming records."""

    def test_blank_numbers_default_to_zero(self):
        record = EmployeeInput.model_validate({"nombre": "Ana", "sueldo": None, "horas": ""})

        assert record.base_salary == Decimal("0")
        assert record.monthly_hours == 0

    def test_numeric_external_id_becomes_string(self):
        assert EmployeeInput.model_validate({"IdEmpleado": 42}).external_id == "42"

    @pytest.mark.parametrize(
        "sueldo,expected",
        [
            (0.1 + 0.2, Decimal("0.30")),
            ("1234.565", Decimal("1234.57")),
            ("99999999.994", Decimal("99999999.99")),
        ],
    )
    def test_salary_rounds_half_up_to_cents(self, sueldo, expected):
        assert EmployeeInput.model_validate({"sueldo": sueldo}).base_salary == expected

    @pytest.mark.parametrize(
        "record",
        [
            {"sueldo": -1},
            {"sueldo": "99999999.995"},
            {"sueldo": "abc"},
            {"horas": -8},
            {"puesto": "x" * 101},
        ],
    )
    def test_invalid_records_rejected(self, record):
        with pytest.raises(ValueError):
            EmployeeInput.model_validate(record)
