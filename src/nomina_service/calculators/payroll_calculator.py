"""Flat-rate payroll calculation for a single pay period."""

from __future__ import annotations

import calendar
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Protocol

from nomina_service.calculators.types import PayrollComputation

INCOME_TAX_RATE = Decimal("0.25")
SOCIAL_SECURITY_RATE = Decimal("0.13")

HOURS_PER_DAY = Decimal("8")
DEFAULT_DAYS_WORKED = Decimal("20")

DEFAULT_POSITION = "General"
DEPARTMENT_PREFIX = "DEP-"

JUNIOR_SUPERVISOR = "Supervisor de Desarrollo"
SENIOR_SUPERVISOR = "Gerente de Área"
DEFAULT_SUPERVISOR = "Supervisor General"

CENTS = Decimal("0.01")


class PayrollSubject(Protocol):
    """Fields the calculator reads from an employee-like record."""

    base_salary: Any
    monthly_hours: Any
    position: str | None


def _as_decimal(value: Any) -> Decimal:
    """Coerce to Decimal, treating absent or non-numeric values as zero."""
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


class PayrollCalculator:
    """Maps an employee record to its payroll figures for the current month.

    Deterministic in ``base_salary``, ``monthly_hours``, ``position`` and the
    evaluation date. Rates are fixed: 25% income tax and 13% social security,
    both on gross pay.
    """

    @staticmethod
    def round_to_cents(amount: Decimal) -> Decimal:
        return amount.quantize(CENTS, rounding=ROUND_HALF_UP)

    @staticmethod
    def days_worked(monthly_hours: Any) -> Decimal:
        hours = _as_decimal(monthly_hours)
        if hours > 0:
            return (hours / HOURS_PER_DAY).quantize(CENTS, rounding=ROUND_HALF_UP)
        return DEFAULT_DAYS_WORKED

    @staticmethod
    def department_code(position: str | None) -> str:
        source = position or DEFAULT_POSITION
        return f"{DEPARTMENT_PREFIX}{source[:3].upper()}"

    @staticmethod
    def supervisor_name(position: str | None) -> str:
        """Pick the supervisor tier by substring. Junior is checked first."""
        source = position or DEFAULT_POSITION
        if "Jr" in source or "Junior" in source:
            return JUNIOR_SUPERVISOR
        if "Senior" in source or "Sr" in source:
            return SENIOR_SUPERVISOR
        return DEFAULT_SUPERVISOR

    @staticmethod
    def period_bounds(as_of: date) -> tuple[date, date]:
        """First and last calendar day of ``as_of``'s month, inclusive."""
        last_day = calendar.monthrange(as_of.year, as_of.month)[1]
        return as_of.replace(day=1), as_of.replace(day=last_day)

    @classmethod
    def compute(cls, employee: PayrollSubject, as_of: date | None = None) -> PayrollComputation:
        gross = _as_decimal(employee.base_salary)
        income_tax = gross * INCOME_TAX_RATE
        social_security = gross * SOCIAL_SECURITY_RATE
        total_deductions = cls.round_to_cents(income_tax + social_security)
        gross = cls.round_to_cents(gross)

        period_start, period_end = cls.period_bounds(as_of or date.today())

        return PayrollComputation(
            department_code=cls.department_code(employee.position),
            supervisor_name=cls.supervisor_name(employee.position),
            days_worked=cls.days_worked(employee.monthly_hours),
            gross_pay=gross,
            income_tax=cls.round_to_cents(income_tax),
            social_security=cls.round_to_cents(social_security),
            total_deductions=total_deductions,
            net_pay=gross - total_deductions,
            period_start=period_start,
            period_end=period_end,
        )
