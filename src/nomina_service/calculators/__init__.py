"""Payroll calculation."""

from nomina_service.calculators.payroll_calculator import PayrollCalculator
from nomina_service.calculators.types import EmployeeInput, PayrollComputation

__all__ = [
    "PayrollCalculator",
    "EmployeeInput",
    "PayrollComputation",
]
