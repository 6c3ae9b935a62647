"""Repositories over the storage engine."""

from nomina_service.repositories.employee_repository import EmployeeRepository, UpsertResult
from nomina_service.repositories.payroll_repository import PayrollListing, PayrollRepository

__all__ = [
    "EmployeeRepository",
    "UpsertResult",
    "PayrollRepository",
    "PayrollListing",
]
