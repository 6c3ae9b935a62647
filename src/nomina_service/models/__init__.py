"""SQLAlchemy ORM models."""

from nomina_service.models.base import Base, TimestampMixin
from nomina_service.models.employee import Employee
from nomina_service.models.payroll import PayrollEntry

__all__ = [
    "Base",
    "TimestampMixin",
    "Employee",
    "PayrollEntry",
]
