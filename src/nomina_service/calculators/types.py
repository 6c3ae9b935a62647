"""Type definitions for the payroll calculation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# Upper bound of a Numeric(10, 2) column
MAX_SALARY = Decimal("1e8")


class EmployeeInput(BaseModel):
    """An incoming employee record.

    Every field is optional. Absent money and hours default to zero; the
    external id is filled in by the ingestion workflow when missing.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    external_id: str | None = Field(default=None, alias="IdEmpleado", max_length=50)
    name: str | None = Field(default=None, alias="nombre", max_length=255)
    tax_id: str | None = Field(default=None, alias="rfc", max_length=13)
    social_security_id: str | None = Field(default=None, alias="nss", max_length=20)
    position: str | None = Field(default=None, alias="puesto", max_length=100)
    hire_date: date | None = Field(default=None, alias="fechaIngreso")
    base_salary: Decimal = Field(default=Decimal("0"), alias="sueldo", ge=0, lt=MAX_SALARY)
    monthly_hours: int = Field(default=0, alias="horas", ge=0)

    @field_validator("base_salary", "monthly_hours", mode="before")
    @classmethod
    def _blank_to_zero(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0
        return value

    @field_validator("base_salary", mode="after")
    @classmethod
    def _round_to_cents(cls, value: Decimal) -> Decimal:
        rounded = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
        if rounded >= MAX_SALARY:
            raise ValueError("sueldo must be less than 100000000")
        return rounded

    @field_validator("name", "tax_id", "social_security_id", "position", "hire_date", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


@dataclass(frozen=True)
class PayrollComputation:
    """Derived payroll-period figures for one employee."""

    department_code: str
    supervisor_name: str
    days_worked: Decimal
    gross_pay: Decimal
    income_tax: Decimal
    social_security: Decimal
    total_deductions: Decimal
    net_pay: Decimal
    period_start: date
    period_end: date
