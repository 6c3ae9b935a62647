"""Pydantic schemas for API request/response models.

Field names on the wire keep the Spanish column names clients already use.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nomina_service.repositories.payroll_repository import PayrollListing
from nomina_service.services.ingestion_service import IngestionSummary

# Upper bounds of the Numeric(5, 2) and Numeric(10, 2) payroll columns
MAX_DAYS_WORKED = Decimal("1000")
MAX_AMOUNT = Decimal("1e8")


# ============================================================================
# Employee schemas
# ============================================================================


class EmployeeResponse(BaseModel):
    """Schema for an employee row."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    external_id: str = Field(serialization_alias="IdEmpleado")
    name: str | None = Field(default=None, serialization_alias="nombre")
    tax_id: str | None = Field(default=None, serialization_alias="rfc")
    social_security_id: str | None = Field(default=None, serialization_alias="nss")
    position: str | None = Field(default=None, serialization_alias="puesto")
    hire_date: date | None = Field(default=None, serialization_alias="fechaIngreso")
    base_salary: Decimal = Field(serialization_alias="sueldo")
    monthly_hours: int = Field(serialization_alias="horas")
    created_at: datetime | None = Field(default=None, serialization_alias="fechaCreacion")


class EmployeeBatchRequest(BaseModel):
    """Schema for a batch of employee records.

    Items stay loosely typed so one malformed record fails alone instead
    of rejecting the whole request.
    """

    employees: list[dict[str, Any]]


class IngestionErrorItem(BaseModel):
    """A record skipped during batch ingestion."""

    empleado: str
    error: str


class EmployeeBatchResponse(BaseModel):
    """Schema for batch ingestion summary."""

    message: str
    procesados: int
    nominasCreadas: int
    omitidos: int
    errores: list[IngestionErrorItem] | None = None

    @classmethod
    def from_summary(cls, summary: IngestionSummary) -> "EmployeeBatchResponse":
        return cls(
            message="Empleados procesados correctamente",
            procesados=summary.succeeded,
            nominasCreadas=summary.payroll_created,
            omitidos=summary.skipped,
            errores=[
                IngestionErrorItem(empleado=e.employee, error=e.error)
                for e in summary.errors
            ]
            or None,
        )


# ============================================================================
# Payroll schemas
# ============================================================================


class PayrollEntryCreate(BaseModel):
    """Schema for recording a payroll entry by hand."""

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    external_id: str | None = Field(default=None, alias="IdEmpleado")
    department_code: str | None = Field(default=None, alias="IdDepartamento", max_length=100)
    supervisor_name: str | None = Field(default=None, alias="Supervisor", max_length=255)
    days_worked: Decimal | None = Field(
        default=None, alias="Dias_Trabajados", ge=0, lt=MAX_DAYS_WORKED
    )
    gross_pay: Decimal | None = Field(
        default=None, alias="TotalPercepciones", ge=0, lt=MAX_AMOUNT
    )
    total_deductions: Decimal | None = Field(
        default=None, alias="TotalDeducciones", ge=0, lt=MAX_AMOUNT
    )
    net_pay: Decimal | None = Field(
        default=None, alias="TotalNetoPagado", gt=-MAX_AMOUNT, lt=MAX_AMOUNT
    )


class PayrollListingResponse(BaseModel):
    """Schema for a payroll entry joined with employee name and position."""

    id: int = Field(serialization_alias="IdNomina")
    employee_id: int = Field(serialization_alias="id_empleado_interno")
    employee_external_id: str | None = Field(default=None, serialization_alias="IdEmpleadoCredencial")
    department_code: str | None = Field(default=None, serialization_alias="IdDepartamento")
    supervisor_name: str | None = Field(default=None, serialization_alias="Supervisor")
    days_worked: Decimal | None = Field(default=None, serialization_alias="Dias_Trabajados")
    gross_pay: Decimal | None = Field(default=None, serialization_alias="TotalPercepciones")
    total_deductions: Decimal | None = Field(default=None, serialization_alias="TotalDeducciones")
    net_pay: Decimal | None = Field(default=None, serialization_alias="TotalNetoPagado")
    created_at: datetime | None = Field(default=None, serialization_alias="fechaCreacion")
    period_start: date | None = Field(default=None, serialization_alias="fechaInicioPeriodo")
    period_end: date | None = Field(default=None, serialization_alias="fechaFinPeriodo")
    employee_name: str | None = Field(default=None, serialization_alias="nombre")
    employee_position: str | None = Field(default=None, serialization_alias="puesto")

    @classmethod
    def from_listing(cls, listing: PayrollListing) -> "PayrollListingResponse":
        return cls(
            **listing.entry.to_dict(),
            employee_name=listing.employee_name,
            employee_position=listing.employee_position,
        )


# ============================================================================
# Generic schemas
# ============================================================================


class MessageResponse(BaseModel):
    """Schema for a plain acknowledgement."""

    message: str


class RootResponse(BaseModel):
    """Schema for the service index."""

    message: str
    endpoints: list[str]
    frontend: str


class ErrorResponse(BaseModel):
    """Schema for error response."""

    error: str
    details: Any | None = None
