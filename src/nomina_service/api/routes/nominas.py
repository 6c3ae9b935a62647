"""Payroll entry API endpoints."""

import logging

from fastapi import APIRouter

from nomina_service.api.dependencies import DbSession
from nomina_service.api.schemas import (
    ErrorResponse,
    MessageResponse,
    PayrollEntryCreate,
    PayrollListingResponse,
)
from nomina_service.errors import NotFoundError, StorageUnavailableError, ValidationError
from nomina_service.models import PayrollEntry
from nomina_service.repositories.employee_repository import EmployeeRepository
from nomina_service.repositories.payroll_repository import PayrollRepository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/nominas", tags=["nominas"])


@router.post(
    "",
    response_model=MessageResponse,
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def save_payroll_entry(db: DbSession, payload: PayrollEntryCreate) -> MessageResponse:
    """Record a payroll entry for the employee with the given IdEmpleado."""
    if not payload.external_id:
        raise ValidationError("IdEmpleado es requerido")

    employee = await EmployeeRepository(db).find_by_external_id(payload.external_id)
    if employee is None:
        raise NotFoundError(
            f"El empleado con ID {payload.external_id} no existe en la base de datos."
        )

    entry = PayrollEntry(
        employee_id=employee.id,
        employee_external_id=payload.external_id,
        department_code=payload.department_code,
        supervisor_name=payload.supervisor_name,
        days_worked=payload.days_worked,
        gross_pay=payload.gross_pay,
        total_deductions=payload.total_deductions,
        net_pay=payload.net_pay,
    )
    try:
        entry_id = await PayrollRepository(db).insert(entry)
        await db.commit()
    except StorageUnavailableError as e:
        logger.error("Error saving payroll entry: %s", e.details or e.message)
        raise StorageUnavailableError(
            "Error al guardar nómina", details=e.details or e.message
        ) from e

    logger.info("Payroll entry %d saved for %s", entry_id, payload.external_id)
    return MessageResponse(message="Nómina guardada exitosamente")


@router.get(
    "",
    response_model=list[PayrollListingResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_payroll_entries(db: DbSession) -> list[PayrollListingResponse]:
    """List payroll entries with employee name and position, newest first."""
    listings = await PayrollRepository(db).list_all_with_employee_info()
    return [PayrollListingResponse.from_listing(item) for item in listings]
