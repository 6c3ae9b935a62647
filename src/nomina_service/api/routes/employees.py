"""Employee API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Path
from sqlalchemy.exc import SQLAlchemyError

from nomina_service.api.dependencies import DbSession
from nomina_service.api.schemas import (
    EmployeeBatchRequest,
    EmployeeBatchResponse,
    EmployeeResponse,
    ErrorResponse,
    MessageResponse,
)
from nomina_service.errors import NominaError, NotFoundError, StorageUnavailableError
from nomina_service.repositories.employee_repository import EmployeeRepository
from nomina_service.services.ingestion_service import IngestionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get(
    "",
    response_model=list[EmployeeResponse],
    responses={500: {"model": ErrorResponse}},
)
async def list_employees(db: DbSession) -> list[EmployeeResponse]:
    """List employees, newest first."""
    employees = await EmployeeRepository(db).list_all()
    logger.info("Employees found: %d", len(employees))
    return [EmployeeResponse.model_validate(e) for e in employees]


@router.post(
    "",
    response_model=EmployeeBatchResponse,
    response_model_exclude_none=True,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def save_employees(db: DbSession, payload: EmployeeBatchRequest) -> EmployeeBatchResponse:
    """Upsert a batch of employees and generate a payroll entry for each.

    Per-record failures are reported in ``errores``; they never fail the
    request.
    """
    logger.info("Employees received: %d", len(payload.employees))
    try:
        summary = await IngestionService(db).ingest(payload.employees)
    except (NominaError, SQLAlchemyError) as e:
        logger.exception("Error saving employees")
        raise StorageUnavailableError(
            "Error al guardar empleados",
            details=e.message if isinstance(e, NominaError) else str(e),
        ) from e
    return EmployeeBatchResponse.from_summary(summary)


@router.delete(
    "/{employee_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def delete_employee(
    db: DbSession,
    employee_id: Annotated[str, Path()],
) -> MessageResponse:
    """Delete an employee by internal id or IdEmpleado, with its payroll entries."""
    deleted = await EmployeeRepository(db).delete_by_id(employee_id)
    if deleted == 0:
        raise NotFoundError("Empleado no encontrado")
    await db.commit()
    logger.info("Employee %s deleted", employee_id)
    return MessageResponse(message="Empleado eliminado")
