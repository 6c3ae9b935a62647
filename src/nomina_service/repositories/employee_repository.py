"""Employee persistence keyed by the external credential."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, exc as sa_exc, or_, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from nomina_service.calculators.types import EmployeeInput
from nomina_service.database import storage_errors
from nomina_service.errors import IntegrityError, StorageUnavailableError, ValidationError
from nomina_service.models import Employee

logger = logging.getLogger(__name__)

# Largest value an INTEGER surrogate key can hold
MAX_INTERNAL_ID = 2**31 - 1

_CONFLICT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


@dataclass(frozen=True)
class UpsertResult:
    """Outcome of an employee upsert."""

    internal_id: int
    was_inserted: bool


class EmployeeRepository:
    """Repository for the ``empleados`` table.

    Key invariants:
    1. ``external_id`` is unique (enforced by ``unique_id_empleado``)
    2. ``id`` is assigned once on insert and never changes
    3. Re-upserting an external id only touches name, salary and position
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    def _conflict_insert(self) -> Any:
        dialect = self.session.get_bind().dialect.name
        try:
            return _CONFLICT_INSERTS[dialect]
        except KeyError:
            raise StorageUnavailableError(
                f"Upsert is not supported on the '{dialect}' dialect"
            ) from None

    async def upsert(self, employee: EmployeeInput) -> UpsertResult:
        """Insert the employee or update the row sharing its external id.

        Raises:
            ValidationError: If the storage engine rejects the values
            IntegrityError: If the row cannot be found after the upsert
        """
        if not employee.external_id:
            raise ValidationError("IdEmpleado es requerido")

        insert = self._conflict_insert()
        stmt = (
            insert(Employee)
            .values(
                {
                    Employee.external_id: employee.external_id,
                    Employee.name: employee.name,
                    Employee.tax_id: employee.tax_id,
                    Employee.social_security_id: employee.social_security_id,
                    Employee.position: employee.position,
                    Employee.hire_date: employee.hire_date,
                    Employee.base_salary: employee.base_salary,
                    Employee.monthly_hours: employee.monthly_hours,
                }
            )
            .on_conflict_do_nothing(index_elements=["IdEmpleado"])
            .returning(Employee.id)
        )

        try:
            with storage_errors():
                inserted_id = (await self.session.execute(stmt)).scalar_one_or_none()
                if inserted_id is not None:
                    return UpsertResult(internal_id=inserted_id, was_inserted=True)

                # Conflict on external_id: update in place, then resolve the key
                await self.session.execute(
                    update(Employee)
                    .where(Employee.external_id == employee.external_id)
                    .values(
                        {
                            Employee.name: employee.name,
                            Employee.base_salary: employee.base_salary,
                            Employee.position: employee.position,
                        }
                    )
                    .execution_options(synchronize_session=False)
                )
                internal_id = await self.session.scalar(
                    select(Employee.id).where(Employee.external_id == employee.external_id)
                )
        except sa_exc.IntegrityError as e:
            raise ValidationError(
                f"Employee {employee.external_id} rejected by storage",
                details=str(e.orig),
            ) from e

        if internal_id is None:
            logger.error(
                "Upsert of employee %s reported a conflict but no row was found",
                employee.external_id,
            )
            raise IntegrityError(
                f"No se pudo obtener el ID interno del empleado {employee.external_id}"
            )
        return UpsertResult(internal_id=internal_id, was_inserted=False)

    async def find_by_external_id(self, external_id: str) -> Employee | None:
        with storage_errors():
            result = await self.session.execute(
                select(Employee).where(Employee.external_id == external_id)
            )
            return result.scalar_one_or_none()

    async def delete_by_id(self, identifier: str) -> int:
        """Delete by surrogate key or external id.

        Returns the number of employees deleted; their payroll entries go
        with them through the foreign key cascade.
        """
        conditions = [Employee.external_id == identifier]
        if identifier.isascii() and identifier.isdigit() and int(identifier) <= MAX_INTERNAL_ID:
            conditions.append(Employee.id == int(identifier))

        with storage_errors():
            result = await self.session.execute(
                delete(Employee)
                .where(or_(*conditions))
                .execution_options(synchronize_session=False)
            )
        return result.rowcount

    async def list_all(self) -> list[Employee]:
        """All employees, most recently created first."""
        with storage_errors():
            result = await self.session.execute(select(Employee).order_by(Employee.id.desc()))
            return list(result.scalars().all())
