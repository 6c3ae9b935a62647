"""Payroll entry persistence."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy import exc as sa_exc, select
from sqlalchemy.ext.asyncio import AsyncSession

from nomina_service.database import storage_errors
from nomina_service.errors import ReferentialError
from nomina_service.models import Employee, PayrollEntry


@dataclass(frozen=True)
class PayrollListing:
    """A payroll entry joined with the employee attributes shown beside it."""

    entry: PayrollEntry
    employee_name: str | None
    employee_position: str | None


class PayrollRepository:
    """Repository for the append-only ``nominas`` table."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, entry: PayrollEntry) -> int:
        """Persist a new entry and return its id.

        The foreign key is checked by the storage engine, not here.

        Raises:
            ReferentialError: If ``entry.employee_id`` matches no employee
        """
        self.session.add(entry)
        try:
            with storage_errors():
                await self.session.flush()
        except sa_exc.IntegrityError as e:
            raise ReferentialError(entry.employee_id, details=str(e.orig)) from e
        return entry.id

    async def list_all_with_employee_info(self) -> list[PayrollListing]:
        """All entries with employee name and position, newest first."""
        query = (
            select(PayrollEntry, Employee.name, Employee.position)
            .join(Employee, PayrollEntry.employee_id == Employee.id)
            .order_by(PayrollEntry.id.desc())
        )
        with storage_errors():
            result = await self.session.execute(query)
            rows = result.all()

        return [
            PayrollListing(entry=entry, employee_name=name, employee_position=position)
            for entry, name, position in rows
        ]
