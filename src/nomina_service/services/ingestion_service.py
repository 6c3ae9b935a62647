"""Batch ingestion of employees with automatic payroll generation.

Each record is processed on its own, in input order:

1. Assign a generated ``IdEmpleado`` when the caller did not send one
2. Validate and upsert the employee, committing on success
3. Compute the month's payroll and insert it against the internal id

A failed upsert skips the record. A failed payroll insert is logged and
counted separately; the employee stays saved.
"""

from __future__ import annotations

import logging
import secrets
import string
import time
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Callable, Iterable, MutableMapping

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from nomina_service.calculators.payroll_calculator import PayrollCalculator
from nomina_service.calculators.types import EmployeeInput
from nomina_service.errors import NominaError
from nomina_service.models import PayrollEntry
from nomina_service.repositories.employee_repository import EmployeeRepository
from nomina_service.repositories.payroll_repository import PayrollRepository

logger = logging.getLogger(__name__)

_SUFFIX_ALPHABET = string.digits + string.ascii_lowercase


def generate_external_id() -> str:
    """Build ``EMP-<epoch ms>-<9 base36 chars>``.

    Unique enough for interactive use; two calls in the same millisecond
    collide only if the random suffixes match as well.
    """
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(9))
    return f"EMP-{time.time_ns() // 1_000_000}-{suffix}"


def describe_error(exc: Exception) -> str:
    """One-line message for an item-level failure."""
    if isinstance(exc, PydanticValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
    if isinstance(exc, NominaError):
        return exc.message
    return str(exc)


@dataclass(frozen=True)
class IngestionError:
    """A record that could not be saved."""

    employee: str
    error: str


@dataclass(frozen=True)
class ItemOutcome:
    """Result of processing one record."""

    employee_saved: bool
    payroll_created: bool = False
    error: IngestionError | None = None


@dataclass(frozen=True)
class IngestionSummary:
    """Aggregated result of a batch."""

    succeeded: int = 0
    payroll_created: int = 0
    skipped: int = 0
    errors: tuple[IngestionError, ...] = field(default_factory=tuple)

    def record(self, outcome: ItemOutcome) -> IngestionSummary:
        """Fold one outcome into a new summary."""
        if not outcome.employee_saved:
            errors = self.errors + ((outcome.error,) if outcome.error else ())
            return replace(self, skipped=self.skipped + 1, errors=errors)
        return replace(
            self,
            succeeded=self.succeeded + 1,
            payroll_created=self.payroll_created + int(outcome.payroll_created),
        )


class IngestionService:
    """Upserts a batch of employees and creates a payroll entry for each.

    Items run sequentially on one session, so a batch holds at most one
    pooled connection. Every step commits or rolls back on its own; an
    employee save is never undone by its payroll insert failing.
    """

    def __init__(
        self,
        session: AsyncSession,
        id_factory: Callable[[], str] = generate_external_id,
        today: Callable[[], date] = date.today,
    ):
        self.session = session
        self.employees = EmployeeRepository(session)
        self.payroll = PayrollRepository(session)
        self._id_factory = id_factory
        self._today = today

    async def ingest(self, records: Iterable[MutableMapping[str, Any]]) -> IngestionSummary:
        summary = IngestionSummary()
        for record in records:
            summary = summary.record(await self._process(record))

        logger.info(
            "Summary: %d employees processed, %d payrolls created, %d skipped",
            summary.succeeded,
            summary.payroll_created,
            summary.skipped,
        )
        if summary.errors:
            logger.error("Errors found: %s", [(e.employee, e.error) for e in summary.errors])
        return summary

    async def _process(self, record: MutableMapping[str, Any]) -> ItemOutcome:
        if not record.get("IdEmpleado"):
            record["IdEmpleado"] = self._id_factory()
            logger.info(
                "Employee without IdEmpleado, generated %s for %s",
                record["IdEmpleado"],
                record.get("nombre"),
            )
        label = str(record.get("nombre") or record["IdEmpleado"])

        try:
            employee = EmployeeInput.model_validate(record)
            result = await self.employees.upsert(employee)
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error("Error saving employee %s: %s", record["IdEmpleado"], describe_error(e))
            return ItemOutcome(
                employee_saved=False,
                error=IngestionError(employee=label, error=describe_error(e)),
            )

        logger.info(
            "Employee %s: %s - %s (internal id %d)",
            "saved" if result.was_inserted else "updated",
            employee.external_id,
            employee.name,
            result.internal_id,
        )
        return ItemOutcome(
            employee_saved=True,
            payroll_created=await self._create_payroll(employee, result.internal_id, label),
        )

    async def _create_payroll(self, employee: EmployeeInput, internal_id: int, label: str) -> bool:
        try:
            computation = PayrollCalculator.compute(employee, as_of=self._today())
            entry = PayrollEntry(
                employee_id=internal_id,
                employee_external_id=employee.external_id,
                department_code=computation.department_code,
                supervisor_name=computation.supervisor_name,
                days_worked=computation.days_worked,
                gross_pay=computation.gross_pay,
                total_deductions=computation.total_deductions,
                net_pay=computation.net_pay,
                period_start=computation.period_start,
                period_end=computation.period_end,
            )
            await self.payroll.insert(entry)
            await self.session.commit()
        except Exception:
            # No retry: the employee row is already committed
            await self.session.rollback()
            logger.exception("Error creating payroll for %s (internal id %d)", label, internal_id)
            return False

        logger.info("Payroll created for %s (internal id %d)", label, internal_id)
        return True
