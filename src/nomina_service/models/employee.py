"""Employee model."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, Date, Integer, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nomina_service.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from nomina_service.models.payroll import PayrollEntry


class Employee(Base, TimestampMixin):
    """Employee record.

    ``id`` is the surrogate key used by foreign keys; ``external_id`` is the
    caller-facing credential and the upsert conflict target.
    """

    __tablename__ = "empleados"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    external_id: Mapped[str] = mapped_column("IdEmpleado", String(50), nullable=False)
    name: Mapped[str | None] = mapped_column("nombre", String(255), nullable=True)
    tax_id: Mapped[str | None] = mapped_column("rfc", String(13), nullable=True)
    social_security_id: Mapped[str | None] = mapped_column("nss", String(20), nullable=True)
    position: Mapped[str | None] = mapped_column("puesto", String(100), nullable=True)
    hire_date: Mapped[date | None] = mapped_column("fechaIngreso", Date, nullable=True)
    base_salary: Mapped[Decimal] = mapped_column(
        "sueldo", Numeric(10, 2), nullable=False, default=Decimal("0")
    )
    monthly_hours: Mapped[int] = mapped_column("horas", Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint("IdEmpleado", name="unique_id_empleado"),
        CheckConstraint("sueldo >= 0", name="empleados_sueldo_check"),
        CheckConstraint("horas >= 0", name="empleados_horas_check"),
    )

    # Relationships
    payroll_entries: Mapped[list[PayrollEntry]] = relationship(
        back_populates="employee",
        passive_deletes=True,
    )
