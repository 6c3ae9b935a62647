"""Payroll entry model."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from nomina_service.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from nomina_service.models.employee import Employee


class PayrollEntry(Base, TimestampMixin):
    """Append-only payroll entry bound to an employee's surrogate key."""

    __tablename__ = "nominas"

    id: Mapped[int] = mapped_column("IdNomina", Integer, primary_key=True, autoincrement=True)
    employee_id: Mapped[int] = mapped_column(
        "id_empleado_interno",
        Integer,
        ForeignKey(
            "empleados.id",
            name="fk_empleado_nomina",
            ondelete="CASCADE",
            onupdate="CASCADE",
        ),
        nullable=False,
    )
    # Copy of the credential at creation time, readable without a join
    employee_external_id: Mapped[str | None] = mapped_column(
        "IdEmpleadoCredencial", String(50), nullable=True
    )
    department_code: Mapped[str | None] = mapped_column("IdDepartamento", String(100), nullable=True)
    supervisor_name: Mapped[str | None] = mapped_column("Supervisor", String(255), nullable=True)
    days_worked: Mapped[Decimal | None] = mapped_column("Dias_Trabajados", Numeric(5, 2), nullable=True)
    gross_pay: Mapped[Decimal | None] = mapped_column("TotalPercepciones", Numeric(10, 2), nullable=True)
    total_deductions: Mapped[Decimal | None] = mapped_column(
        "TotalDeducciones", Numeric(10, 2), nullable=True
    )
    net_pay: Mapped[Decimal | None] = mapped_column("TotalNetoPagado", Numeric(10, 2), nullable=True)
    period_start: Mapped[date | None] = mapped_column("fechaInicioPeriodo", Date, nullable=True)
    period_end: Mapped[date | None] = mapped_column("fechaFinPeriodo", Date, nullable=True)

    # Relationships
    employee: Mapped[Employee] = relationship(back_populates="payroll_entries")
