"""
Employee Registry Backend: Employee SQLAlchemy Model
=======================================================

What:  ORM model for the `employees` table.
Who:   Built by EmployeeService, persisted and loaded by EmployeeRepository,
       tracked by Alembic (revision 001).

Table Design:
    - Integer autoincrement id: the store-assigned identifier returned to clients
    - Four business columns, all NOT NULL: creation always fills them,
      substituting defaults for anything the client left out
    - NUMERIC(10, 2) salary: exact money arithmetic, never float
    - created_at / updated_at: UTC timestamps managed by the ORM
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import TIMESTAMP, Integer, Numeric, String, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Employee(Base):
    """
    One employee record.

    Lifecycle:
        Created through POST /api/employees and never modified or deleted
        by this service. Read back by the list and detail endpoints.
    """

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        comment="Store-assigned identifier",
    )

    employee_name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name; 'Unknown' when not supplied",
    )

    # Precision matches the validation in EmployeeInput (10 digits, 2 decimals)
    employee_salary: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        server_default=text("0"),
        comment="Salary; 0.00 when not supplied",
    )

    employee_rate: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        server_default=text("0"),
        comment="Rate; 0 when not supplied",
    )

    employee_field: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Field of work; configured fallback when not supplied",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="When this employee was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        nullable=False,
        default=_utcnow,
        onupdate=_utcnow,
        server_default=text("CURRENT_TIMESTAMP"),
        comment="Last modification time (UTC)",
    )

    def __repr__(self) -> str:
        return f"<Employee(id={self.id}, employee_name='{self.employee_name}')>"
