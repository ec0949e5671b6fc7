"""Create employees table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

Creates the `employees` table. Column definitions match
app/models/employee.py.

Rollback: downgrade() drops the table and every employee in it.
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "employees",
        sa.Column(
            "id",
            sa.Integer(),
            autoincrement=True,
            nullable=False,
            comment="Store-assigned identifier",
        ),
        sa.Column(
            "employee_name",
            sa.String(255),
            nullable=False,
            comment="Display name; 'Unknown' when not supplied",
        ),
        sa.Column(
            "employee_salary",
            sa.Numeric(10, 2),
            nullable=False,
            server_default=sa.text("0"),
            comment="Salary; 0.00 when not supplied",
        ),
        sa.Column(
            "employee_rate",
            sa.Integer(),
            nullable=False,
            server_default=sa.text("0"),
            comment="Rate; 0 when not supplied",
        ),
        sa.Column(
            "employee_field",
            sa.String(255),
            nullable=False,
            comment="Field of work; configured fallback when not supplied",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this employee was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="Last modification time (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("employees")
