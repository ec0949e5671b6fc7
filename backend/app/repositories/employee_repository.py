"""
Employee Registry Backend: SQLAlchemy Employee Repository
============================================================

What:  EmployeeStore backed by the `employees` table.
How:   Wraps one AsyncSession (owned by get_db_session). insert() flushes so
       the id is assigned inside the request transaction; the commit happens
       when the session dependency exits.
Who:   Built per request by get_employee_store(); consumed by EmployeeService.

Error translation:
    SQLAlchemyError covers driver errors wrapped by SQLAlchemy (IntegrityError,
    OperationalError, DBAPIError). OSError covers connection failures raised
    by the driver before SQLAlchemy can wrap them. Both become DatabaseError
    with the original type recorded in context for the server log.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.exceptions import DatabaseError
from app.models.employee import Employee
from app.repositories.base import EmployeeStore

logger = logging.getLogger(__name__)


class EmployeeRepository(EmployeeStore):
    """SQLAlchemy implementation of EmployeeStore."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def insert(self, employee: Employee) -> Employee:
        try:
            self.db.add(employee)
            # Flush assigns the autoincrement id without ending the transaction
            await self.db.flush()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Insert into employees failed: %s", str(e))
            raise DatabaseError(
                context={"operation": "insert", "error_type": type(e).__name__},
            ) from e
        return employee

    async def list_all(self) -> List[Employee]:
        try:
            result = await self.db.execute(select(Employee).order_by(Employee.id))
            return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            logger.error("Listing employees failed: %s", str(e), exc_info=True)
            raise DatabaseError(
                context={"operation": "list_all", "error_type": type(e).__name__},
            ) from e

    async def get(self, employee_id: int) -> Optional[Employee]:
        try:
            result = await self.db.execute(
                select(Employee).where(Employee.id == employee_id)
            )
            return result.scalar_one_or_none()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Fetching employee %s failed: %s", employee_id, str(e))
            raise DatabaseError(
                context={
                    "operation": "get",
                    "employee_id": employee_id,
                    "error_type": type(e).__name__,
                },
            ) from e


def get_employee_store(db: AsyncSession = Depends(get_db_session)) -> EmployeeStore:
    """FastAPI dependency: an EmployeeRepository bound to this request's session."""
    return EmployeeRepository(db)
