"""
Employee Registry Backend: Employee Service
==============================================

What:  Create, list and fetch employees.
How:   Every method receives the store to use; the service itself holds no
       state, so one module-level instance serves all requests.
Who:   Called by app.routes.employees.

Create flow (POST /api/employees):
    ┌──────────────┐    ┌──────────────────┐    ┌───────────────┐
    │ input mapping│───▶│ EmployeeInput    │───▶│ store.insert  │
    │ (query+body) │    │ coerce, defaults │    │ (one row)     │
    └──────────────┘    └──────────────────┘    └───────────────┘

Error policy:
    Malformed input becomes ValidationError before the store is touched.
    DatabaseError from the store is not caught here; it reaches the global
    handler unchanged.
"""

import logging
from typing import Any, List, Mapping

from pydantic import ValidationError as PydanticValidationError

from app.config import settings
from app.exceptions import NotFoundError, ValidationError
from app.models.employee import Employee
from app.repositories.base import EmployeeStore
from app.schemas.employee import EmployeeInput, EmployeeResponse

logger = logging.getLogger(__name__)


def _to_validation_error(exc: PydanticValidationError) -> ValidationError:
    """Flatten Pydantic's error list into our 400 error."""
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        }
        for err in exc.errors()
    ]
    first = errors[0]
    return ValidationError(
        message=f"{first['field']}: {first['message']}",
        field=first["field"],
        context={"errors": errors},
    )


class EmployeeService:
    """
    Business logic for employee records.

    Responsibilities:
        - create_employee(): typed extraction, defaulting, one insert
        - list_employees(): every record in store order
        - get_employee(): single record with not-found handling
    """

    def parse_input(self, payload: Mapping[str, Any]) -> EmployeeInput:
        """
        Extract the four recognized keys from a raw input mapping.

        Raises:
            ValidationError: A present value has the wrong type or range.
        """
        try:
            return EmployeeInput.model_validate(dict(payload))
        except PydanticValidationError as e:
            raise _to_validation_error(e) from e

    async def create_employee(
        self,
        store: EmployeeStore,
        payload: Mapping[str, Any],
    ) -> EmployeeResponse:
        """
        Create one employee from a loosely-typed input mapping.

        Missing, null or blank keys take their defaults:
            emp_name   → "Unknown"
            emp_salary → 0.00
            emp_rate   → 0
            emp_field  → settings.employee_field_default

        Args:
            store:   Record store to insert into
            payload: Request input (query string merged with body)

        Returns:
            EmployeeResponse for the persisted row, including its id

        Raises:
            ValidationError: Input could not be coerced (nothing is inserted)
            DatabaseError:   The store rejected or could not perform the insert
        """
        values = self.parse_input(payload).resolve(settings.employee_field_default)

        employee = Employee(**values.model_dump())
        employee = await store.insert(employee)
        logger.info("Employee %s created (%s)", employee.id, employee.employee_name)

        return EmployeeResponse.model_validate(employee)

    async def list_employees(self, store: EmployeeStore) -> List[EmployeeResponse]:
        """
        Every stored employee, ordered by id. Empty store gives [].

        Raises:
            DatabaseError: The store could not be read.
        """
        employees = await store.list_all()
        logger.debug("Listed %d employees", len(employees))
        return [EmployeeResponse.model_validate(e) for e in employees]

    async def get_employee(self, store: EmployeeStore, employee_id: int) -> EmployeeResponse:
        employee = await store.get(employee_id)
        if employee is None:
            raise NotFoundError(resource="employee", resource_id=str(employee_id))
        return EmployeeResponse.model_validate(employee)


employee_service = EmployeeService()
