"""
Employee Registry Backend: Employee Route Handlers
=====================================================

What:  POST /api/employees (create), GET /api/employees (list) and
       GET /api/employees/{id} (detail).
How:   Routes gather raw input, hand it to EmployeeService together with a
       request-scoped store, and pick the status code.

Create input:
    The four keys may arrive in the query string, a JSON object body, or a
    urlencoded/multipart form. All sources are merged into one mapping with
    body values winning over query values, so

        POST /api/employees?emp_name=Bob   {"emp_name": "Alice"}

    creates "Alice".
"""

import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, Request, Response

from app.exceptions import ValidationError
from app.repositories.base import EmployeeStore
from app.repositories.employee_repository import get_employee_store
from app.schemas.employee import (
    EmployeeCreatedResponse,
    EmployeeResponse,
    ErrorResponse,
)
from app.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Employees"])

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_request_input(request: Request) -> Dict[str, Any]:
    """
    Merge query parameters and body fields into one input mapping.

    Raises:
        ValidationError: JSON body is malformed or is not an object.
    """
    data: Dict[str, Any] = dict(request.query_params)
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith("application/json"):
        if not (await request.body()).strip():
            return data
        try:
            body = await request.json()
        except ValueError:
            raise ValidationError(message="Request body is not valid JSON")
        if not isinstance(body, dict):
            raise ValidationError(message="Request body must be a JSON object")
        data.update(body)
    elif content_type.startswith(_FORM_TYPES):
        form = await request.form()
        # Uploaded files carry no employee data
        data.update({key: value for key, value in form.items() if isinstance(value, str)})

    return data


@router.post(
    "/employees",
    status_code=201,
    response_model=EmployeeCreatedResponse,
    responses={
        201: {"description": "Employee created", "model": EmployeeCreatedResponse},
        400: {"description": "Malformed input", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Create an employee",
    description=(
        "Creates one employee from emp_name, emp_salary, emp_rate and emp_field, "
        "read from the query string, a JSON object or a form body. Every field is "
        "optional; missing fields are stored with their defaults."
    ),
)
async def create_employee(
    request: Request,
    store: EmployeeStore = Depends(get_employee_store),
) -> EmployeeCreatedResponse:
    payload = await read_request_input(request)
    employee = await employee_service.create_employee(store=store, payload=payload)
    return EmployeeCreatedResponse(data=employee)


@router.get(
    "/employees",
    response_model=List[EmployeeResponse],
    responses={
        200: {"description": "All employees ordered by id"},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="List all employees",
)
async def list_employees(
    response: Response,
    store: EmployeeStore = Depends(get_employee_store),
) -> List[EmployeeResponse]:
    """
    Return every employee.

    No pagination or filters. X-Total-Count mirrors the array length for
    clients that read counts from headers.
    """
    employees = await employee_service.list_employees(store=store)
    response.headers["X-Total-Count"] = str(len(employees))
    return employees


@router.get(
    "/employees/{employee_id}",
    response_model=EmployeeResponse,
    responses={
        200: {"description": "Employee details", "model": EmployeeResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Database error", "model": ErrorResponse},
    },
    summary="Get a single employee by ID",
)
async def get_employee(
    employee_id: int,
    store: EmployeeStore = Depends(get_employee_store),
) -> EmployeeResponse:
    return await employee_service.get_employee(store=store, employee_id=employee_id)
