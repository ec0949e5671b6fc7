"""
Employee Registry Backend: Pydantic Request/Response Schemas
===============================================================

What:  The typed extraction of create-request input, and the response shapes.
Why:   Clients send four loosely-typed keys (emp_name, emp_salary, emp_rate,
       emp_field) through a query string, a JSON object or a form. EmployeeInput
       pins them to a fixed record with coercion, so the service never reads
       a dynamic mapping.

Request vs storage naming:
    Requests use the short `emp_*` keys; stored records and responses use
    the `employee_*` column names. EmployeeInput.resolve() is the one place
    the two meet.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

# ── Defaults for absent input ─────────────────────────────────────────────
# employee_field's fallback is configurable (settings.employee_field_default)
DEFAULT_EMPLOYEE_NAME = "Unknown"
DEFAULT_EMPLOYEE_SALARY = Decimal("0.00")
DEFAULT_EMPLOYEE_RATE = 0
# Largest value a signed 32-bit INTEGER column accepts
MAX_EMPLOYEE_RATE = 2**31 - 1


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeInput(BaseModel):
    """
    The four recognized create keys, each optional.

    Absent, null and blank values all come out as None here and are
    replaced by defaults in resolve(). Unrecognized keys are ignored.

    Constraints mirror the employees table so a bad value is rejected with
    a 400 instead of failing inside the INSERT:
        emp_salary: decimal >= 0, at most 10 digits with 2 decimal places
        emp_rate:   integer >= 0 that fits a 32-bit INTEGER column
        emp_name / emp_field: at most 255 characters
    """
    emp_name: Optional[str] = Field(default=None, max_length=255)
    emp_salary: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=10, decimal_places=2
    )
    emp_rate: Optional[int] = Field(default=None, ge=0, le=MAX_EMPLOYEE_RATE)
    emp_field: Optional[str] = Field(default=None, max_length=255)

    model_config = {"extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def blank_as_missing(cls, v: Any) -> Any:
        """Form posts send empty inputs as ""; treat them like omitted keys."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def resolve(self, field_default: str) -> "EmployeeCreate":
        """Substitute defaults for every missing key."""
        return EmployeeCreate(
            employee_name=self.emp_name if self.emp_name is not None else DEFAULT_EMPLOYEE_NAME,
            employee_salary=(
                self.emp_salary if self.emp_salary is not None else DEFAULT_EMPLOYEE_SALARY
            ),
            employee_rate=self.emp_rate if self.emp_rate is not None else DEFAULT_EMPLOYEE_RATE,
            employee_field=self.emp_field if self.emp_field is not None else field_default,
        )


class EmployeeCreate(BaseModel):
    """Fully resolved values for one new row. No field is ever None."""
    employee_name: str
    employee_salary: Decimal
    employee_rate: int
    employee_field: str


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class EmployeeResponse(BaseModel):
    """
    A stored employee as returned by every endpoint.

    Salary is serialized the way Pydantic serializes Decimal in JSON mode
    (a string such as "5000.00"), which keeps the cents exact.
    """
    id: int = Field(description="Store-assigned identifier")
    employee_name: str = Field(description="Employee name")
    employee_salary: Decimal = Field(description="Salary, two decimal places")
    employee_rate: int = Field(description="Rate")
    employee_field: str = Field(description="Field of work")
    created_at: datetime = Field(description="Creation timestamp (UTC)")
    updated_at: datetime = Field(description="Last update timestamp (UTC)")

    model_config = {"from_attributes": True}


class EmployeeCreatedResponse(BaseModel):
    """Envelope for POST /api/employees (HTTP 201)."""
    status: str = Field(default="success", description="Always 'success' on 201")
    message: str = Field(
        default="Employee created successfully",
        description="Human-readable success message",
    )
    data: EmployeeResponse = Field(description="The created employee")


# ══════════════════════════════════════════════════════════════════════════
# Shared Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body returned by every exception handler.

    Example:
        {
            "error": "validation_error",
            "message": "emp_rate: Input should be a valid integer",
            "details": {"field": "emp_rate"},
            "request_id": "1f3a9c2e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
