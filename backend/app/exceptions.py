"""
Employee Registry Backend: Exception Hierarchy
=================================================

What:  Application exceptions, each mapped to one HTTP status by the global
       handlers registered in app.main.
Who:   Raised by the repository (DatabaseError), the service (ValidationError,
       NotFoundError) and the routes (ValidationError for unreadable bodies).

Exception Hierarchy:
    RegistryError (base)   → 500 Internal Server Error
    ├── ValidationError    → 400 Bad Request
    ├── NotFoundError      → 404 Not Found
    └── DatabaseError      → 500 Internal Server Error (persistence failures)

Every exception carries a client-safe `message` and a `context` dict.
Context is logged server-side; only ValidationError returns it to the client.
"""

from typing import Any, Dict, Optional


class RegistryError(Exception):
    """
    Base exception for all registry errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, not returned except for 400s)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RegistryError):
    """
    Raised when client input cannot be turned into an employee.

    When:  Body is not valid JSON, JSON body is not an object, salary or rate
           cannot be coerced to a number, a string exceeds the column width.
    HTTP:  400 Bad Request

    Example response:
        {
            "error": "validation_error",
            "message": "emp_salary: Input should be a valid decimal",
            "details": {"field": "emp_salary", "errors": [...]}
        }
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(RegistryError):
    """
    Raised when a requested record does not exist.

    The repository returns None for a missing row; the service converts that
    into this exception so the route stays free of status-code logic.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(RegistryError):
    """
    Raised when the record store fails.

    What:  Connection refused or lost, constraint violation, statement timeout.
    HTTP:  500 Internal Server Error

    The client always receives a generic message. The original exception type
    and the operation name go into `context` and are only logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
