"""
CodeMate Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    CodeMateError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    └── NotFoundError            → 404 Not Found

Store errors are NOT wrapped here: sqlalchemy.exc.IntegrityError (duplicate
email, dangling foreign key) propagates from the services unchanged and is
mapped to 409 by main.py.
"""

from typing import Any, Dict, Optional


class CodeMateError(Exception):
    """
    Base exception for all CodeMate application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where the handler chooses)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CodeMateError):
    """
    Raised when client input passes schema validation but breaks a business rule.

    When:    A code snippet references a message from a different conversation.
    HTTP:    400 Bad Request

    Schema-level failures (wrong type, bad enum value, missing field) never get
    this far: FastAPI rejects them with 422 before a service runs.
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


class NotFoundError(CodeMateError):
    """
    Raised when a referenced resource does not exist.

    When:    Updating a missing row, or creating a row whose parent is missing.
             Also raised when a project exists but is not owned by the acting
             user, so non-owners cannot probe which project ids exist.
    HTTP:    404 Not Found
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id is not None:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
