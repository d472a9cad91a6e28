"""
CodeMate Backend — Shared Schemas and Validators
==================================================

What:  Response envelopes shared by every router, plus validator helpers
       reused by the per-entity input schemas.

Partial-update convention:
    Update schemas declare every mutable field as Optional with default None.
    Pydantic records which fields the client actually sent in
    `model_fields_set`, so services apply `model_dump(exclude_unset=True)`:
        - field absent            → not in the dump → column untouched
        - field present with null → in the dump as None → column set to NULL
    Non-nullable columns reject an explicit null here, at the boundary.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import AnyUrl, BaseModel, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

MAX_ROW_ID = 2**31 - 1

# Integer primary/foreign key as accepted in request bodies
RowId = Annotated[int, Field(ge=1, le=MAX_ROW_ID)]

_url_adapter = TypeAdapter(AnyUrl)


def ensure_url(value: Optional[str]) -> Optional[str]:
    """Validate a URL but keep the caller's exact string (AnyUrl would normalize it)."""
    if value is None:
        return value
    try:
        _url_adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError(f"'{value}' is not a valid URL")
    return value


def reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("may be omitted but cannot be null")
    return value


class DeleteResponse(BaseModel):
    """
    What:  Result of a delete operation.
    Why:   Deletes are idempotent; "nothing matched" is `deleted: false`,
           never an error.
    """
    deleted: bool = Field(description="True if a row was actually removed")


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Example:
        {
            "error": "not_found",
            "message": "conversation with ID '42' was not found",
            "details": {"resource": "conversation", "resource_id": 42},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    timestamp: datetime = Field(description="Server time (UTC)")
    uptime_seconds: float = Field(description="Seconds since service started")
