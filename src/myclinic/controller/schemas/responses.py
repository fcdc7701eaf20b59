"""Response schemas for the MyClinic API.

This module provides consistent response formats for success and error cases.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

from myclinic.validation.violations import Violation

# Generic type for response data
T = TypeVar("T")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ErrorDetail(BaseModel):
    """Detailed error information."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    field: Optional[str] = Field(None, description="Field name if validation error")
    details: Optional[Dict[str, Any]] = Field(
        None, description="Additional error context"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "code": "CONSTRAINT_VIOLATION",
                "message": "amount must not be less than 1",
                "field": "amount",
                "details": {"constraint": "minimum"},
            }
        }

    @classmethod
    def from_violation(cls, violation: Violation) -> "ErrorDetail":
        """Build an error detail from a schema violation."""
        return cls(
            code=violation.kind.value,
            message=violation.message,
            field=violation.field,
            details={"constraint": violation.constraint.value},
        )


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = Field(False, description="Always false for errors")
    error: ErrorDetail = Field(..., description="Error details")
    errors: Optional[List[ErrorDetail]] = Field(
        None, description="Multiple errors (e.g., validation)"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow, description="Error timestamp (UTC)"
    )
    request_id: Optional[str] = Field(None, description="Request ID for tracing")
    path: Optional[str] = Field(None, description="API path that caused the error")
    method: Optional[str] = Field(None, description="HTTP method")

    stack_trace: Optional[str] = Field(
        None, description="Stack trace (development only)"
    )
    debug_info: Optional[Dict[str, Any]] = Field(
        None, description="Debug information (development only)"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "success": False,
                "error": {
                    "code": "REQUEST_VALIDATION_FAILED",
                    "message": "AddPayment validation failed with 1 error(s)",
                },
                "errors": [
                    {
                        "code": "CONSTRAINT_VIOLATION",
                        "message": "amount must not be less than 1",
                        "field": "amount",
                        "details": {"constraint": "minimum"},
                    }
                ],
                "timestamp": "2026-02-18T00:00:00Z",
                "request_id": "req_abc123",
                "path": "/api/schemas/AddPayment/normalize",
                "method": "POST",
            }
        }


class SuccessResponse(BaseModel, Generic[T]):
    """Standard success response format."""

    success: bool = Field(True, description="Always true for success")
    data: T = Field(..., description="Response data")
    message: Optional[str] = Field(None, description="Optional success message")
    timestamp: datetime = Field(
        default_factory=_utcnow, description="Response timestamp (UTC)"
    )
    request_id: Optional[str] = Field(None, description="Request ID for tracing")

    class Config:
        json_schema_extra = {
            "example": {
                "success": True,
                "data": {"amount": 25000.0, "method": "CASH"},
                "message": "Payload is valid",
                "timestamp": "2026-02-18T00:00:00Z",
                "request_id": "req_abc123",
            }
        }


# Utility functions for creating responses
def success_response(
    data: Any, message: Optional[str] = None, request_id: Optional[str] = None
) -> Dict[str, Any]:
    """Create a success response."""
    return SuccessResponse(
        data=data, message=message, request_id=request_id
    ).model_dump(mode="json")


def error_response(
    code: str,
    message: str,
    field: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None,
    errors: Optional[List[ErrorDetail]] = None,
    request_id: Optional[str] = None,
    path: Optional[str] = None,
    method: Optional[str] = None,
    stack_trace: Optional[str] = None,
    debug_info: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Create an error response."""
    return ErrorResponse(
        error=ErrorDetail(code=code, message=message, field=field, details=details),
        errors=errors,
        request_id=request_id,
        path=path,
        method=method,
        stack_trace=stack_trace,
        debug_info=debug_info,
    ).model_dump(mode="json", exclude_none=True)
