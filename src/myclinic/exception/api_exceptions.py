"""Custom exceptions for the MyClinic API.

All custom exceptions should inherit from MyClinicException for consistent error handling.
"""

from typing import Any, Dict, Optional, Sequence


class MyClinicException(Exception):
    """Base exception for all MyClinic errors."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize MyClinic exception.

        Args:
            message: Human-readable error message
            code: Error code for programmatic handling
            status_code: HTTP status code
            field: Field name if validation error
            details: Additional error context
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.field = field
        self.details = details or {}
        super().__init__(message)


# Resource Errors (404)
class ResourceNotFoundError(MyClinicException):
    """Requested resource not found."""

    def __init__(self, resource: str, resource_id: str, **kwargs):
        super().__init__(
            message=f"{resource} not found: {resource_id}",
            code=kwargs.pop("code", "RESOURCE_NOT_FOUND"),
            status_code=404,
            details={"resource": resource, "resource_id": resource_id},
            **kwargs,
        )


class SchemaNotFoundError(ResourceNotFoundError):
    """No request schema is registered under the given name."""

    def __init__(self, schema_name: str, **kwargs):
        super().__init__(
            resource="Schema", resource_id=schema_name, code="SCHEMA_NOT_FOUND", **kwargs
        )


# Validation Errors (400, 422)
class ValidationError(MyClinicException):
    """Validation error."""

    def __init__(self, message: str, field: Optional[str] = None, **kwargs):
        super().__init__(
            message=message,
            code=kwargs.pop("code", "VALIDATION_ERROR"),
            status_code=422,
            field=field,
            **kwargs,
        )


class RequestValidationFailedError(ValidationError):
    """A payload was rejected by its request schema.

    Carries every violation found, not only the first one.
    """

    def __init__(self, schema_name: str, violations: Sequence[Any], **kwargs):
        self.schema_name = schema_name
        self.violations = tuple(violations)
        details = kwargs.pop("details", {})
        details["schema"] = schema_name
        details["violations"] = [v.to_dict() for v in self.violations]

        super().__init__(
            message=f"{schema_name} validation failed with {len(self.violations)} error(s)",
            code="REQUEST_VALIDATION_FAILED",
            details=details,
            **kwargs,
        )


# Configuration Errors
class ConfigurationError(MyClinicException):
    """Configuration error."""

    def __init__(self, message: str, **kwargs):
        super().__init__(
            message=message,
            code=kwargs.pop("code", "CONFIGURATION_ERROR"),
            status_code=500,
            **kwargs,
        )


class SchemaDefinitionError(ConfigurationError):
    """A request schema or field rule is declared incorrectly."""

    def __init__(self, message: str, schema_name: Optional[str] = None, **kwargs):
        details = kwargs.pop("details", {})
        if schema_name:
            details["schema"] = schema_name

        super().__init__(
            message=message,
            code="SCHEMA_DEFINITION_ERROR",
            details=details,
            **kwargs,
        )
