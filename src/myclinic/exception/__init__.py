"""Exception handling package.

This package provides custom exception classes that the error handling
middleware maps to HTTP responses.
"""

from myclinic.exception.api_exceptions import (
    ConfigurationError,
    MyClinicException,
    RequestValidationFailedError,
    ResourceNotFoundError,
    SchemaDefinitionError,
    SchemaNotFoundError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "MyClinicException",
    "RequestValidationFailedError",
    "ResourceNotFoundError",
    "SchemaDefinitionError",
    "SchemaNotFoundError",
    "ValidationError",
]
