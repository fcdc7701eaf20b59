"""Middleware components.

This package provides middleware for error handling and locale context.
"""

from myclinic.middleware.error_handler_middleware import ErrorHandlerMiddleware
from myclinic.middleware.locale_context_middleware import (
    LocaleContext,
    LocaleContextMiddleware,
    get_locale_context,
)

__all__ = [
    "ErrorHandlerMiddleware",
    "LocaleContext",
    "LocaleContextMiddleware",
    "get_locale_context",
]
