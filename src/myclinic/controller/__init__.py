"""API controllers.

This package provides the health check, request schema and locale endpoints.
"""

from myclinic.controller import (
    health_controller,
    locale_controller,
    validation_controller,
)

__all__ = [
    "health_controller",
    "locale_controller",
    "validation_controller",
]
