"""Request validation contract layer.

Provides explicit field-rule schemas, the pure validate() function and the
process-wide schema registry. Nothing in this package depends on the web
framework.
"""

from myclinic.validation.engine import validate, validate_or_raise
from myclinic.validation.registry import SchemaRegistry, default_registry
from myclinic.validation.rules import FieldKind, FieldRule, Schema
from myclinic.validation.violations import (
    Constraint,
    ValidationResult,
    Violation,
    ViolationKind,
)

__all__ = [
    "Constraint",
    "FieldKind",
    "FieldRule",
    "Schema",
    "SchemaRegistry",
    "ValidationResult",
    "Violation",
    "ViolationKind",
    "default_registry",
    "validate",
    "validate_or_raise",
]
