"""Violation records and validation results."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple


class ViolationKind(str, Enum):
    """Category of a field-level validation failure."""

    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    CONSTRAINT_VIOLATION = "CONSTRAINT_VIOLATION"


class Constraint(str, Enum):
    """Name of the rule a violation broke."""

    REQUIRED = "required"
    TYPE = "type"
    ENUM = "enum"
    LENGTH = "length"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    FORMAT = "format"
    EMAIL = "email"
    UNKNOWN_FIELD = "unknown_field"


@dataclass(frozen=True)
class Violation:
    """One failed check.

    Attributes:
        field: Wire name of the offending field (None for the payload itself)
        kind: Violation category
        constraint: Rule that failed
        message: Human-readable message
    """

    field: Optional[str]
    kind: ViolationKind
    constraint: Constraint
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "field": self.field,
            "kind": self.kind.value,
            "constraint": self.constraint.value,
            "message": self.message,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one payload against one schema.

    Exactly one side is populated: a normalized record when the payload is
    valid, the full ordered violation list otherwise.
    """

    schema_name: str
    value: Optional[Mapping[str, Any]] = None
    violations: Tuple[Violation, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "violations", tuple(self.violations))
        if self.violations and self.value is not None:
            raise ValueError("An invalid result cannot carry a normalized value")
        if not self.violations and self.value is None:
            raise ValueError("A valid result must carry a normalized value")

    @property
    def is_valid(self) -> bool:
        return not self.violations

    def violations_for(self, field: str) -> Tuple[Violation, ...]:
        """Violations recorded against a single field."""
        return tuple(v for v in self.violations if v.field == field)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "schema": self.schema_name,
            "valid": self.is_valid,
            "value": dict(self.value) if self.value is not None else None,
            "violations": [v.to_dict() for v in self.violations],
        }
