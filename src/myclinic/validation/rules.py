"""Field rules and request schemas.

A schema is an ordered, immutable list of field rules plus the pydantic model
that represents a successfully normalized payload. Schemas are declared once at
import time and shared by every request.

Invariants:
    - Field names are unique within a schema
    - Rule order is validation order and normalized record order
    - ENUM rules always carry a non-empty closed set of choices
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from pydantic import BaseModel

from myclinic.exception.api_exceptions import SchemaDefinitionError

EXTRA_FORBID = "forbid"
EXTRA_IGNORE = "ignore"


class FieldKind(str, Enum):
    """Primitive kind a field value is coerced to."""

    STRING = "string"
    EMAIL = "email"
    NUMBER = "number"
    INTEGER = "integer"
    ENUM = "enum"
    DATE = "date"


@dataclass(frozen=True)
class FieldRule:
    """Validation and coercion rule for a single payload field.

    Attributes:
        name: Wire name of the field (as sent by clients)
        kind: Primitive kind the value is coerced to
        required: Whether the field must be present and non-empty
        min_length: Minimum string length
        max_length: Maximum string length
        minimum: Inclusive numeric lower bound
        maximum: Inclusive numeric upper bound
        choices: Closed set of accepted values for ENUM fields
        default: Value used when an optional field is absent
        description: Human-readable description
        example: Example value for documentation
    """

    name: str
    kind: FieldKind
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    choices: Tuple[str, ...] = ()
    default: Any = None
    description: str = ""
    example: Any = None

    def __post_init__(self) -> None:
        if not self.name:
            raise SchemaDefinitionError("Field rule name must not be empty")

        if self.kind == FieldKind.ENUM and not self.choices:
            raise SchemaDefinitionError(
                f"Enum field '{self.name}' declares no choices"
            )

        for bound in (self.min_length, self.max_length):
            if bound is not None and bound < 0:
                raise SchemaDefinitionError(
                    f"Length bound of '{self.name}' must be non-negative"
                )

        if (
            self.min_length is not None
            and self.max_length is not None
            and self.min_length > self.max_length
        ):
            raise SchemaDefinitionError(
                f"min_length exceeds max_length for '{self.name}'"
            )

        if (
            self.minimum is not None
            and self.maximum is not None
            and self.minimum > self.maximum
        ):
            raise SchemaDefinitionError(f"minimum exceeds maximum for '{self.name}'")

    @classmethod
    def string(cls, name: str, **kwargs) -> "FieldRule":
        return cls(name=name, kind=FieldKind.STRING, **kwargs)

    @classmethod
    def email(cls, name: str, **kwargs) -> "FieldRule":
        return cls(name=name, kind=FieldKind.EMAIL, **kwargs)

    @classmethod
    def number(cls, name: str, **kwargs) -> "FieldRule":
        return cls(name=name, kind=FieldKind.NUMBER, **kwargs)

    @classmethod
    def integer(cls, name: str, **kwargs) -> "FieldRule":
        return cls(name=name, kind=FieldKind.INTEGER, **kwargs)

    @classmethod
    def date(cls, name: str, **kwargs) -> "FieldRule":
        return cls(name=name, kind=FieldKind.DATE, **kwargs)

    @classmethod
    def enum(cls, name: str, enum_type: Type[Enum], **kwargs) -> "FieldRule":
        """Build an ENUM rule whose closed set is the values of an Enum class."""
        choices = tuple(str(member.value) for member in enum_type)
        return cls(name=name, kind=FieldKind.ENUM, choices=choices, **kwargs)

    @property
    def exact_length(self) -> Optional[int]:
        """Length the value must have, when min and max length coincide."""
        if self.min_length is not None and self.min_length == self.max_length:
            return self.min_length
        return None

    def describe(self) -> Dict[str, Any]:
        """Serializable description used by the schema introspection endpoint."""
        description: Dict[str, Any] = {
            "name": self.name,
            "kind": self.kind.value,
            "required": self.required,
        }
        optional_items = {
            "min_length": self.min_length,
            "max_length": self.max_length,
            "minimum": self.minimum,
            "maximum": self.maximum,
            "default": self.default,
            "description": self.description or None,
            "example": self.example,
        }
        description.update({k: v for k, v in optional_items.items() if v is not None})
        if self.choices:
            description["choices"] = list(self.choices)
        return description


@dataclass(frozen=True)
class Schema:
    """Ordered set of field rules for one request payload.

    Attributes:
        name: Registry key, e.g. "AddPayment"
        rules: Field rules in validation order
        model: Pydantic model built from a normalized record
        extra: Policy for undeclared payload keys ("forbid" or "ignore")
        description: Human-readable description
    """

    name: str
    rules: Tuple[FieldRule, ...]
    model: Type[BaseModel]
    extra: str = EXTRA_FORBID
    description: str = ""
    _index: Mapping[str, FieldRule] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        rules = tuple(self.rules)
        object.__setattr__(self, "rules", rules)

        if self.extra not in (EXTRA_FORBID, EXTRA_IGNORE):
            raise SchemaDefinitionError(
                f"Unknown extra policy: {self.extra}", schema_name=self.name
            )

        index: Dict[str, FieldRule] = {}
        for rule in rules:
            if rule.name in index:
                raise SchemaDefinitionError(
                    f"Duplicate field '{rule.name}' in schema {self.name}",
                    schema_name=self.name,
                )
            index[rule.name] = rule
        object.__setattr__(self, "_index", index)

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(rule.name for rule in self.rules if rule.required)

    def get_rule(self, name: str) -> Optional[FieldRule]:
        return self._index.get(name)

    def build(self, record: Mapping[str, Any]) -> BaseModel:
        """Build the typed value object from an already normalized record."""
        return self.model.model_validate(dict(record))

    def describe(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "extra": self.extra,
            "fields": [rule.describe() for rule in self.rules],
        }
