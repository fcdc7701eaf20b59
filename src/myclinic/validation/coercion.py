"""Per-kind value coercion.

Each coercer takes a raw (present, non-empty) value and returns the normalized
Python value, or raises CoercionError. Coercers never see absent values.
"""

import math
import re
from datetime import date, datetime
from typing import Any, Callable, Dict

from pydantic.networks import validate_email

from myclinic.constants import DATE_FORMAT, DATE_PATTERN
from myclinic.validation.rules import FieldKind, FieldRule
from myclinic.validation.violations import Constraint

_DATE_RE = re.compile(DATE_PATTERN)
_INTEGER_RE = re.compile(r"^[+-]?\d+$")


class CoercionError(ValueError):
    """Raised when a raw value cannot be turned into the rule's kind."""

    def __init__(self, message: str, constraint: Constraint = Constraint.TYPE):
        super().__init__(message)
        self.message = message
        self.constraint = constraint


def _is_plain_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def coerce_string(value: Any, rule: FieldRule) -> str:
    if isinstance(value, str):
        return value
    # implicit conversion, numbers only
    if _is_plain_number(value):
        return str(value)
    raise CoercionError(f"{rule.name} must be a string")


def coerce_email(value: Any, rule: FieldRule) -> str:
    text = coerce_string(value, rule)
    try:
        _, normalized = validate_email(text)
    except ValueError:
        raise CoercionError(f"{rule.name} must be an email", Constraint.EMAIL)
    # reject "Name <addr>" forms and surrounding whitespace
    if normalized.lower() != text.lower():
        raise CoercionError(f"{rule.name} must be an email", Constraint.EMAIL)
    return text


def coerce_number(value: Any, rule: FieldRule) -> float:
    if _is_plain_number(value):
        try:
            number = float(value)
        except OverflowError:
            raise CoercionError(f"{rule.name} must be a finite number")
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise CoercionError(f"{rule.name} must be a number")
    else:
        raise CoercionError(f"{rule.name} must be a number")

    if not math.isfinite(number):
        raise CoercionError(f"{rule.name} must be a finite number")
    return number


def coerce_integer(value: Any, rule: FieldRule) -> int:
    if isinstance(value, bool):
        raise CoercionError(f"{rule.name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        try:
            return int(value.strip())
        except ValueError:
            # beyond the interpreter's digit limit
            raise CoercionError(f"{rule.name} must be an integer")
    raise CoercionError(f"{rule.name} must be an integer")


def coerce_enum(value: Any, rule: FieldRule) -> str:
    if not isinstance(value, str):
        raise CoercionError(f"{rule.name} must be a string")
    return value


def coerce_date(value: Any, rule: FieldRule) -> date:
    if not isinstance(value, str):
        raise CoercionError(f"{rule.name} must be a date string")
    if not _DATE_RE.match(value):
        raise CoercionError(
            f"{rule.name} must be a date in YYYY-MM-DD format", Constraint.FORMAT
        )
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise CoercionError(
            f"{rule.name} must be a valid calendar date", Constraint.FORMAT
        )


COERCERS: Dict[FieldKind, Callable[[Any, FieldRule], Any]] = {
    FieldKind.STRING: coerce_string,
    FieldKind.EMAIL: coerce_email,
    FieldKind.NUMBER: coerce_number,
    FieldKind.INTEGER: coerce_integer,
    FieldKind.ENUM: coerce_enum,
    FieldKind.DATE: coerce_date,
}


def coerce(value: Any, rule: FieldRule) -> Any:
    """Coerce a raw value according to the rule's kind."""
    return COERCERS[rule.kind](value, rule)
