"""Schema validation engine.

validate() is a pure, single-pass transform from an untyped payload to either
a normalized record or the complete ordered list of violations. It never
raises for bad input and never stops at the first failure.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, List

from pydantic import BaseModel

from myclinic.exception.api_exceptions import RequestValidationFailedError
from myclinic.validation.coercion import CoercionError, coerce
from myclinic.validation.rules import EXTRA_FORBID, FieldKind, FieldRule, Schema
from myclinic.validation.violations import (
    Constraint,
    ValidationResult,
    Violation,
    ViolationKind,
)

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_absent(value: Any) -> bool:
    return value is _MISSING or value is None or value == ""


def _constraint_violation(rule: FieldRule, constraint: Constraint, message: str):
    return Violation(
        field=rule.name,
        kind=ViolationKind.CONSTRAINT_VIOLATION,
        constraint=constraint,
        message=message,
    )


def _check_constraints(rule: FieldRule, value: Any) -> List[Violation]:
    """Apply the declared constraints to a coerced value."""
    violations: List[Violation] = []

    if rule.kind == FieldKind.ENUM and value not in rule.choices:
        violations.append(
            _constraint_violation(
                rule,
                Constraint.ENUM,
                f"{rule.name} must be one of: {', '.join(rule.choices)}",
            )
        )

    if isinstance(value, str):
        length = len(value)
        if rule.exact_length is not None:
            if length != rule.exact_length:
                violations.append(
                    _constraint_violation(
                        rule,
                        Constraint.LENGTH,
                        f"{rule.name} must be exactly {rule.exact_length} characters",
                    )
                )
        else:
            if rule.min_length is not None and length < rule.min_length:
                violations.append(
                    _constraint_violation(
                        rule,
                        Constraint.MIN_LENGTH,
                        f"{rule.name} must be at least {rule.min_length} characters",
                    )
                )
            if rule.max_length is not None and length > rule.max_length:
                violations.append(
                    _constraint_violation(
                        rule,
                        Constraint.MAX_LENGTH,
                        f"{rule.name} must be at most {rule.max_length} characters",
                    )
                )

    if isinstance(value, (int, float)):
        if rule.minimum is not None and value < rule.minimum:
            violations.append(
                _constraint_violation(
                    rule,
                    Constraint.MINIMUM,
                    f"{rule.name} must not be less than {rule.minimum:g}",
                )
            )
        if rule.maximum is not None and value > rule.maximum:
            violations.append(
                _constraint_violation(
                    rule,
                    Constraint.MAXIMUM,
                    f"{rule.name} must not be greater than {rule.maximum:g}",
                )
            )

    return violations


def validate(schema: Schema, payload: Any) -> ValidationResult:
    """Validate a raw payload against a schema.

    Args:
        schema: Request schema
        payload: Untyped mapping, typically a parsed request body

    Returns:
        ValidationResult holding the normalized record (declared fields only,
        in declared order) or every violation found
    """
    if not isinstance(payload, Mapping):
        return ValidationResult(
            schema_name=schema.name,
            violations=(
                Violation(
                    field=None,
                    kind=ViolationKind.TYPE_MISMATCH,
                    constraint=Constraint.TYPE,
                    message="Request payload must be an object",
                ),
            ),
        )

    record: Dict[str, Any] = {}
    violations: List[Violation] = []

    for rule in schema.rules:
        raw = payload.get(rule.name, _MISSING)

        if _is_absent(raw):
            if rule.required:
                violations.append(
                    Violation(
                        field=rule.name,
                        kind=ViolationKind.MISSING_REQUIRED_FIELD,
                        constraint=Constraint.REQUIRED,
                        message=f"{rule.name} is required",
                    )
                )
            else:
                record[rule.name] = rule.default
            continue

        try:
            value = coerce(raw, rule)
        except CoercionError as e:
            kind = (
                ViolationKind.TYPE_MISMATCH
                if e.constraint == Constraint.TYPE
                else ViolationKind.CONSTRAINT_VIOLATION
            )
            violations.append(
                Violation(
                    field=rule.name,
                    kind=kind,
                    constraint=e.constraint,
                    message=e.message,
                )
            )
            continue

        field_violations = _check_constraints(rule, value)
        if field_violations:
            violations.extend(field_violations)
        else:
            record[rule.name] = value

    if schema.extra == EXTRA_FORBID:
        for key in payload:
            if schema.get_rule(key) is None:
                violations.append(
                    Violation(
                        field=str(key),
                        kind=ViolationKind.CONSTRAINT_VIOLATION,
                        constraint=Constraint.UNKNOWN_FIELD,
                        message=f"property {key} should not exist",
                    )
                )

    if violations:
        logger.debug(
            f"Payload rejected by {schema.name}",
            extra={"schema": schema.name, "violation_count": len(violations)},
        )
        return ValidationResult(schema_name=schema.name, violations=tuple(violations))

    return ValidationResult(schema_name=schema.name, value=record)


def validate_or_raise(schema: Schema, payload: Any) -> BaseModel:
    """Validate a payload and return the schema's typed value object.

    Raises:
        RequestValidationFailedError: If any violation was found
    """
    result = validate(schema, payload)
    if not result.is_valid:
        raise RequestValidationFailedError(schema.name, result.violations)
    return schema.build(result.value)
