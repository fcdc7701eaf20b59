"""Request schema API endpoints.

Exposes the registered request schemas and lets clients check payloads
against them without calling the business endpoints.

Endpoints:
  GET    /api/schemas                   list schemas and their field rules
  GET    /api/schemas/{name}            describe one schema
  POST   /api/schemas/{name}/validate   dry run, always 200 with the full result
  POST   /api/schemas/{name}/normalize  strict run, 422 on any violation
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request, status
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel, Field

from myclinic import dto  # noqa: F401  (registers the request schemas)
from myclinic.controller.schemas.responses import success_response
from myclinic.controller.schemas.validators import read_json_payload
from myclinic.validation import (
    SchemaRegistry,
    default_registry,
    validate,
    validate_or_raise,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/schemas", tags=["schemas"])


class FieldRuleResponse(BaseModel):
    """Description of one field rule."""

    name: str
    kind: str
    required: bool
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    choices: Optional[List[str]] = None
    default: Optional[Any] = None
    description: Optional[str] = None
    example: Optional[Any] = None


class SchemaResponse(BaseModel):
    """Description of one request schema.

    Attributes:
        name: Schema name
        description: Human-readable description
        extra: Policy for undeclared payload keys
        fields: Field rules in validation order
    """

    name: str
    description: str = ""
    extra: str
    fields: List[FieldRuleResponse]


class ViolationResponse(BaseModel):
    field: Optional[str] = None
    kind: str
    constraint: str
    message: str


class ValidationResultResponse(BaseModel):
    """Dry-run validation outcome.

    Attributes:
        schema_name: Schema the payload was checked against
        valid: Whether the payload was accepted
        value: Normalized record when valid
        violations: Every violation found when invalid
    """

    schema_name: str = Field(..., alias="schema")
    valid: bool
    value: Optional[Dict[str, Any]] = None
    violations: List[ViolationResponse] = Field(default_factory=list)

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "schema": "Verify2FA",
                "valid": False,
                "violations": [
                    {
                        "field": "code",
                        "kind": "CONSTRAINT_VIOLATION",
                        "constraint": "length",
                        "message": "code must be exactly 6 characters",
                    }
                ],
            }
        }


def _registry(request: Request) -> SchemaRegistry:
    return getattr(request.app.state, "schema_registry", default_registry)


@router.get(
    "",
    response_model=List[SchemaResponse],
    summary="List request schemas",
)
async def list_schemas(request: Request):
    """List every registered request schema with its field rules.

    Args:
        request: FastAPI request

    Returns:
        Schema descriptions in registration order
    """
    return [schema.describe() for schema in _registry(request)]


@router.get(
    "/{name}",
    response_model=SchemaResponse,
    summary="Describe a request schema",
)
async def get_schema(name: str, request: Request):
    """Describe one schema.

    Raises:
        SchemaNotFoundError: 404 if no schema has that name
    """
    return _registry(request).get(name).describe()


@router.post(
    "/{name}/validate",
    response_model=ValidationResultResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_200_OK,
    summary="Dry-run payload validation",
)
async def validate_payload(name: str, request: Request):
    """Validate a JSON payload and report every violation.

    The response is 200 whether or not the payload is valid; only an unknown
    schema (404) or an unreadable body (422) is an error.

    Args:
        name: Schema name
        request: FastAPI request carrying the JSON payload

    Returns:
        ValidationResultResponse
    """
    schema = _registry(request).get(name)
    payload = await read_json_payload(request, schema)
    result = validate(schema, payload)

    if not result.is_valid:
        logger.debug(
            f"Dry run of {name} found {len(result.violations)} violation(s)"
        )
    return jsonable_encoder(result.to_dict())


@router.post(
    "/{name}/normalize",
    status_code=status.HTTP_200_OK,
    summary="Normalize a payload",
)
async def normalize_payload(name: str, request: Request) -> Dict[str, Any]:
    """Validate a JSON payload and return its normalized form.

    Args:
        name: Schema name
        request: FastAPI request carrying the JSON payload

    Returns:
        Success envelope whose data is the normalized record (wire names)

    Raises:
        RequestValidationFailedError: 422 when the payload has violations
    """
    schema = _registry(request).get(name)
    payload = await read_json_payload(request, schema)
    value = validate_or_raise(schema, payload)

    return success_response(
        data=value.model_dump(mode="json", by_alias=True),
        message=f"{schema.name} payload is valid",
        request_id=getattr(request.state, "request_id", None),
    )
