"""Controller-level validation dependencies.

Route handlers declare the schema they expect and receive the typed value
object; rejected payloads surface as RequestValidationFailedError and are
rendered by the error handling middleware.
"""

from typing import Any, Callable, Coroutine, Union

from fastapi import Request
from pydantic import BaseModel

from myclinic.exception.api_exceptions import RequestValidationFailedError
from myclinic.validation import (
    Constraint,
    Schema,
    Violation,
    ViolationKind,
    default_registry,
    validate_or_raise,
)

SchemaRef = Union[Schema, str]


def resolve_schema(schema: SchemaRef) -> Schema:
    """Accept a schema or a registered schema name.

    Raises:
        SchemaNotFoundError: If a name is given and nothing is registered under it
    """
    if isinstance(schema, Schema):
        return schema
    return default_registry.get(schema)


async def read_json_payload(request: Request, schema: Schema) -> Any:
    """Parse the request body as JSON.

    Raises:
        RequestValidationFailedError: If the body is empty or not valid JSON
    """
    try:
        return await request.json()
    except ValueError:
        raise RequestValidationFailedError(
            schema.name,
            [
                Violation(
                    field=None,
                    kind=ViolationKind.TYPE_MISMATCH,
                    constraint=Constraint.TYPE,
                    message="Request body must be valid JSON",
                )
            ],
        )


def validated_body(
    schema: SchemaRef,
) -> Callable[[Request], Coroutine[Any, Any, BaseModel]]:
    """Build a dependency that validates the JSON body against a schema.

    Args:
        schema: Schema or registered schema name

    Returns:
        FastAPI dependency returning the schema's typed value object
    """

    async def dependency(request: Request) -> BaseModel:
        resolved = resolve_schema(schema)
        payload = await read_json_payload(request, resolved)
        return validate_or_raise(resolved, payload)

    return dependency


def validated_query(
    schema: SchemaRef,
) -> Callable[[Request], Coroutine[Any, Any, BaseModel]]:
    """Build a dependency that validates query parameters against a schema.

    Repeated parameters keep their last value.
    """

    async def dependency(request: Request) -> BaseModel:
        resolved = resolve_schema(schema)
        return validate_or_raise(resolved, dict(request.query_params))

    return dependency
