"""Process-wide schema registry.

Schemas are registered once while the dto package is imported and are only
read afterwards, so the registry is safe to share between concurrent requests.
"""

import logging
from typing import Dict, Iterator, Tuple

from myclinic.exception.api_exceptions import SchemaDefinitionError, SchemaNotFoundError
from myclinic.validation.rules import Schema

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Name to schema lookup, in registration order."""

    def __init__(self) -> None:
        self._schemas: Dict[str, Schema] = {}

    def register(self, schema: Schema) -> Schema:
        """Register a schema under its name.

        Args:
            schema: Schema to register

        Returns:
            The same schema, so declarations can register inline

        Raises:
            SchemaDefinitionError: If the name is already taken
        """
        if schema.name in self._schemas:
            raise SchemaDefinitionError(
                f"Schema already registered: {schema.name}", schema_name=schema.name
            )
        self._schemas[schema.name] = schema
        logger.debug(f"Registered request schema {schema.name}")
        return schema

    def get(self, name: str) -> Schema:
        """Look up a schema by name.

        Raises:
            SchemaNotFoundError: If no schema has that name
        """
        schema = self._schemas.get(name)
        if schema is None:
            raise SchemaNotFoundError(name)
        return schema

    def names(self) -> Tuple[str, ...]:
        return tuple(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[Schema]:
        return iter(tuple(self._schemas.values()))

    def __len__(self) -> int:
        return len(self._schemas)


default_registry = SchemaRegistry()
