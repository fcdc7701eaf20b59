"""Unit tests for SchemaRegistry and the default registry.

Verifies registration order, duplicate rejection, lookup failures and that
importing the dto package registers every request schema.
"""

import pytest

from myclinic import dto
from myclinic.dto.base import RequestModel
from myclinic.exception.api_exceptions import SchemaDefinitionError, SchemaNotFoundError
from myclinic.validation import FieldRule, Schema, SchemaRegistry, default_registry


class _Model(RequestModel):
    name: str


def _schema(name: str) -> Schema:
    return Schema(name=name, model=_Model, rules=(FieldRule.string("name"),))


class TestSchemaRegistry:
    """Tests for a standalone SchemaRegistry."""

    def test_register_returns_schema(self) -> None:
        """register() hands back the schema so declarations can register inline."""
        registry = SchemaRegistry()
        schema = _schema("First")

        assert registry.register(schema) is schema

    def test_get_returns_registered_schema(self) -> None:
        """get() finds a schema by name."""
        registry = SchemaRegistry()
        schema = registry.register(_schema("First"))

        assert registry.get("First") is schema

    def test_duplicate_name_is_rejected(self) -> None:
        """A second schema with the same name raises SchemaDefinitionError."""
        registry = SchemaRegistry()
        registry.register(_schema("First"))

        with pytest.raises(SchemaDefinitionError):
            registry.register(_schema("First"))

    def test_unknown_name_raises_not_found(self) -> None:
        """get() raises SchemaNotFoundError with a 404 status."""
        registry = SchemaRegistry()

        with pytest.raises(SchemaNotFoundError) as exc_info:
            registry.get("Missing")

        assert exc_info.value.status_code == 404
        assert exc_info.value.code == "SCHEMA_NOT_FOUND"

    def test_names_keep_registration_order(self) -> None:
        """names() lists schemas in registration order."""
        registry = SchemaRegistry()
        for name in ("B", "A", "C"):
            registry.register(_schema(name))

        assert registry.names() == ("B", "A", "C")

    def test_container_protocol(self) -> None:
        """The registry supports len(), in and iteration."""
        registry = SchemaRegistry()
        schema = registry.register(_schema("First"))

        assert len(registry) == 1
        assert "First" in registry
        assert "Second" not in registry
        assert list(registry) == [schema]


class TestDefaultRegistry:
    """Tests for the process-wide registry populated by the dto package."""

    @pytest.mark.parametrize(
        "name",
        [
            "UploadAttachment",
            "Login",
            "Verify2FA",
            "AddPayment",
            "QuerySchedules",
            "CreateTimeOff",
            "ReviewTimeOff",
            "QueryTimeOff",
        ],
    )
    def test_request_schema_is_registered(self, name: str) -> None:
        """Every request schema is available by name."""
        assert name in default_registry

    def test_registered_objects_match_module_constants(self) -> None:
        """The registry returns the same objects the dto modules declare."""
        assert default_registry.get("AddPayment") is dto.ADD_PAYMENT
