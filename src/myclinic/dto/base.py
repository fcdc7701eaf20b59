"""Base model for normalized request value objects."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Typed, immutable view of a normalized request payload.

    Attributes are snake_case; the camelCase wire names are accepted as aliases
    so a normalized record can be passed straight to model_validate().
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )
