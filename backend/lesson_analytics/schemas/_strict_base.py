"""Strict schema baselines with forbidden extras by default."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictModel(BaseModel):
    """Neutral strict base for request/response DTOs."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class CamelModel(BaseModel):
    """Input record base: accepts camelCase wire names or snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )


class FrozenResponseModel(BaseModel):
    """Immutable response DTO serialized with camelCase field names."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )
