"""Base schema configuration for all Pydantic models.

All API and domain schemas inherit from one of the public base classes,
which serialize to camelCase (``imageUrl``, ``prepTime``, ``ingredientId``)
while accepting either casing on input.

Usage:
    - APIRequest: For incoming API request bodies
    - APIResponse: For outgoing bodies, including the domain models
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


T = TypeVar("T")


class _BaseSchema(BaseModel):
    """Private base schema with common configuration."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas.

    Extra fields are ignored: the edit form posts denormalized ingredient
    names and units that the store never receives.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing response schemas and domain models."""

    model_config = ConfigDict(
        extra="forbid",
    )


class DataResponse(APIResponse, Generic[T]):
    """Success envelope: ``{"success": true, "data": ...}``."""

    success: bool = True
    data: T


class MessageData(APIResponse):
    """Payload for operations with nothing to return."""

    message: str
