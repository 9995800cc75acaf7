"""Recipe metadata accessor.

The allowed category and tag labels live in the recipes database schema,
not in the rows. Every call reads the schema through; nothing is cached
locally, so a label first written by a create/update shows up once the
store has registered it as a new option.
"""

from __future__ import annotations

from typing import Any

from recipe_catalog.mappers.properties import decode_options
from recipe_catalog.mappers.recipe import RecipeProperty
from recipe_catalog.repositories.base import NotionRepository
from recipe_catalog.schemas.recipe import RecipeMetadata


def _categories(schema: dict[str, Any]) -> list[str]:
    return decode_options(schema.get(RecipeProperty.CATEGORY), "select")


def _tags(schema: dict[str, Any]) -> list[str]:
    return decode_options(schema.get(RecipeProperty.TAGS), "multi_select")


class MetadataRepository(NotionRepository):
    """Read-through accessor for the recipes database schema."""

    async def _schema(self) -> dict[str, Any]:
        database = await self._client.retrieve_database(self._database_id)
        return database.get("properties") or {}

    async def get_categories(self) -> list[str]:
        """Configured options of the Category select, [] if none."""
        return _categories(await self._schema())

    async def get_tags(self) -> list[str]:
        """Configured options of the Tags multi-select, [] if none."""
        return _tags(await self._schema())

    async def get_metadata(self) -> RecipeMetadata:
        """Categories and tags decoded from a single schema read."""
        schema = await self._schema()
        return RecipeMetadata(categories=_categories(schema), tags=_tags(schema))
