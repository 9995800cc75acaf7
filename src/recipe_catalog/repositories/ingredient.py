"""Ingredient repository.

Create and read access to the shared ingredient list. Ingredients have no
update or delete operation.
"""

from __future__ import annotations

from recipe_catalog.mappers.ingredient import (
    IngredientProperty,
    ingredient_to_properties,
    page_to_ingredient,
)
from recipe_catalog.notion.filters import SortDirection, sort_by_property
from recipe_catalog.observability.logging import get_logger
from recipe_catalog.repositories.base import NotionRepository
from recipe_catalog.schemas.ingredient import CreateIngredientRequest, Ingredient


logger = get_logger(__name__)


class IngredientRepository(NotionRepository):
    """Repository for the ingredients database."""

    async def list(self) -> list[Ingredient]:
        """List all ingredients, ascending by name.

        Raises:
            UpstreamError: If the store query fails.
        """
        pages = await self._client.query_database(
            self._database_id,
            sorts=[sort_by_property(IngredientProperty.NAME, SortDirection.ASCENDING)],
        )
        return [page_to_ingredient(page) for page in pages]

    async def lookup(self) -> dict[str, Ingredient]:
        """Fetch every ingredient keyed by id, for relation resolution."""
        return {ingredient.id: ingredient for ingredient in await self.list()}

    async def get_by_id(self, ingredient_id: str) -> Ingredient | None:
        """Get one ingredient; None when missing or when the lookup fails."""
        page = await self._retrieve_or_none(ingredient_id)
        if page is None:
            return None
        return page_to_ingredient(page)

    async def create(
        self,
        name: str,
        category: str = "",
        unit: str = "",
    ) -> Ingredient:
        """Create an ingredient.

        Names are not checked for uniqueness; a duplicate name becomes a
        separate entity. The caller guarantees ``name`` is non-empty.

        Raises:
            UpstreamError: If the store rejects the write.
        """
        properties = ingredient_to_properties(
            CreateIngredientRequest(name=name, category=category, unit=unit)
        )
        page = await self._client.create_page(self._database_id, properties)
        ingredient = page_to_ingredient(page)
        logger.info("Ingredient created", ingredient_id=ingredient.id, name=name)
        return ingredient
