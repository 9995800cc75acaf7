"""Recipe repository.

CRUD and filtered queries against the recipes database. Ingredient relations
are resolved with an explicit join: the ingredient list is fetched once per
call, turned into an id lookup and projected onto every recipe page.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipe_catalog.mappers.recipe import (
    RecipeProperty,
    create_request_to_properties,
    page_to_recipe,
    update_request_to_properties,
)
from recipe_catalog.notion.exceptions import UpstreamError
from recipe_catalog.notion.filters import (
    Filter,
    and_,
    multi_select_contains,
    or_,
    relation_contains,
    select_equals,
    sort_by_created_time,
    title_contains,
)
from recipe_catalog.observability.logging import get_logger
from recipe_catalog.repositories.base import NotionRepository
from recipe_catalog.schemas.recipe import RecipeFilters


if TYPE_CHECKING:
    from collections.abc import Sequence

    from recipe_catalog.notion.client import NotionClient
    from recipe_catalog.repositories.ingredient import IngredientRepository
    from recipe_catalog.schemas.ingredient import Ingredient
    from recipe_catalog.schemas.recipe import (
        CreateRecipeRequest,
        Recipe,
        UpdateRecipeRequest,
    )


logger = get_logger(__name__)


def build_recipe_filter(filters: RecipeFilters) -> Filter | None:
    """AND together category, each tag, and title search."""
    conditions: list[Filter] = []
    if filters.category:
        conditions.append(select_equals(RecipeProperty.CATEGORY, filters.category))
    conditions.extend(
        multi_select_contains(RecipeProperty.TAGS, tag) for tag in filters.tags if tag
    )
    if filters.search:
        conditions.append(title_contains(RecipeProperty.NAME, filters.search))
    return and_(conditions)


def build_ingredient_filter(ingredient_ids: Sequence[str]) -> Filter | None:
    """OR together one relation-contains predicate per ingredient id."""
    return or_(
        [relation_contains(RecipeProperty.INGREDIENTS, i) for i in ingredient_ids]
    )


class RecipeRepository(NotionRepository):
    """Repository for the recipes database."""

    def __init__(
        self,
        client: NotionClient,
        database_id: str,
        ingredients: IngredientRepository,
    ) -> None:
        """Initialize repository.

        Args:
            client: Initialized Notion client.
            database_id: Recipes database id.
            ingredients: Repository used to resolve ingredient relations.
        """
        super().__init__(client, database_id)
        self._ingredients = ingredients

    # =========================================================================
    # Queries
    # =========================================================================

    async def list(self, filters: RecipeFilters | None = None) -> list[Recipe]:
        """List non-archived recipes, newest first.

        Raises:
            UpstreamError: If the recipe query or the ingredient fetch fails.
        """
        return await self._query(build_recipe_filter(filters or RecipeFilters()))

    async def list_by_ingredients(self, ingredient_ids: Sequence[str]) -> list[Recipe]:
        """List recipes referencing ANY of the given ingredients.

        An empty sequence means no filter and returns the unfiltered list.
        """
        ids = [i for i in ingredient_ids if i]
        if not ids:
            return await self.list()
        return await self._query(build_ingredient_filter(ids))

    async def get_by_id(self, recipe_id: str) -> Recipe | None:
        """Get one recipe; None when missing, archived, or the lookup fails."""
        page = await self._retrieve_or_none(recipe_id)
        if page is None:
            return None
        try:
            lookup = await self._ingredients.lookup()
        except UpstreamError as e:
            logger.warning(
                "Ingredient lookup failed, reporting recipe as not found",
                recipe_id=recipe_id,
                error=str(e),
            )
            return None
        return page_to_recipe(page, lookup)

    async def _query(self, filter_tree: Filter | None) -> list[Recipe]:
        pages = await self._client.query_database(
            self._database_id,
            filter=filter_tree,
            sorts=[sort_by_created_time()],
        )
        lookup = await self._ingredients.lookup()
        return [page_to_recipe(page, lookup) for page in pages]

    # =========================================================================
    # Writes
    # =========================================================================

    async def create(self, data: CreateRecipeRequest) -> Recipe:
        """Create a recipe.

        Ingredient ids are linked without checking that they exist; a
        dangling id resolves to an empty name and unit on later reads.

        Raises:
            UpstreamError: If the store rejects the write.
        """
        page = await self._client.create_page(
            self._database_id,
            create_request_to_properties(data),
        )
        recipe = page_to_recipe(page, await self._lookup_after_write())
        logger.info("Recipe created", recipe_id=recipe.id, title=recipe.title)
        return recipe

    async def update(self, recipe_id: str, patch: UpdateRecipeRequest) -> Recipe:
        """Apply a partial update; omitted fields keep their stored values.

        Raises:
            UpstreamError: If the store rejects the write or the id is unknown.
        """
        properties = update_request_to_properties(patch)
        page = await self._client.update_page(recipe_id, properties=properties)
        recipe = page_to_recipe(page, await self._lookup_after_write())
        logger.info(
            "Recipe updated",
            recipe_id=recipe_id,
            fields=sorted(properties),
        )
        return recipe

    async def delete(self, recipe_id: str) -> None:
        """Soft-archive a recipe.

        Raises:
            UpstreamError: If the store rejects the update or the id is unknown.
        """
        await self._client.update_page(recipe_id, archived=True)
        logger.info("Recipe archived", recipe_id=recipe_id)

    async def _lookup_after_write(self) -> dict[str, Ingredient]:
        # The write already succeeded; unresolved names degrade to empty.
        try:
            return await self._ingredients.lookup()
        except UpstreamError as e:
            logger.warning("Ingredient lookup after write failed", error=str(e))
            return {}
