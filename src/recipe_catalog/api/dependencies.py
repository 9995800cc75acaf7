"""FastAPI dependencies for repository access.

The Notion client is created during application startup and stored in
app.state; repositories are cheap wrappers built per request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from recipe_catalog.core.config import Settings, get_settings
from recipe_catalog.core.exceptions import ServiceUnavailableException
from recipe_catalog.notion.client import NotionClient
from recipe_catalog.repositories import (
    IngredientRepository,
    MetadataRepository,
    RecipeRepository,
)


async def get_notion_client(request: Request) -> NotionClient:
    """Get the Notion client from app state.

    Raises:
        ServiceUnavailableException: 503 if the client is not initialized.
    """
    client: NotionClient | None = getattr(request.app.state, "notion_client", None)
    if client is None:
        raise ServiceUnavailableException("Document store client not available")
    return client


def _require(database_id: str | None, name: str) -> str:
    if not database_id:
        raise ServiceUnavailableException(f"{name} database is not configured")
    return database_id


async def get_ingredient_repository(
    client: Annotated[NotionClient, Depends(get_notion_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> IngredientRepository:
    """Build the ingredient repository."""
    database_id = _require(settings.notion.ingredients_database_id, "Ingredients")
    return IngredientRepository(client, database_id)


async def get_recipe_repository(
    client: Annotated[NotionClient, Depends(get_notion_client)],
    ingredients: Annotated[IngredientRepository, Depends(get_ingredient_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> RecipeRepository:
    """Build the recipe repository, wired to the ingredient repository."""
    database_id = _require(settings.notion.recipes_database_id, "Recipes")
    return RecipeRepository(client, database_id, ingredients)


async def get_metadata_repository(
    client: Annotated[NotionClient, Depends(get_notion_client)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MetadataRepository:
    """Build the metadata accessor over the recipes database schema."""
    database_id = _require(settings.notion.recipes_database_id, "Recipes")
    return MetadataRepository(client, database_id)
