"""Shared test fixtures for the recipe catalog service.

Provides test settings, an in-memory Notion workspace mounted through respx,
an initialized NotionClient and repositories wired to it.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
import respx

from recipe_catalog.core.config import NotionSettings, Settings, get_settings
from recipe_catalog.notion.client import NotionClient
from recipe_catalog.repositories import (
    IngredientRepository,
    MetadataRepository,
    RecipeRepository,
)
from tests.fakes import FakeNotionWorkspace


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator


os.environ.setdefault("APP_ENV", "test")

NOTION_BASE_URL = "https://notion.test/v1"
RECIPES_DATABASE_ID = "0c3f4a52-6d1e-4c4b-9a57-7f1b2d3e4a01"
INGREDIENTS_DATABASE_ID = "8b2e7d19-3a4c-4f6e-b1d0-5c6a7e8f9b02"
ADMIN_PASSWORD = "correct-horse-battery"


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at the fake workspace."""
    return Settings(
        APP_ENV="test",
        NOTION_API_KEY="secret_test_key",
        ADMIN_PASSWORD=ADMIN_PASSWORD,
        notion=NotionSettings(
            base_url=NOTION_BASE_URL,
            timeout=2.0,
            page_size=100,
            recipes_database_id=RECIPES_DATABASE_ID,
            ingredients_database_id=INGREDIENTS_DATABASE_ID,
        ),
    )


@pytest.fixture
def workspace() -> Generator[FakeNotionWorkspace]:
    """An empty workspace serving the Notion routes."""
    fake = FakeNotionWorkspace(
        NOTION_BASE_URL,
        recipes_database_id=RECIPES_DATABASE_ID,
        ingredients_database_id=INGREDIENTS_DATABASE_ID,
    )
    with respx.mock(assert_all_called=False) as router:
        fake.install(router)
        yield fake


@pytest.fixture
async def notion_client(
    test_settings: Settings,
    workspace: FakeNotionWorkspace,
) -> AsyncGenerator[NotionClient]:
    """Initialized client talking to the fake workspace."""
    client = NotionClient(test_settings)
    await client.initialize()
    try:
        yield client
    finally:
        await client.shutdown()


@pytest.fixture
def ingredient_repository(notion_client: NotionClient) -> IngredientRepository:
    return IngredientRepository(notion_client, INGREDIENTS_DATABASE_ID)


@pytest.fixture
def recipe_repository(
    notion_client: NotionClient,
    ingredient_repository: IngredientRepository,
) -> RecipeRepository:
    return RecipeRepository(notion_client, RECIPES_DATABASE_ID, ingredient_repository)


@pytest.fixture
def metadata_repository(notion_client: NotionClient) -> MetadataRepository:
    return MetadataRepository(notion_client, RECIPES_DATABASE_ID)


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Authorization header carrying the configured admin password."""
    return {"Authorization": f"Bearer {ADMIN_PASSWORD}"}
