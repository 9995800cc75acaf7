"""Fixtures for endpoint tests.

The application is built by the real factory; repositories are replaced by
mocks through dependency overrides so no store traffic happens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import AsyncMock

import pytest
from httpx import ASGITransport, AsyncClient

from recipe_catalog.api.dependencies import (
    get_ingredient_repository,
    get_metadata_repository,
    get_recipe_repository,
)
from recipe_catalog.core.config import get_settings
from recipe_catalog.factory import create_app
from recipe_catalog.repositories import (
    IngredientRepository,
    MetadataRepository,
    RecipeRepository,
)


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipe_catalog.core.config import Settings


@pytest.fixture
def mock_recipes() -> AsyncMock:
    return AsyncMock(spec=RecipeRepository)


@pytest.fixture
def mock_ingredients() -> AsyncMock:
    return AsyncMock(spec=IngredientRepository)


@pytest.fixture
def mock_metadata() -> AsyncMock:
    return AsyncMock(spec=MetadataRepository)


@pytest.fixture
def app(
    test_settings: Settings,
    mock_recipes: AsyncMock,
    mock_ingredients: AsyncMock,
    mock_metadata: AsyncMock,
) -> FastAPI:
    application = create_app(test_settings)
    application.dependency_overrides[get_settings] = lambda: test_settings
    application.dependency_overrides[get_recipe_repository] = lambda: mock_recipes
    application.dependency_overrides[get_ingredient_repository] = (
        lambda: mock_ingredients
    )
    application.dependency_overrides[get_metadata_repository] = lambda: mock_metadata
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
