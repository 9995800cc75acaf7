"""Integration test fixtures.

Runs the real application stack (factory, middleware, dependencies,
repositories and NotionClient) in-process against the fake workspace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from recipe_catalog.core.config import get_settings
from recipe_catalog.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

    from recipe_catalog.core.config import Settings
    from recipe_catalog.notion import NotionClient




@pytest.fixture
def app(test_settings: Settings, notion_client: NotionClient) -> FastAPI:
    application = create_app(test_settings)
    application.dependency_overrides[get_settings] = lambda: test_settings
    # ASGITransport does not run the lifespan; install the client directly
    application.state.notion_client = notion_client
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
