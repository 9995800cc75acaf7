"""Application lifespan event handlers.

Startup configures logging and opens the shared Notion HTTP client;
shutdown closes it.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipe_catalog.core.config import Settings, get_settings
from recipe_catalog.notion.client import NotionClient
from recipe_catalog.observability.logging import get_logger, setup_logging


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI

logger = get_logger(__name__)


async def _startup(app: FastAPI, settings: Settings) -> None:
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    missing = settings.missing_store_settings
    if missing:
        logger.warning("Document store is not fully configured", missing=missing)

    notion_client = NotionClient(settings)
    await notion_client.initialize()
    app.state.notion_client = notion_client

    logger.info("Application startup complete")


async def _shutdown(app: FastAPI) -> None:
    logger.info("Shutting down application")

    notion_client: NotionClient | None = getattr(app.state, "notion_client", None)
    if notion_client is not None:
        await notion_client.shutdown()
        app.state.notion_client = None
        logger.debug("NotionClient shutdown")

    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Settings are taken from app.state when the factory stored an override,
    otherwise from get_settings().

    Yields:
        None; control returns to the application to handle requests.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
