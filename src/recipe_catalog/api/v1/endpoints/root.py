"""Root endpoint providing service information."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_catalog.core.config import Settings, get_settings
from recipe_catalog.schemas import RootResponse


router = APIRouter(tags=["Root"])


@router.get(
    "/",
    response_model=RootResponse,
    summary="Root endpoint",
    description="Basic service information with links to docs and health.",
)
async def root(
    settings: Annotated[Settings, Depends(get_settings)],
) -> RootResponse:
    """Return basic service information for discovery."""
    return RootResponse(
        service=settings.app.name,
        version=settings.app.version,
        status="operational",
        docs="/docs" if settings.is_non_production else "disabled",
        health=f"{settings.api.v1_prefix}/health",
    )
