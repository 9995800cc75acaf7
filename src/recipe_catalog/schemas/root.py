"""Root and health endpoint response schemas."""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import Field

from recipe_catalog.schemas.base import APIResponse
from recipe_catalog.schemas.enums import HealthStatus


class RootResponse(APIResponse):
    """Basic service information for the root endpoint."""

    service: str = Field(..., description="Service name")
    version: str = Field(..., description="Service version")
    status: str = Field(..., description="Service operational status")
    docs: str = Field(..., description="API documentation URL or status")
    health: str = Field(..., description="Health check endpoint URL")


class HealthResponse(APIResponse):
    """Liveness probe response."""

    status: HealthStatus = Field(..., description="Health status")
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        description="Current server timestamp",
    )
    version: str = Field(..., description="Application version")
    environment: str = Field(..., description="Deployment environment")
    store_configured: bool = Field(
        ...,
        description="Whether both Notion database ids are configured",
    )
