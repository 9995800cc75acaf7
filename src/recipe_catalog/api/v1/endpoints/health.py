"""Health check endpoint.

Liveness probe for load balancers. The document store is not called; the
response only reports whether it is configured.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipe_catalog.core.config import Settings, get_settings
from recipe_catalog.schemas import HealthResponse, HealthStatus


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Liveness probe",
    description="Basic health check to verify the service is running.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Report liveness; degraded when the document store is not configured."""
    configured = not settings.missing_store_settings
    return HealthResponse(
        status=HealthStatus.HEALTHY if configured else HealthStatus.DEGRADED,
        version=settings.app.version,
        environment=settings.APP_ENV,
        store_configured=configured,
    )
