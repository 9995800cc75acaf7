"""API v1 router aggregating the endpoint routers.

Everything here is mounted under the configured v1_prefix (default /api).
The root endpoint is mounted separately without a prefix.
"""

from __future__ import annotations

from fastapi import APIRouter

from recipe_catalog.api.v1.endpoints import health, ingredients, recipes


router = APIRouter()

router.include_router(health.router)
router.include_router(recipes.router)
router.include_router(ingredients.router)
