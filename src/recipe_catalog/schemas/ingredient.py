"""Ingredient schemas."""

from __future__ import annotations

from pydantic import Field

from recipe_catalog.schemas.base import APIRequest, APIResponse


class Ingredient(APIResponse):
    """An entry of the shared ingredient list."""

    id: str = Field(..., description="Opaque store id")
    name: str = Field(..., description="Canonical display label")
    category: str = Field(default="", description="Free-form category label")
    unit: str = Field(default="", description="Default unit, e.g. g, ml, 개")


class CreateIngredientRequest(APIRequest):
    """Request body for creating an ingredient.

    ``name`` must be non-empty; the endpoint checks this before any store call.
    """

    name: str = Field(default="", max_length=2000)
    category: str = Field(default="", max_length=100)
    unit: str = Field(default="", max_length=100)
