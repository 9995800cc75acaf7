"""Pydantic schemas for request/response validation and domain models."""

from recipe_catalog.schemas.base import (
    APIRequest,
    APIResponse,
    DataResponse,
    MessageData,
)
from recipe_catalog.schemas.enums import HealthStatus, SourceType
from recipe_catalog.schemas.ingredient import CreateIngredientRequest, Ingredient
from recipe_catalog.schemas.recipe import (
    CreateRecipeRequest,
    Recipe,
    RecipeFilters,
    RecipeIngredient,
    RecipeIngredientInput,
    RecipeMetadata,
    UpdateRecipeRequest,
)
from recipe_catalog.schemas.root import HealthResponse, RootResponse


__all__ = [
    "APIRequest",
    "APIResponse",
    "CreateIngredientRequest",
    "CreateRecipeRequest",
    "DataResponse",
    "HealthResponse",
    "HealthStatus",
    "Ingredient",
    "MessageData",
    "Recipe",
    "RecipeFilters",
    "RecipeIngredient",
    "RecipeIngredientInput",
    "RecipeMetadata",
    "RootResponse",
    "SourceType",
    "UpdateRecipeRequest",
]
