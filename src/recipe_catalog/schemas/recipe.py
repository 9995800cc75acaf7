"""Recipe schemas.

Contains the Recipe domain model, its embedded ingredient-usage records,
request bodies for create/update, list filters and the metadata payload.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from recipe_catalog.schemas.base import APIRequest, APIResponse
from recipe_catalog.schemas.enums import SourceType


# =============================================================================
# Domain models
# =============================================================================


class RecipeIngredient(APIResponse):
    """Ingredient-usage record embedded in a recipe.

    ``name`` and ``unit`` are resolved from the ingredient list at read time
    and are empty when the reference no longer resolves.
    """

    ingredient_id: str = Field(..., description="Referenced ingredient id")
    name: str = Field(default="", description="Resolved ingredient name")
    unit: str = Field(default="", description="Resolved ingredient unit")
    amount: str = Field(default="", description="Free-form amount, e.g. 2 or 한 줌")


class Recipe(APIResponse):
    """A recipe as stored in the catalog."""

    id: str = Field(..., description="Opaque store id")
    title: str = Field(..., description="Recipe title")
    description: str = ""
    image_url: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    servings: int = Field(default=0, ge=0, description="0 means unspecified")
    prep_time: int = Field(default=0, ge=0, description="Minutes; 0 means unspecified")
    cook_time: int = Field(default=0, ge=0, description="Minutes; 0 means unspecified")
    ingredients: list[RecipeIngredient] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    source_url: str | None = None
    source_type: SourceType | None = None
    created_at: datetime | None = Field(default=None, description="Store-assigned")
    updated_at: datetime | None = Field(default=None, description="Store-assigned")


class RecipeMetadata(APIResponse):
    """Classification labels configured on the recipe collection schema."""

    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)


# =============================================================================
# Requests
# =============================================================================


class RecipeIngredientInput(APIRequest):
    """Ingredient-usage entry in a create/update body."""

    ingredient_id: str = Field(..., min_length=1)
    amount: str = ""


class CreateRecipeRequest(APIRequest):
    """Request body for creating a recipe.

    ``title`` must be non-empty; the endpoint checks this before any store
    call so a blank title is a 400 rather than a schema error.
    """

    title: str = ""
    description: str = ""
    image_url: str = ""
    category: str = ""
    tags: list[str] = Field(default_factory=list)
    servings: int = Field(default=0, ge=0)
    prep_time: int = Field(default=0, ge=0)
    cook_time: int = Field(default=0, ge=0)
    ingredients: list[RecipeIngredientInput] = Field(default_factory=list)
    instructions: list[str] = Field(default_factory=list)
    source_url: str | None = None
    source_type: SourceType | None = None


class UpdateRecipeRequest(APIRequest):
    """Partial update body.

    Only fields present in the payload (``model_fields_set``) are written;
    an explicit null clears the field.
    """

    title: str | None = None
    description: str | None = None
    image_url: str | None = None
    category: str | None = None
    tags: list[str] | None = None
    servings: int | None = Field(default=None, ge=0)
    prep_time: int | None = Field(default=None, ge=0)
    cook_time: int | None = Field(default=None, ge=0)
    ingredients: list[RecipeIngredientInput] | None = None
    instructions: list[str] | None = None
    source_url: str | None = None
    source_type: SourceType | None = None


class RecipeFilters(BaseModel):
    """Conjunctive filters for listing recipes.

    A recipe matches when it has ``category`` (if given), every label in
    ``tags``, and a title containing ``search`` (if given).
    """

    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    search: str | None = None
