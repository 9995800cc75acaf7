"""Recipe endpoints.

Provides:
- GET /recipes for listing with filters, or schema metadata with ?meta=true
- POST /recipes for creating a recipe
- GET /recipes/{recipe_id} for a single recipe
- PATCH /recipes/{recipe_id} for partial updates
- DELETE /recipes/{recipe_id} for soft-archiving
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from recipe_catalog.api.dependencies import (
    get_metadata_repository,
    get_recipe_repository,
)
from recipe_catalog.auth import AdminRequired
from recipe_catalog.core.exceptions import NotFoundException, ValidationException
from recipe_catalog.repositories import MetadataRepository, RecipeRepository
from recipe_catalog.schemas import (
    CreateRecipeRequest,
    DataResponse,
    MessageData,
    Recipe,
    RecipeFilters,
    RecipeMetadata,
    UpdateRecipeRequest,
)


router = APIRouter(tags=["Recipes"])

_AUTH_RESPONSES: dict[int | str, dict[str, str]] = {
    401: {"description": "Missing or incorrect admin credential"},
    502: {"description": "Document store request failed"},
}


def split_labels(value: str | None) -> list[str]:
    """Split a comma-joined query value into trimmed, non-empty labels."""
    if not value:
        return []
    return [label.strip() for label in value.split(",") if label.strip()]


@router.get(
    "/recipes",
    response_model=DataResponse[list[Recipe]] | DataResponse[RecipeMetadata],
    summary="List recipes",
    description=(
        "Lists recipes newest first. category, tags and search are combined "
        "with AND (a recipe must carry every listed tag). ingredientIds "
        "matches recipes using ANY of the listed ingredients. With meta=true "
        "the recipe query is skipped and the configured category and tag "
        "labels are returned instead."
    ),
    responses={
        400: {"description": "ingredientIds combined with other filters"},
        502: {"description": "Document store request failed"},
    },
)
async def list_recipes(
    recipes: Annotated[RecipeRepository, Depends(get_recipe_repository)],
    metadata: Annotated[MetadataRepository, Depends(get_metadata_repository)],
    category: Annotated[str | None, Query(description="Exact category")] = None,
    tags: Annotated[str | None, Query(description="Comma-joined tag labels")] = None,
    search: Annotated[str | None, Query(description="Title substring")] = None,
    ingredient_ids: Annotated[
        str | None,
        Query(alias="ingredientIds", description="Comma-joined ingredient ids"),
    ] = None,
    meta: Annotated[bool, Query(description="Return labels only")] = False,
) -> DataResponse[list[Recipe]] | DataResponse[RecipeMetadata]:
    """List recipes or return classification metadata."""
    if meta:
        return DataResponse[RecipeMetadata](data=await metadata.get_metadata())

    if ingredient_ids is not None:
        if category or tags or search:
            msg = "ingredientIds cannot be combined with category, tags or search"
            raise ValidationException(msg, field="ingredientIds")
        found = await recipes.list_by_ingredients(split_labels(ingredient_ids))
        return DataResponse[list[Recipe]](data=found)

    filters = RecipeFilters(
        category=category or None,
        tags=split_labels(tags),
        search=search or None,
    )
    return DataResponse[list[Recipe]](data=await recipes.list(filters))


@router.post(
    "/recipes",
    response_model=DataResponse[Recipe],
    status_code=status.HTTP_201_CREATED,
    summary="Create a recipe",
    dependencies=[AdminRequired],
    responses={400: {"description": "Title is missing"}, **_AUTH_RESPONSES},
)
async def create_recipe(
    request_body: CreateRecipeRequest,
    recipes: Annotated[RecipeRepository, Depends(get_recipe_repository)],
) -> DataResponse[Recipe]:
    """Create a recipe. Ingredient ids are linked without existence checks."""
    if not request_body.title.strip():
        raise ValidationException("Title is required", field="title")

    recipe = await recipes.create(request_body)
    return DataResponse[Recipe](data=recipe)


@router.get(
    "/recipes/{recipe_id}",
    response_model=DataResponse[Recipe],
    summary="Get a recipe",
    responses={404: {"description": "Recipe not found"}},
)
async def get_recipe(
    recipe_id: Annotated[str, Path(description="Recipe id")],
    recipes: Annotated[RecipeRepository, Depends(get_recipe_repository)],
) -> DataResponse[Recipe]:
    """Get a single recipe.

    A store failure during lookup is reported as not found.
    """
    recipe = await recipes.get_by_id(recipe_id)
    if recipe is None:
        raise NotFoundException("Recipe", recipe_id)
    return DataResponse[Recipe](data=recipe)


@router.patch(
    "/recipes/{recipe_id}",
    response_model=DataResponse[Recipe],
    summary="Update a recipe",
    dependencies=[AdminRequired],
    responses={400: {"description": "Title set to empty"}, **_AUTH_RESPONSES},
)
async def update_recipe(
    recipe_id: Annotated[str, Path(description="Recipe id")],
    request_body: UpdateRecipeRequest,
    recipes: Annotated[RecipeRepository, Depends(get_recipe_repository)],
) -> DataResponse[Recipe]:
    """Apply a partial update; only fields present in the body change."""
    if "title" in request_body.model_fields_set and not (
        request_body.title or ""
    ).strip():
        raise ValidationException("Title is required", field="title")

    recipe = await recipes.update(recipe_id, request_body)
    return DataResponse[Recipe](data=recipe)


@router.delete(
    "/recipes/{recipe_id}",
    response_model=DataResponse[MessageData],
    summary="Delete a recipe",
    description="Archives the recipe; it no longer appears in lists or lookups.",
    dependencies=[AdminRequired],
    responses=_AUTH_RESPONSES,
)
async def delete_recipe(
    recipe_id: Annotated[str, Path(description="Recipe id")],
    recipes: Annotated[RecipeRepository, Depends(get_recipe_repository)],
) -> DataResponse[MessageData]:
    """Soft-archive a recipe."""
    await recipes.delete(recipe_id)
    return DataResponse[MessageData](
        data=MessageData(message="Recipe deleted successfully")
    )
