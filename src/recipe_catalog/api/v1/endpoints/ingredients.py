"""Ingredient endpoints.

Provides:
- GET /ingredients for the full list, ascending by name
- POST /ingredients for creating an ingredient
- GET /ingredients/{ingredient_id} for a single ingredient
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from recipe_catalog.api.dependencies import get_ingredient_repository
from recipe_catalog.auth import AdminRequired
from recipe_catalog.core.exceptions import NotFoundException, ValidationException
from recipe_catalog.repositories import IngredientRepository
from recipe_catalog.schemas import CreateIngredientRequest, DataResponse, Ingredient


router = APIRouter(tags=["Ingredients"])


@router.get(
    "/ingredients",
    response_model=DataResponse[list[Ingredient]],
    summary="List ingredients",
    responses={502: {"description": "Document store request failed"}},
)
async def list_ingredients(
    ingredients: Annotated[IngredientRepository, Depends(get_ingredient_repository)],
) -> DataResponse[list[Ingredient]]:
    """List every ingredient, ascending by name."""
    return DataResponse[list[Ingredient]](data=await ingredients.list())


@router.post(
    "/ingredients",
    response_model=DataResponse[Ingredient],
    status_code=status.HTTP_201_CREATED,
    summary="Create an ingredient",
    description="Duplicate names are allowed and create separate ingredients.",
    dependencies=[AdminRequired],
    responses={
        400: {"description": "Name is missing"},
        401: {"description": "Missing or incorrect admin credential"},
        502: {"description": "Document store request failed"},
    },
)
async def create_ingredient(
    request_body: CreateIngredientRequest,
    ingredients: Annotated[IngredientRepository, Depends(get_ingredient_repository)],
) -> DataResponse[Ingredient]:
    """Create an ingredient."""
    name = request_body.name.strip()
    if not name:
        raise ValidationException("Name is required", field="name")

    ingredient = await ingredients.create(
        name=name,
        category=request_body.category,
        unit=request_body.unit,
    )
    return DataResponse[Ingredient](data=ingredient)


@router.get(
    "/ingredients/{ingredient_id}",
    response_model=DataResponse[Ingredient],
    summary="Get an ingredient",
    responses={404: {"description": "Ingredient not found"}},
)
async def get_ingredient(
    ingredient_id: Annotated[str, Path(description="Ingredient id")],
    ingredients: Annotated[IngredientRepository, Depends(get_ingredient_repository)],
) -> DataResponse[Ingredient]:
    """Get a single ingredient; a failed lookup is reported as not found."""
    ingredient = await ingredients.get_by_id(ingredient_id)
    if ingredient is None:
        raise NotFoundException("Ingredient", ingredient_id)
    return DataResponse[Ingredient](data=ingredient)
