"""Data mappers between Notion pages and catalog domain models."""

from recipe_catalog.mappers.ingredient import (
    IngredientProperty,
    ingredient_to_properties,
    page_to_ingredient,
)
from recipe_catalog.mappers.recipe import (
    RecipeProperty,
    create_request_to_properties,
    page_to_recipe,
    update_request_to_properties,
)


__all__ = [
    "IngredientProperty",
    "RecipeProperty",
    "create_request_to_properties",
    "ingredient_to_properties",
    "page_to_ingredient",
    "page_to_recipe",
    "update_request_to_properties",
]
