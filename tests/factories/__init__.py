"""Model factories for API tests."""

from tests.factories.catalog import (
    IngredientFactory,
    RecipeFactory,
    RecipeIngredientFactory,
    RecipeMetadataFactory,
)


__all__ = [
    "IngredientFactory",
    "RecipeFactory",
    "RecipeIngredientFactory",
    "RecipeMetadataFactory",
]
