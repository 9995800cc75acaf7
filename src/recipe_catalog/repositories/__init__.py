"""Notion-backed repositories."""

from recipe_catalog.repositories.ingredient import IngredientRepository
from recipe_catalog.repositories.metadata import MetadataRepository
from recipe_catalog.repositories.recipe import RecipeRepository


__all__ = ["IngredientRepository", "MetadataRepository", "RecipeRepository"]
