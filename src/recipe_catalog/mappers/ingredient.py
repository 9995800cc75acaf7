"""Ingredient page mapping."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from recipe_catalog.mappers.properties import (
    decode_select,
    decode_text,
    encode_select,
    encode_title,
)
from recipe_catalog.schemas.ingredient import Ingredient


if TYPE_CHECKING:
    from recipe_catalog.schemas.ingredient import CreateIngredientRequest


class IngredientProperty(StrEnum):
    """Property names of the ingredients database."""

    NAME = "Name"
    CATEGORY = "Category"
    UNIT = "Unit"


def page_to_ingredient(page: dict[str, Any]) -> Ingredient:
    """Build an Ingredient from a Notion page."""
    props = page.get("properties") or {}
    return Ingredient(
        id=page["id"],
        name=decode_text(props.get(IngredientProperty.NAME)),
        category=decode_select(props.get(IngredientProperty.CATEGORY)),
        unit=decode_select(props.get(IngredientProperty.UNIT)),
    )


def ingredient_to_properties(data: CreateIngredientRequest) -> dict[str, Any]:
    """Encode a create request as page properties."""
    return {
        IngredientProperty.NAME.value: encode_title(data.name),
        IngredientProperty.CATEGORY.value: encode_select(data.category),
        IngredientProperty.UNIT.value: encode_select(data.unit),
    }
