"""Recipe page mapping.

Translates between Notion recipe pages and the Recipe domain model. The
ingredient relation only stores ids; names and units are projected from an
id -> Ingredient lookup supplied by the caller, and amounts come from the
``IngredientAmounts`` property.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from recipe_catalog.mappers.properties import (
    decode_amounts,
    decode_instructions,
    decode_multi_select,
    decode_number,
    decode_relation,
    decode_select,
    decode_text,
    decode_url,
    encode_amounts,
    encode_instructions,
    encode_multi_select,
    encode_number,
    encode_relation,
    encode_rich_text,
    encode_select,
    encode_title,
    encode_url,
    normalize_page_id,
)
from recipe_catalog.observability.logging import get_logger
from recipe_catalog.schemas.enums import SourceType
from recipe_catalog.schemas.recipe import Recipe, RecipeIngredient


if TYPE_CHECKING:
    from recipe_catalog.schemas.ingredient import Ingredient
    from recipe_catalog.schemas.recipe import (
        CreateRecipeRequest,
        RecipeIngredientInput,
        UpdateRecipeRequest,
    )


logger = get_logger(__name__)


class RecipeProperty(StrEnum):
    """Property names of the recipes database."""

    NAME = "Name"
    DESCRIPTION = "Description"
    IMAGE_URL = "ImageURL"
    CATEGORY = "Category"
    TAGS = "Tags"
    SERVINGS = "Servings"
    PREP_TIME = "PrepTime"
    COOK_TIME = "CookTime"
    INSTRUCTIONS = "Instructions"
    SOURCE_URL = "SourceURL"
    SOURCE_TYPE = "SourceType"
    INGREDIENTS = "Ingredients"
    INGREDIENT_AMOUNTS = "IngredientAmounts"


def _decode_source_type(value: str) -> SourceType | None:
    if not value:
        return None
    try:
        return SourceType(value)
    except ValueError:
        logger.debug("Ignoring unknown source type", source_type=value)
        return None


def _decode_ingredients(
    props: Mapping[str, Any],
    ingredients: Mapping[str, Ingredient],
) -> list[RecipeIngredient]:
    amounts = decode_amounts(props.get(RecipeProperty.INGREDIENT_AMOUNTS))
    usages = []
    for ingredient_id in decode_relation(props.get(RecipeProperty.INGREDIENTS)):
        ingredient = ingredients.get(ingredient_id)
        usages.append(
            RecipeIngredient(
                ingredient_id=ingredient_id,
                name=ingredient.name if ingredient else "",
                unit=ingredient.unit if ingredient else "",
                amount=amounts.get(normalize_page_id(ingredient_id), ""),
            )
        )
    return usages


def page_to_recipe(
    page: dict[str, Any],
    ingredients: Mapping[str, Ingredient] | None = None,
) -> Recipe:
    """Build a Recipe from a Notion page.

    Args:
        page: Raw page object.
        ingredients: Ingredient lookup keyed by id. References missing from it
            decode with an empty name and unit.

    Returns:
        The decoded Recipe.
    """
    props = page.get("properties") or {}
    source_url = decode_url(props.get(RecipeProperty.SOURCE_URL))

    return Recipe(
        id=page["id"],
        title=decode_text(props.get(RecipeProperty.NAME)),
        description=decode_text(props.get(RecipeProperty.DESCRIPTION)),
        image_url=decode_url(props.get(RecipeProperty.IMAGE_URL)),
        category=decode_select(props.get(RecipeProperty.CATEGORY)),
        tags=decode_multi_select(props.get(RecipeProperty.TAGS)),
        servings=max(decode_number(props.get(RecipeProperty.SERVINGS)), 0),
        prep_time=max(decode_number(props.get(RecipeProperty.PREP_TIME)), 0),
        cook_time=max(decode_number(props.get(RecipeProperty.COOK_TIME)), 0),
        ingredients=_decode_ingredients(props, ingredients or {}),
        instructions=decode_instructions(
            decode_text(props.get(RecipeProperty.INSTRUCTIONS))
        ),
        source_url=source_url or None,
        source_type=_decode_source_type(
            decode_select(props.get(RecipeProperty.SOURCE_TYPE))
        ),
        created_at=page.get("created_time"),
        updated_at=page.get("last_edited_time"),
    )


def _encode_ingredients(
    usages: list[RecipeIngredientInput] | None,
) -> dict[str, dict[str, Any]]:
    usages = usages or []
    return {
        RecipeProperty.INGREDIENTS.value: encode_relation(
            usage.ingredient_id for usage in usages
        ),
        RecipeProperty.INGREDIENT_AMOUNTS.value: encode_amounts(
            {usage.ingredient_id: usage.amount for usage in usages}
        ),
    }


def _single(
    prop: RecipeProperty,
    encoder: Callable[[Any], dict[str, Any]],
) -> Callable[[Any], dict[str, dict[str, Any]]]:
    return lambda value: {prop.value: encoder(value)}


# Request field -> encoder producing one or more property entries
_FIELD_ENCODERS: dict[str, Callable[[Any], dict[str, dict[str, Any]]]] = {
    "title": _single(RecipeProperty.NAME, lambda v: encode_title(v or "")),
    "description": _single(
        RecipeProperty.DESCRIPTION, lambda v: encode_rich_text(v or "")
    ),
    "image_url": _single(RecipeProperty.IMAGE_URL, encode_url),
    "category": _single(RecipeProperty.CATEGORY, encode_select),
    "tags": _single(RecipeProperty.TAGS, lambda v: encode_multi_select(v or [])),
    "servings": _single(RecipeProperty.SERVINGS, encode_number),
    "prep_time": _single(RecipeProperty.PREP_TIME, encode_number),
    "cook_time": _single(RecipeProperty.COOK_TIME, encode_number),
    "instructions": _single(
        RecipeProperty.INSTRUCTIONS,
        lambda v: encode_rich_text(encode_instructions(v or [])),
    ),
    "source_url": _single(RecipeProperty.SOURCE_URL, encode_url),
    "source_type": _single(RecipeProperty.SOURCE_TYPE, encode_select),
    "ingredients": _encode_ingredients,
}


def create_request_to_properties(data: CreateRecipeRequest) -> dict[str, Any]:
    """Encode every field of a create request as page properties."""
    properties: dict[str, Any] = {}
    for field, encoder in _FIELD_ENCODERS.items():
        properties.update(encoder(getattr(data, field)))
    return properties


def update_request_to_properties(patch: UpdateRecipeRequest) -> dict[str, Any]:
    """Encode only the fields present in a partial update.

    Omitted fields produce no property entry and keep their stored value.
    """
    properties: dict[str, Any] = {}
    for field, encoder in _FIELD_ENCODERS.items():
        if field in patch.model_fields_set:
            properties.update(encoder(getattr(patch, field)))
    return properties
