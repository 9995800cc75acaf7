"""Unit tests for the recipe endpoints.

Tests cover:
- Query parameter parsing into filters, ingredient ids and meta
- The admin credential gate on writes
- Title validation before any store call
- Envelope shape and error mapping
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_catalog.api.v1.endpoints.recipes import split_labels
from recipe_catalog.notion import UpstreamResponseError, UpstreamTimeoutError
from recipe_catalog.schemas import RecipeFilters, UpdateRecipeRequest
from tests.factories import RecipeFactory, RecipeMetadataFactory


if TYPE_CHECKING:
    from unittest.mock import AsyncMock

    from httpx import AsyncClient


pytestmark = pytest.mark.unit

RECIPES = "/api/recipes"


class TestSplitLabels:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (None, []),
            ("", []),
            ("x", ["x"]),
            ("x, y", ["x", "y"]),
            ("x,,y,", ["x", "y"]),
        ],
    )
    def test_split(self, raw: str | None, expected: list[str]) -> None:
        assert split_labels(raw) == expected


class TestListRecipes:
    async def test_unfiltered(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        recipes = RecipeFactory.batch(size=2)
        mock_recipes.list.return_value = recipes

        response = await client.get(RECIPES)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [r["id"] for r in body["data"]] == [r.id for r in recipes]
        mock_recipes.list.assert_awaited_once_with(
            RecipeFilters(category=None, tags=[], search=None)
        )

    async def test_filters_are_parsed(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        mock_recipes.list.return_value = []

        response = await client.get(
            RECIPES, params={"category": "한식", "tags": "x, y", "search": "찌개"}
        )

        assert response.status_code == 200
        mock_recipes.list.assert_awaited_once_with(
            RecipeFilters(category="한식", tags=["x", "y"], search="찌개")
        )

    async def test_response_is_camel_case(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        mock_recipes.list.return_value = [RecipeFactory.korean()]

        response = await client.get(RECIPES)

        recipe = response.json()["data"][0]
        assert {"imageUrl", "prepTime", "cookTime", "sourceType"} <= recipe.keys()
        assert "ingredientId" in recipe["ingredients"][0]

    async def test_meta_returns_labels_only(
        self,
        client: AsyncClient,
        mock_recipes: AsyncMock,
        mock_metadata: AsyncMock,
    ) -> None:
        mock_metadata.get_metadata.return_value = RecipeMetadataFactory.build()

        response = await client.get(RECIPES, params={"meta": "true"})

        assert response.status_code == 200
        assert response.json()["data"] == {
            "categories": ["한식", "양식"],
            "tags": ["quick", "spicy"],
        }
        mock_recipes.list.assert_not_awaited()

    async def test_ingredient_ids(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        mock_recipes.list_by_ingredients.return_value = []

        response = await client.get(RECIPES, params={"ingredientIds": "a,b"})

        assert response.status_code == 200
        mock_recipes.list_by_ingredients.assert_awaited_once_with(["a", "b"])
        mock_recipes.list.assert_not_awaited()

    async def test_ingredient_ids_with_other_filters_rejected(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        response = await client.get(
            RECIPES, params={"ingredientIds": "a", "category": "A"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "VALIDATION_ERROR"
        mock_recipes.list_by_ingredients.assert_not_awaited()

    async def test_store_failure_is_generic_502(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        mock_recipes.list.side_effect = UpstreamResponseError(
            400, "Could not find property with name or id: Tags"
        )

        response = await client.get(RECIPES)

        assert response.status_code == 502
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "UPSTREAM_ERROR"
        assert "Tags" not in body["message"]
        assert body["request_id"] == response.headers["X-Request-ID"]

    async def test_store_timeout_is_504(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        mock_recipes.list.side_effect = UpstreamTimeoutError("timed out")

        response = await client.get(RECIPES)

        assert response.status_code == 504


class TestGetRecipe:
    async def test_found(self, client: AsyncClient, mock_recipes: AsyncMock) -> None:
        recipe = RecipeFactory.build(id="r1")
        mock_recipes.get_by_id.return_value = recipe

        response = await client.get(f"{RECIPES}/r1")

        assert response.status_code == 200
        assert response.json()["data"]["title"] == recipe.title
        mock_recipes.get_by_id.assert_awaited_once_with("r1")

    async def test_absent_is_404(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        mock_recipes.get_by_id.return_value = None

        response = await client.get(f"{RECIPES}/missing")

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"


class TestCreateRecipe:
    async def test_requires_credential(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        response = await client.post(RECIPES, json={"title": "Toast"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        mock_recipes.create.assert_not_awaited()

    async def test_wrong_credential(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        response = await client.post(
            RECIPES,
            json={"title": "Toast"},
            headers={"Authorization": "Bearer nope"},
        )

        assert response.status_code == 401
        mock_recipes.create.assert_not_awaited()

    @pytest.mark.parametrize("body", [{}, {"title": ""}, {"title": "   "}])
    async def test_blank_title_rejected_before_store(
        self,
        client: AsyncClient,
        mock_recipes: AsyncMock,
        admin_headers: dict[str, str],
        body: dict[str, str],
    ) -> None:
        response = await client.post(RECIPES, json=body, headers=admin_headers)

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "title"
        mock_recipes.create.assert_not_awaited()

    async def test_created(
        self,
        client: AsyncClient,
        mock_recipes: AsyncMock,
        admin_headers: dict[str, str],
    ) -> None:
        recipe = RecipeFactory.build(title="Bibimbap")
        mock_recipes.create.return_value = recipe

        response = await client.post(
            RECIPES,
            json={
                "title": "Bibimbap",
                "prepTime": 15,
                "ingredients": [
                    {"ingredientId": "rice", "amount": "1 bowl", "name": "ignored"}
                ],
            },
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["id"] == recipe.id
        sent = mock_recipes.create.await_args.args[0]
        assert sent.prep_time == 15
        assert sent.ingredients[0].ingredient_id == "rice"
        assert sent.ingredients[0].amount == "1 bowl"

    async def test_negative_servings_is_schema_error(
        self,
        client: AsyncClient,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            RECIPES, json={"title": "x", "servings": -1}, headers=admin_headers
        )

        assert response.status_code == 422


class TestUpdateRecipe:
    async def test_partial_body_passed_through(
        self,
        client: AsyncClient,
        mock_recipes: AsyncMock,
        admin_headers: dict[str, str],
    ) -> None:
        mock_recipes.update.return_value = RecipeFactory.build(id="r1")

        response = await client.patch(
            f"{RECIPES}/r1", json={"cookTime": 40}, headers=admin_headers
        )

        assert response.status_code == 200
        recipe_id, patch = mock_recipes.update.await_args.args
        assert recipe_id == "r1"
        assert isinstance(patch, UpdateRecipeRequest)
        assert patch.model_fields_set == {"cook_time"}

    async def test_empty_title_rejected(
        self,
        client: AsyncClient,
        mock_recipes: AsyncMock,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.patch(
            f"{RECIPES}/r1", json={"title": ""}, headers=admin_headers
        )

        assert response.status_code == 400
        mock_recipes.update.assert_not_awaited()

    async def test_requires_credential(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        response = await client.patch(f"{RECIPES}/r1", json={"cookTime": 1})

        assert response.status_code == 401
        mock_recipes.update.assert_not_awaited()


class TestDeleteRecipe:
    async def test_deleted(
        self,
        client: AsyncClient,
        mock_recipes: AsyncMock,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.delete(f"{RECIPES}/r1", headers=admin_headers)

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"message": "Recipe deleted successfully"},
        }
        mock_recipes.delete.assert_awaited_once_with("r1")

    async def test_requires_credential(
        self, client: AsyncClient, mock_recipes: AsyncMock
    ) -> None:
        response = await client.delete(f"{RECIPES}/r1")

        assert response.status_code == 401
        mock_recipes.delete.assert_not_awaited()
