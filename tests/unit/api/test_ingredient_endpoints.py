"""Unit tests for the ingredient endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipe_catalog.notion import UpstreamUnavailableError
from tests.factories import IngredientFactory


if TYPE_CHECKING:
    from unittest.mock import AsyncMock

    from httpx import AsyncClient


pytestmark = pytest.mark.unit

INGREDIENTS = "/api/ingredients"


class TestListIngredients:
    async def test_returns_envelope(
        self, client: AsyncClient, mock_ingredients: AsyncMock
    ) -> None:
        ingredients = IngredientFactory.batch(size=3)
        mock_ingredients.list.return_value = ingredients

        response = await client.get(INGREDIENTS)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert [i["name"] for i in body["data"]] == [i.name for i in ingredients]

    async def test_store_unreachable(
        self, client: AsyncClient, mock_ingredients: AsyncMock
    ) -> None:
        mock_ingredients.list.side_effect = UpstreamUnavailableError("refused")

        response = await client.get(INGREDIENTS)

        assert response.status_code == 502
        assert response.json()["error"] == "UPSTREAM_ERROR"


class TestGetIngredient:
    async def test_found(
        self, client: AsyncClient, mock_ingredients: AsyncMock
    ) -> None:
        mock_ingredients.get_by_id.return_value = IngredientFactory.build(
            id="i1", name="Garlic"
        )

        response = await client.get(f"{INGREDIENTS}/i1")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Garlic"

    async def test_absent_is_404(
        self, client: AsyncClient, mock_ingredients: AsyncMock
    ) -> None:
        mock_ingredients.get_by_id.return_value = None

        response = await client.get(f"{INGREDIENTS}/nope")

        assert response.status_code == 404


class TestCreateIngredient:
    async def test_requires_credential(
        self, client: AsyncClient, mock_ingredients: AsyncMock
    ) -> None:
        response = await client.post(INGREDIENTS, json={"name": "Salt"})

        assert response.status_code == 401
        mock_ingredients.create.assert_not_awaited()

    async def test_blank_name_rejected(
        self,
        client: AsyncClient,
        mock_ingredients: AsyncMock,
        admin_headers: dict[str, str],
    ) -> None:
        response = await client.post(
            INGREDIENTS, json={"name": "  "}, headers=admin_headers
        )

        assert response.status_code == 400
        assert response.json()["details"][0]["field"] == "name"
        mock_ingredients.create.assert_not_awaited()

    async def test_created(
        self,
        client: AsyncClient,
        mock_ingredients: AsyncMock,
        admin_headers: dict[str, str],
    ) -> None:
        mock_ingredients.create.return_value = IngredientFactory.build(
            id="i9", name="Salt", unit="g"
        )

        response = await client.post(
            INGREDIENTS,
            json={"name": " Salt ", "unit": "g"},
            headers=admin_headers,
        )

        assert response.status_code == 201
        assert response.json()["data"]["id"] == "i9"
        mock_ingredients.create.assert_awaited_once_with(
            name="Salt", category="", unit="g"
        )
