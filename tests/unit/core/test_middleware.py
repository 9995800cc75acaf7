"""Unit tests for the HTTP middleware."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from recipe_catalog.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    TimingMiddleware,
)
from recipe_catalog.core.middleware.logging import client_ip
from recipe_catalog.core.middleware.request_id import resolve_request_id
from recipe_catalog.observability.logging import get_context


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


pytestmark = pytest.mark.unit


@pytest.fixture
def app() -> FastAPI:
    application = FastAPI()

    @application.get("/context")
    async def context() -> dict[str, object]:
        return get_context()

    application.add_middleware(LoggingMiddleware)
    application.add_middleware(TimingMiddleware)
    application.add_middleware(RequestIDMiddleware)
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


class TestResolveRequestId:
    def test_keeps_well_formed_id(self) -> None:
        assert resolve_request_id("req-42.a_b") == "req-42.a_b"

    @pytest.mark.parametrize("candidate", [None, "", "has space", "x" * 129, "a\nb"])
    def test_replaces_bad_id(self, candidate: str | None) -> None:
        generated = resolve_request_id(candidate)

        assert uuid.UUID(generated).version == 4


class TestClientIp:
    def test_prefers_forwarded_for(self) -> None:
        request = MagicMock()
        request.headers = {"x-forwarded-for": "10.0.0.1, 10.0.0.2"}

        assert client_ip(request) == "10.0.0.1"

    def test_falls_back_to_peer(self) -> None:
        request = MagicMock()
        request.headers = {}
        request.client.host = "127.0.0.1"

        assert client_ip(request) == "127.0.0.1"


class TestMiddlewareStack:
    async def test_request_id_generated_and_bound(self, client: AsyncClient) -> None:
        response = await client.get("/context")

        request_id = response.headers["X-Request-ID"]
        assert response.json()["request_id"] == request_id
        assert response.json()["method"] == "GET"

    async def test_process_time_header(self, client: AsyncClient) -> None:
        response = await client.get("/context")

        assert response.headers["X-Process-Time"].endswith("ms")
