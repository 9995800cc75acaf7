"""Notion API HTTP client.

This module provides an async HTTP client for the subset of the Notion
REST API the catalog uses: database query and retrieval, and page
retrieval, creation and update.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
import orjson

from recipe_catalog.core.config import get_settings
from recipe_catalog.notion.exceptions import (
    UpstreamNotFoundError,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from recipe_catalog.observability.logging import get_logger


if TYPE_CHECKING:
    from recipe_catalog.core.config import Settings
    from recipe_catalog.notion.filters import Filter, Sort


logger = get_logger(__name__)


class NotionClient:
    """HTTP client for the Notion API.

    Example:
        ```python
        client = NotionClient()
        await client.initialize()

        pages = await client.query_database(
            database_id,
            filter={"property": "Category", "select": {"equals": "한식"}},
        )

        await client.shutdown()
        ```
    """

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize the client.

        Args:
            settings: Optional settings override. Defaults to get_settings().
        """
        self._settings = settings or get_settings()
        self._http_client: httpx.AsyncClient | None = None

    @property
    def base_url(self) -> str:
        """Get the Notion API base URL without a trailing slash."""
        return self._settings.notion.base_url.rstrip("/")

    async def initialize(self) -> None:
        """Initialize HTTP client."""
        if self._http_client is not None:
            return
        if not self._settings.NOTION_API_KEY:
            logger.warning("NOTION_API_KEY is not set; store calls will be rejected")
        self._http_client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=httpx.Timeout(self._settings.notion.timeout),
            headers={
                "Authorization": f"Bearer {self._settings.NOTION_API_KEY}",
                "Notion-Version": self._settings.notion.version,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
        )
        logger.info(
            "NotionClient initialized",
            base_url=self.base_url,
            notion_version=self._settings.notion.version,
        )

    async def shutdown(self) -> None:
        """Release resources."""
        if self._http_client:
            await self._http_client.aclose()
            self._http_client = None
        logger.debug("NotionClient shutdown")

    # =========================================================================
    # Databases
    # =========================================================================

    async def query_database(
        self,
        database_id: str,
        *,
        filter: Filter | None = None,  # noqa: A002
        sorts: list[Sort] | None = None,
    ) -> list[dict[str, Any]]:
        """Query a database and return every matching page.

        Result pages are followed through next_cursor until the store reports
        no more; archived pages are never returned by the store.

        Args:
            database_id: Database to query.
            filter: Optional filter tree.
            sorts: Optional sort specification.

        Returns:
            List of raw page objects.
        """
        body: dict[str, Any] = {"page_size": self._settings.notion.page_size}
        if filter is not None:
            body["filter"] = filter
        if sorts:
            body["sorts"] = sorts

        path = f"/databases/{database_id}/query"
        results: list[dict[str, Any]] = []
        while True:
            data = await self._request("POST", path, body)
            results.extend(data.get("results", []))
            cursor = data.get("next_cursor")
            if not data.get("has_more") or not cursor:
                break
            body = {**body, "start_cursor": cursor}

        if len(results) > self._settings.notion.page_size:
            logger.debug(
                "Query spanned several result pages",
                database_id=database_id,
                count=len(results),
            )
        return results

    async def retrieve_database(self, database_id: str) -> dict[str, Any]:
        """Retrieve a database object, including its property schema."""
        return await self._request("GET", f"/databases/{database_id}")

    # =========================================================================
    # Pages
    # =========================================================================

    async def retrieve_page(self, page_id: str) -> dict[str, Any]:
        """Retrieve a single page by id."""
        return await self._request("GET", f"/pages/{page_id}")

    async def create_page(
        self,
        database_id: str,
        properties: dict[str, Any],
    ) -> dict[str, Any]:
        """Create a page in a database."""
        body = {
            "parent": {"database_id": database_id},
            "properties": properties,
        }
        return await self._request("POST", "/pages", body)

    async def update_page(
        self,
        page_id: str,
        *,
        properties: dict[str, Any] | None = None,
        archived: bool | None = None,
    ) -> dict[str, Any]:
        """Patch a page's properties and/or archived flag."""
        body: dict[str, Any] = {}
        if properties is not None:
            body["properties"] = properties
        if archived is not None:
            body["archived"] = archived
        return await self._request("PATCH", f"/pages/{page_id}", body)

    # =========================================================================
    # Transport
    # =========================================================================

    async def _request(
        self,
        method: str,
        path: str,
        body: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Send a request and decode the JSON response.

        Raises:
            UpstreamUnavailableError: If the store is unreachable.
            UpstreamTimeoutError: If the request times out.
            UpstreamNotFoundError: For 404 responses.
            UpstreamResponseError: For other error responses.
        """
        if not self._http_client:
            msg = "Client not initialized. Call initialize() first."
            raise RuntimeError(msg)

        content = orjson.dumps(body) if body is not None else None

        logger.debug("Notion request", method=method, path=path)

        try:
            response = await self._http_client.request(method, path, content=content)
        except httpx.TimeoutException as e:
            logger.warning("Request to Notion timed out", method=method, path=path)
            raise UpstreamTimeoutError(str(e) or "Request timed out") from e
        except httpx.RequestError as e:
            logger.warning("Failed to connect to Notion", error=str(e))
            msg = f"Failed to connect to Notion: {e}"
            raise UpstreamUnavailableError(msg) from e

        if response.is_success:
            data: dict[str, Any] = orjson.loads(response.content)
            return data

        self._handle_error_response(response)
        msg = f"Unexpected response: {response.status_code}"
        raise UpstreamResponseError(response.status_code, msg)

    def _handle_error_response(self, response: httpx.Response) -> None:
        """Translate an error response into an upstream exception.

        Raises:
            UpstreamNotFoundError: For 404 responses.
            UpstreamResponseError: For other error responses.
        """
        status_code = response.status_code

        try:
            error_body = orjson.loads(response.content)
            message = error_body.get("message", "Unknown error")
            code = error_body.get("code")
        except (orjson.JSONDecodeError, AttributeError):
            message = response.text or f"HTTP {status_code}"
            code = None

        logger.warning(
            "Notion returned error",
            status_code=status_code,
            code=code,
            message=message,
        )

        if status_code == 404:
            raise UpstreamNotFoundError(message, code=code)

        raise UpstreamResponseError(status_code, message, code=code)
