"""Shared helpers for the Notion-backed repositories."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from recipe_catalog.mappers.properties import normalize_page_id
from recipe_catalog.notion.exceptions import UpstreamError, UpstreamNotFoundError
from recipe_catalog.observability.logging import get_logger


if TYPE_CHECKING:
    from recipe_catalog.notion.client import NotionClient


logger = get_logger(__name__)


class NotionRepository:
    """Base class binding a repository to one Notion database."""

    def __init__(self, client: NotionClient, database_id: str) -> None:
        """Initialize repository.

        Args:
            client: Initialized Notion client.
            database_id: Database backing this repository.
        """
        self._client = client
        self._database_id = database_id

    @property
    def database_id(self) -> str:
        return self._database_id

    def _is_live_member(self, page: dict[str, Any]) -> bool:
        """Check that a page is not archived and belongs to this database."""
        if page.get("archived") or page.get("in_trash"):
            return False
        parent_id = (page.get("parent") or {}).get("database_id")
        if parent_id is None:
            return True
        return normalize_page_id(parent_id) == normalize_page_id(self._database_id)

    async def _retrieve_or_none(self, page_id: str) -> dict[str, Any] | None:
        """Retrieve a live page of this database, or None.

        Not-found and every other store failure both collapse to None; the
        log keeps the two apart.
        """
        try:
            page = await self._client.retrieve_page(page_id)
        except UpstreamNotFoundError:
            logger.debug("Page not found", page_id=page_id)
            return None
        except UpstreamError as e:
            logger.warning(
                "Page lookup failed, reporting as not found",
                page_id=page_id,
                error_type=type(e).__name__,
                error=str(e),
            )
            return None

        if not self._is_live_member(page):
            logger.debug(
                "Page is archived or outside the database",
                page_id=page_id,
                database_id=self._database_id,
            )
            return None
        return page
