"""Notion document store client module."""

from recipe_catalog.notion.client import NotionClient
from recipe_catalog.notion.exceptions import (
    UpstreamError,
    UpstreamNotFoundError,
    UpstreamResponseError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)


__all__ = [
    "NotionClient",
    "UpstreamError",
    "UpstreamNotFoundError",
    "UpstreamResponseError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
]
