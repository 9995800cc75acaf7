"""Document store client exceptions.

Every failure talking to Notion surfaces as an ``UpstreamError``. The
repositories propagate these untouched (except for the ``get_by_id``
lookups, which collapse them to an absent result) and the HTTP layer turns
them into a generic failure response.
"""

from __future__ import annotations


class UpstreamError(Exception):
    """Base exception for document store failures."""


class UpstreamUnavailableError(UpstreamError):
    """Raised when the document store cannot be reached."""


class UpstreamTimeoutError(UpstreamUnavailableError):
    """Raised when a request to the document store times out."""


class UpstreamResponseError(UpstreamError):
    """Raised when the document store answers with an error status."""

    def __init__(self, status_code: int, message: str, code: str | None = None) -> None:
        self.status_code = status_code
        self.code = code
        super().__init__(message)


class UpstreamNotFoundError(UpstreamResponseError):
    """Raised when a page or database does not exist (HTTP 404)."""

    def __init__(self, message: str, code: str | None = "object_not_found") -> None:
        super().__init__(status_code=404, message=message, code=code)
