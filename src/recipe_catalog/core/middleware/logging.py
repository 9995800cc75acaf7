"""Request logging middleware.

Writes one structured line when a request arrives and one when it
completes. Probe paths are skipped to keep logs readable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.types import ASGIApp

from recipe_catalog.observability.logging import bind_context, get_logger


if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.responses import Response

logger = get_logger(__name__)

DEFAULT_EXCLUDED_PATHS = frozenset({"/", "/favicon.ico"})

_WRITE_METHODS = frozenset({"POST", "PATCH", "PUT", "DELETE"})


def client_ip(request: Request) -> str:
    """Best-effort client address, honouring reverse proxy headers."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for.split(",")[0].strip()
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    if request.client:
        return request.client.host
    return "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Structured request/response logging."""

    def __init__(
        self,
        app: ASGIApp,
        *,
        exclude_paths: set[str] | frozenset[str] | None = None,
    ) -> None:
        super().__init__(app)
        self.exclude_paths = (
            DEFAULT_EXCLUDED_PATHS if exclude_paths is None else frozenset(exclude_paths)
        )

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        path = request.url.path
        if path in self.exclude_paths or path.endswith("/health"):
            return await call_next(request)

        bind_context(
            method=request.method,
            path=path,
            client_ip=client_ip(request),
        )
        logger.info(
            "Request started",
            query_params=str(request.query_params) if request.query_params else None,
            write=request.method in _WRITE_METHODS,
        )

        response = await call_next(request)

        log = logger.warning if response.status_code >= 500 else logger.info
        log("Request completed", status_code=response.status_code)
        return response
