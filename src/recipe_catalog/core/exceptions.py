"""Application errors and the handlers that render them.

Every error leaves the service as an ErrorResponse body carrying the
request id. Document store failures are logged in full and answered with
a generic 502 (504 when the store timed out).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

from recipe_catalog.notion.exceptions import UpstreamError, UpstreamTimeoutError
from recipe_catalog.observability.logging import get_logger


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)


class ErrorDetail(BaseModel):
    """One offending field."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    success: bool = False
    error: str
    message: str
    details: list[ErrorDetail] | None = None
    request_id: str | None = None


class AppException(Exception):
    """Error raised by endpoints and dependencies, rendered as-is."""

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class ValidationException(AppException):
    """A required field is missing or empty.

    Raised before any store call is made.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        details = None
        if field is not None:
            details = [
                ErrorDetail(code="REQUIRED_FIELD", message=message, field=field)
            ]
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="VALIDATION_ERROR",
            message=message,
            details=details,
        )


class NotFoundException(AppException):
    """No live recipe or ingredient with the requested id."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="NOT_FOUND",
            message=f"{resource} with identifier '{identifier}' not found",
        )


class UnauthorizedException(AppException):
    """Missing or incorrect write credential."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="UNAUTHORIZED",
            message=message,
        )


class ServiceUnavailableException(AppException):
    """The document store client is not ready or not configured."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="SERVICE_UNAVAILABLE",
            message=message,
        )


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    *,
    details: list[ErrorDetail] | None = None,
    headers: dict[str, str] | None = None,
) -> ORJSONResponse:
    body = ErrorResponse(
        error=error,
        message=message,
        details=details,
        request_id=getattr(request.state, "request_id", None),
    )
    return ORJSONResponse(
        status_code=status_code, content=body.model_dump(), headers=headers
    )


def _upstream_status(exc: UpstreamError) -> int:
    if isinstance(exc, UpstreamTimeoutError):
        return status.HTTP_504_GATEWAY_TIMEOUT
    return status.HTTP_502_BAD_GATEWAY


def setup_exception_handlers(app: FastAPI) -> None:
    """Register the error renderers on the application."""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException,
    ) -> ORJSONResponse:
        headers = None
        if exc.status_code == status.HTTP_401_UNAUTHORIZED:
            headers = {"WWW-Authenticate": "Bearer"}
        return _error_response(
            request,
            exc.status_code,
            exc.error,
            exc.message,
            details=exc.details,
            headers=headers,
        )

    @app.exception_handler(UpstreamError)
    async def upstream_exception_handler(
        request: Request,
        exc: UpstreamError,
    ) -> ORJSONResponse:
        logger.error(
            "Document store request failed",
            error_type=type(exc).__name__,
            error=str(exc),
            path=request.url.path,
        )
        return _error_response(
            request,
            _upstream_status(exc),
            "UPSTREAM_ERROR",
            "The document store request failed",
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        return _error_response(request, exc.status_code, "HTTP_ERROR", str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Render body/query schema errors as 422 with one detail per field."""
        details = [
            ErrorDetail(
                code="VALIDATION_ERROR",
                message=error["msg"],
                field=".".join(str(loc) for loc in error["loc"]),
            )
            for error in exc.errors()
        ]
        return _error_response(
            request,
            422,
            "VALIDATION_ERROR",
            "Request validation failed",
            details=details,
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        logger.opt(exception=exc).error("Unhandled exception", path=request.url.path)
        return _error_response(
            request,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            "INTERNAL_SERVER_ERROR",
            "An unexpected error occurred",
        )
