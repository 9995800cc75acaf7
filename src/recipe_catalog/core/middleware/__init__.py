"""HTTP middleware."""

from recipe_catalog.core.middleware.logging import LoggingMiddleware
from recipe_catalog.core.middleware.request_id import RequestIDMiddleware
from recipe_catalog.core.middleware.timing import TimingMiddleware


__all__ = ["LoggingMiddleware", "RequestIDMiddleware", "TimingMiddleware"]
