"""FastAPI security dependencies.

Writes are gated behind a single administrative credential: the bearer
token must equal the configured ADMIN_PASSWORD exactly. There are no users,
roles or sessions.
"""

from __future__ import annotations

import secrets
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from recipe_catalog.core.config import Settings, get_settings
from recipe_catalog.core.exceptions import UnauthorizedException
from recipe_catalog.observability.logging import get_logger


logger = get_logger(__name__)

# auto_error=False so a missing header reaches require_admin and gets our 401 body
admin_scheme = HTTPBearer(
    scheme_name="AdminPassword",
    description="Shared administrator password sent as a bearer token",
    auto_error=False,
)


def is_valid_admin_credential(token: str | None, secret: str) -> bool:
    """Exact comparison against the configured secret.

    An unset secret never matches, so writes stay closed until configured.
    """
    if not token or not secret:
        return False
    return secrets.compare_digest(token.encode(), secret.encode())


async def require_admin(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(admin_scheme)
    ],
    settings: Annotated[Settings, Depends(get_settings)],
) -> None:
    """Reject the request unless it carries the administrator credential.

    Raises:
        UnauthorizedException: Missing or wrong credential.
    """
    token = credentials.credentials if credentials else None
    if not is_valid_admin_credential(token, settings.ADMIN_PASSWORD):
        logger.info("Rejected write without valid admin credential")
        raise UnauthorizedException


AdminRequired = Depends(require_admin)
