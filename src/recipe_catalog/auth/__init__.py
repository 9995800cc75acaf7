"""Administrative credential check for write endpoints."""

from recipe_catalog.auth.dependencies import (
    AdminRequired,
    is_valid_admin_credential,
    require_admin,
)


__all__ = ["AdminRequired", "is_valid_admin_credential", "require_admin"]
