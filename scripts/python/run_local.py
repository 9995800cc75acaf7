"""Run the service locally with auto-reload."""

import uvicorn

from recipe_catalog.core.config import get_settings


def main() -> None:
    """Run the server using the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "recipe_catalog.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=True,
    )


if __name__ == "__main__":
    main()
