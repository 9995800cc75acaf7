"""Application entry point.

Usage:
    # Development with auto-reload
    uvicorn recipe_catalog.main:app --reload
"""

from recipe_catalog.factory import create_app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    from recipe_catalog.core.config import get_settings

    settings = get_settings()

    uvicorn.run(
        "recipe_catalog.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.is_development,
        log_level=settings.logging.level.lower(),
    )
