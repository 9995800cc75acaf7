"""Catalog service settings.

Non-secret values come from the YAML tree under config/; the Notion
integration key and the admin password come from the environment only.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource

# =============================================================================
# YAML sections
# =============================================================================


class AppSettings(BaseModel):
    """Service name and version reported by / and /health."""

    name: str = "Recipe Catalog Service"
    version: str = "0.1.0"
    debug: bool = False


class ServerSettings(BaseModel):
    """Bind address for the uvicorn entry point."""

    host: str = "127.0.0.1"
    port: int = 8000


class ApiSettings(BaseModel):
    """Route prefix and browser origins allowed by CORS."""

    v1_prefix: str = "/api"
    cors_origins: list[str] = []


class LoggingSettings(BaseModel):
    """Log level and sink format (json or text)."""

    level: str = "INFO"
    format: str = "json"


class NotionSettings(BaseModel):
    """Notion document store configuration.

    Database IDs are not secrets and may live in YAML; the integration key
    is read from NOTION_API_KEY only.
    """

    base_url: str = "https://api.notion.com/v1"
    version: str = "2022-06-28"
    timeout: float = 10.0
    page_size: int = 100
    recipes_database_id: str | None = None
    ingredients_database_id: str | None = None


# =============================================================================
# Root settings
# =============================================================================


class Settings(BaseSettings):
    """Root settings object.

    Later sources lose: constructor kwargs, environment, .env, the YAML
    overlay for APP_ENV on top of config/base, then field defaults.

    Nested values use the '__' delimiter, e.g. NOTION__TIMEOUT=5.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    server: ServerSettings = ServerSettings()
    api: ApiSettings = ApiSettings()
    logging: LoggingSettings = LoggingSettings()
    notion: NotionSettings = NotionSettings()

    # =========================================================================
    # Secrets (from .env only, never in YAML)
    # =========================================================================
    NOTION_API_KEY: str = ""
    ADMIN_PASSWORD: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML tree below environment variables and .env."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    @property
    def is_non_production(self) -> bool:
        """Whether /docs and /redoc are served."""
        return self.APP_ENV in ("local", "test", "development")

    @property
    def missing_store_settings(self) -> list[str]:
        """Names of the Notion settings that are still unset."""
        required = {
            "NOTION_API_KEY": self.NOTION_API_KEY,
            "notion.recipes_database_id": self.notion.recipes_database_id,
            "notion.ingredients_database_id": self.notion.ingredients_database_id,
        }
        return [name for name, value in required.items() if not value]


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, built on first use."""
    return Settings()
