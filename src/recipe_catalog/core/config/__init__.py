"""Configuration module with YAML and environment variable support."""

from .settings import NotionSettings, Settings, get_settings


__all__ = [
    "NotionSettings",
    "Settings",
    "get_settings",
]
