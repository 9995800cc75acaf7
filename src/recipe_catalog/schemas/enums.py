"""Enumeration types for the catalog schemas."""

from __future__ import annotations

from enum import StrEnum


class SourceType(StrEnum):
    """Where a recipe came from."""

    INSTAGRAM = "instagram"
    YOUTUBE = "youtube"
    WEBSITE = "website"
    ORIGINAL = "original"


class HealthStatus(StrEnum):
    """Service health status values."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
