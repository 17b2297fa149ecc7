"""FastAPI dependency injection."""

from __future__ import annotations

from excalidraw_ascii.config import Settings, settings


def get_settings() -> Settings:
    return settings
