"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    excalidraw_ascii_env: str = "development"
    excalidraw_ascii_log_level: str = "info"

    # Largest grid (columns × rows) a single API request may allocate
    max_grid_cells: int = 4_000_000

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
