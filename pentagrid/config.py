"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pentagrid_env: str = "development"
    pentagrid_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Defaults for requests that omit them
    default_family_count: int = 5
    default_viewport_width: float = 1280.0
    default_viewport_height: float = 800.0

    # Hard cap on tiles returned by a single non-streaming request
    max_tiles_per_request: int = 50_000

    # Crossings (pairs x (2 * line_range + 1)^2) a single request may walk, culled or not
    max_crossings_per_request: int = 120_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
