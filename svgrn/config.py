"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgrn_env: str = "development"
    svgrn_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # External tools (Node CLIs)
    svgo_command: str = "svgo"
    prettier_command: str = "prettier"
    tool_timeout_s: float = 10.0

    # Advisory only; the API reports oversize input but still converts it
    max_svg_bytes: int = 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
