"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    avatarforge_env: str = "development"
    avatarforge_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Storage
    storage_driver: str = "local"
    storage_path: str = "./storage/avatars"
    metadata_path: str = "./storage/avatars.jsonl"

    # Rendering
    render_workers: int = 3
    render_timeout_s: float | None = None
    reproducible_seeds: bool = True

    # Size exponent served when the caller gives none (2^6 = 64px)
    default_size_exponent: int = 6

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
