"""Lightweight configuration for the Epoch Forge service."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, overridable through the environment or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="EPOCHFORGE_"
    )

    data_dir: Path = Field(default=Path("matches"), description="Where forged matches are stored")
    catalog_version: str = Field(default="1.0", description="Version of the static game catalog")
    max_players: int = Field(default=10, ge=1, description="Largest roster a match may have")
    seed_prefix: str = Field(default="EF", min_length=1, description="Prefix for generated seeds")
    log_level: str = Field(default="INFO", description="Root logging level for the server")
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    return settings
