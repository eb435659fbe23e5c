"""Lightweight configuration for the Tetra Master tools."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Minimal application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TETRA_", env_file=".env", env_file_encoding="utf-8"
    )

    catalog_path: Path | None = Field(
        default=None,
        description="JSON card type catalog; the built-in catalog is used when unset",
    )
    rules_version: str = Field(default="1.0", description="Ruleset version used by the domain")
    max_level: int = Field(
        default=16, description="Scale applied to stats when two cards fight", gt=0
    )
    rng_seed: int | None = Field(
        default=None,
        description="Seed for reproducible fights; fights are unpredictable when unset",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173", "http://127.0.0.1:5173"],
        description="Origins allowed to call the HTTP API",
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    return Settings()
