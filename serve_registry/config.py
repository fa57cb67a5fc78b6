"""
Configuration settings for the Serve Registry.

Uses Pydantic Settings to load environment variables for the catalog location,
logging, and the default effectiveness threshold used by the CLI.
"""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    # Catalog persistence
    catalog_path: Path = Field(Path("jugadores.csv"), alias="CATALOG_PATH")
    catalog_encoding: str = Field("utf-8", alias="CATALOG_ENCODING")

    # Queries
    min_effectiveness: float = Field(80.0, alias="MIN_EFFECTIVENESS")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
