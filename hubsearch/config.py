"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HubSearchSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HUBSEARCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    registry_host: str = Field(default="registry.hub.docker.com", min_length=1)
    registry_port: int = Field(default=443, ge=1, le=65535)
    request_timeout_seconds: int = Field(default=10, ge=1, le=60)
    default_language: str = "en"
    locales_path: Path | None = Field(
        default=None,
        description="Directory holding <locale>.json files; defaults to the bundled locales.",
    )
    max_results: int = Field(default=100, ge=1, le=100)
    evict_failed_fetches: bool = Field(
        default=False,
        description="Drop failed fetches from the JSON cache instead of replaying the error.",
    )
    log_level: str = "INFO"
    json_logs: bool = True


@lru_cache
def get_settings() -> HubSearchSettings:
    """Return cached settings instance."""

    return HubSearchSettings()


__all__ = ["HubSearchSettings", "get_settings"]
