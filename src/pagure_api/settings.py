"""Client-side configuration loaded from the environment."""

from __future__ import annotations

from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class PagureSettings(BaseSettings):
    """Centralized settings for talking to a Pagure instance."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="PAGURE_",
        extra="ignore",
    )

    base_url: str = "https://pagure.io"


@cache
def get_settings() -> PagureSettings:
    """Return the cached settings instance."""

    return PagureSettings()


__all__ = ["PagureSettings", "get_settings"]
