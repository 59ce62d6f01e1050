"""Centralized application settings using pydantic settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from expiry_tracker.domain.model.pagination import DEFAULT_PAGE_SIZE


class Settings(BaseSettings):
    """Environment-aware configuration (storage location, logging)."""

    data_dir: Path = Field(
        default=Path("data"),
        description="Directory holding the JSON store files",
    )
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy URL; when set, the SQL store replaces the JSON one",
    )
    log_level: str = "INFO"
    default_page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="EXPIRY_TRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def blank_url_means_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def normalise_log_level(cls, v: str) -> str:
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Provide singleton-like access for the composition root."""
    return Settings()
