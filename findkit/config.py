"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BackendSettings(BaseModel):
    url: AnyHttpUrl = Field(
        default="http://127.0.0.1:8765/rpc",
        description="Endpoint accepting JSON search requests for the document engine.",
    )
    view_id: str | None = Field(
        default=None,
        description="Document view addressed by every request, when the engine multiplexes views.",
    )
    request_timeout_seconds: float = Field(default=10, ge=1, le=60)
    max_attempts: int = Field(default=1, ge=1, le=5)
    retry_base_delay: float = Field(default=0.3, ge=0)

    @field_validator("view_id", mode="before")
    @classmethod
    def _empty_str_to_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class FindSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FINDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__"
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: str = "INFO"
    default_case_sensitive: bool = False
    default_wrap_around: bool = True

    backend: BackendSettings = Field(default_factory=BackendSettings)


@lru_cache
def get_settings() -> FindSettings:
    """Return cached settings instance."""

    return FindSettings()


__all__ = [
    "BackendSettings",
    "FindSettings",
    "get_settings",
]
