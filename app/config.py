"""Runtime configuration based on environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AnyHttpUrl, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PLACEHOLDER_IMAGE = "https://placehold.co/200x200/cccccc/333333?text=No+Image"


class LookupApiSettings(BaseModel):
    base_url: AnyHttpUrl = Field(
        default="https://pokeapi.co/api/v2",
        description="Root of the lookup service; records live under /pokemon/{name}.",
    )
    request_timeout_seconds: float = Field(default=10, gt=0, le=60)


class PresentationSettings(BaseModel):
    language: str = Field(default="es", min_length=2)
    placeholder_image_url: AnyHttpUrl = Field(default=DEFAULT_PLACEHOLDER_IMAGE)

    @field_validator("language", mode="before")
    @classmethod
    def _normalize_language(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    environment: Literal["dev", "staging", "prod"] = "dev"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debounce_seconds: float = Field(default=0.3, ge=0, le=5)

    api: LookupApiSettings = Field(default_factory=LookupApiSettings)
    presentation: PresentationSettings = Field(default_factory=PresentationSettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


@lru_cache
def get_settings() -> AppSettings:
    """Return cached settings instance."""

    return AppSettings()


__all__ = [
    "AppSettings",
    "LookupApiSettings",
    "PresentationSettings",
    "DEFAULT_PLACEHOLDER_IMAGE",
    "get_settings",
]
