"""Configuration settings for assertroute."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Summarizer bounds and logging, loaded from environment variables or overrides."""

    model_config = SettingsConfigDict(
        env_prefix="ASSERTROUTE_", case_sensitive=False, populate_by_name=True
    )

    summary_max_items: int = Field(default=3, ge=0)
    summary_max_chars: int = Field(default=12, ge=0)
    element_max_chars: int = Field(default=24, ge=4)
    log_level: str = Field(default="WARNING")


DEFAULT_SETTINGS = Settings()
