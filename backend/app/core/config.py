"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the insight relay."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    ANTHROPIC_API_KEY: Optional[str] = Field(default=None)
    LLM_MODEL: str = Field(default="claude-sonnet-4-20250514")
    LLM_MAX_TOKENS: int = Field(default=1024)

    RELAY_HOST: str = Field(default="0.0.0.0")
    RELAY_PORT: int = Field(default=5000)
    CORS_ALLOW_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()

