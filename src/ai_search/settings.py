"""
Application Settings

Centralized configuration using Pydantic Settings for type safety and validation.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation and type safety."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Search credentials
    google_api_key: str = ""
    google_cx: str = ""

    # Synthesis credentials
    openai_api_key: str = ""
    gemini_api_key: str = ""

    # Pipeline selection
    fetch_library: Literal["lightweight", "rendered"] = "lightweight"
    summary_model: Literal["openai", "gemini"] = "openai"
    num_results: int = Field(default=5, ge=1)

    # Model settings
    openai_model: str = "gpt-4-turbo"
    gemini_model: str = "gemini-2.0-flash"
    max_output_tokens: int = Field(default=250, ge=1)

    # Timeouts in seconds
    search_timeout: float = 30.0
    lightweight_timeout: float = 5.0
    rendered_timeout: float = 10.0

    log_dir: str = "logs"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def settings_with_overrides(**overrides) -> Settings:
    """
    Build settings from the environment with per-run selections applied.

    Overrides set to None are ignored. Raises pydantic.ValidationError for
    unsupported values.
    """
    values = get_settings().model_dump()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return Settings.model_validate(values)
