"""Environment-based application settings. Read-only; no business logic."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="chunking-engine", description="Service name")
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Log level name")

    # Chunking (see config/chunking/static for profile semantics)
    chunking_profile: str = Field(
        default="active",
        description="Profile name from static.json, or 'active' for the profile marked active",
    )
    output_format: Literal["json", "jsonl"] = Field(
        default="json", description="Serialization of exported chunk records"
    )
    tokenizer: str | None = Field(default="tiktoken", description="Tokenizer used for chunk token counts")


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance. Use for app lifetime."""
    return Settings()
