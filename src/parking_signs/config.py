"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEFAULT_MAX_REQUEST_BYTES = 50 * 1024 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-4o"
    openai_base_url: str | None = None
    temperature: float = 0.2
    max_tokens: int = 500
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3000
    max_request_bytes: int = DEFAULT_MAX_REQUEST_BYTES
    static_dir: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
