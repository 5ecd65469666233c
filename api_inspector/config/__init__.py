"""Application settings loaded from environment variables."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LLMProvider(str, Enum):
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    OLLAMA = "ollama"


class Settings(BaseSettings):
    """Application settings with env var support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # App
    app_env: Environment = Environment.DEVELOPMENT
    log_level: str = "INFO"

    # LLM: Provider selection (google tries first, anthropic is fallback)
    llm_provider: LLMProvider = LLMProvider.GOOGLE

    # LLM: Google Gemini (primary)
    google_model: str = "gemini-2.5-flash"
    google_api_key: str | None = None

    # LLM: Anthropic (fallback)
    anthropic_api_key: str | None = None
    anthropic_model: str = "claude-sonnet-4-20250514"

    # LLM: Ollama (self-hosted fallback)
    ollama_base_url: str | None = None
    ollama_chat_model: str = "qwen3:4b"
    ollama_num_predict: int = 4096
    ollama_request_timeout: float = 120.0

    # LLM: Shared
    llm_temperature: float = Field(default=0.0, ge=0.0, le=2.0)
    llm_max_tokens: int = Field(default=8192, gt=0)
    llm_request_timeout: float = Field(
        default=120.0,
        description="Request timeout in seconds for LLM API calls.",
    )

    # Criteria evaluation
    criteria_config_path: Path | None = Field(
        default=None,
        description="YAML file replacing the built-in API criteria.",
    )
    background_descriptive_eval: bool = Field(
        default=True,
        description="Judge descriptive criteria in a background task after the quick check.",
    )

    @property
    def is_development(self) -> bool:
        return self.app_env == Environment.DEVELOPMENT


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        The singleton Settings loaded from environment / .env file.
        Cached after the first call via ``lru_cache``.
    """
    return Settings()
