"""Application configuration using pydantic-settings."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application
    app_name: str = "ecomap"
    debug: bool = False
    api_v1_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # LLM Providers
    # Using ECOMAP_ prefix to avoid conflicts with shell env vars
    ecomap_gemini_key: str = ""
    ecomap_anthropic_key: str = ""
    ecomap_openai_key: str = ""

    # Fallback to standard names if prefixed ones not set
    gemini_api_key: str = ""
    anthropic_api_key: str = ""
    openai_api_key: str = ""

    @property
    def effective_gemini_key(self) -> str:
        """Get Gemini key, preferring prefixed version."""
        return self.ecomap_gemini_key or self.gemini_api_key

    @property
    def effective_anthropic_key(self) -> str:
        """Get Anthropic key, preferring prefixed version."""
        return self.ecomap_anthropic_key or self.anthropic_api_key

    @property
    def effective_openai_key(self) -> str:
        """Get OpenAI key, preferring prefixed version."""
        return self.ecomap_openai_key or self.openai_api_key

    # Evaluation
    scoring_provider: Literal["gemini", "claude", "openai"] = "gemini"
    scoring_model: Optional[str] = None  # None means the provider default
    max_output_tokens: int = 2000

    # Simulation
    max_placements: int = 20  # Combined clicks across all intervention types
    default_brush_size: int = 10
    scatter_radius: float = 0.0005  # Degrees around each tree/solar click


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
