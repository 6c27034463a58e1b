"""Configuration management for MedInsight."""

import logging
from typing import Optional

from pydantic_settings import BaseSettings
from pydantic import Field

from .constants import FileConstants


class Settings(BaseSettings):
    """Application settings."""

    # OpenAI API
    openai_api_key: str = Field("", description="OpenAI API key")
    OPENAI_API_KEY: str = Field("", description="OpenAI API key (alternative naming)")
    openai_model: str = Field("gpt-4o-mini", description="Model used for review classification")
    request_timeout: Optional[float] = Field(None, description="Request timeout in seconds; None keeps the client default")

    @property
    def effective_openai_key(self) -> str:
        """Get the effective OpenAI API key from either field."""
        return self.openai_api_key or self.OPENAI_API_KEY

    # Logging
    log_level: str = Field("INFO", description="Logging level")

    # Classification settings
    max_retries: int = Field(1, description="Attempts per classification request (1 = no retry)")
    retry_delay: float = Field(1.0, description="Base retry delay in seconds")
    retry_backoff: float = Field(2.0, description="Retry backoff multiplier")

    # Dashboard
    seed_demo_reviews: bool = Field(True, description="Start the dashboard with example reviews")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format=FileConstants.LOG_FORMAT
    )
