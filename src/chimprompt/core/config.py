"""Configuration Management."""

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="CHIM_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Wizard
    reset_delay_seconds: float = Field(
        default=5.0, gt=0.0, description="Delay before a completed wizard session resets"
    )
    lowercase_answers: bool = Field(
        default=True, description="Lower-case wizard answers for platform/device/element/reference"
    )

    # Prompts
    max_prompt_length: int = Field(default=10_000, gt=0, description="Max serialized prompt length")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Metrics
    metrics_enabled: bool = Field(default=True, description="Record Prometheus metrics")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
