"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
Scoring weights are fixed constants in ``scoring.aggregator`` and are not settings.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # Engine defaults
    default_top_suggestions_count: int = 5
    default_intent: str = "send"  # "receive" | "send"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
