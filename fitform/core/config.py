"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "FitForm AI"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["FitForm AI team"]
    PROJECT_URL: str = "https://github.com/fitformai/fitform"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (local key-value state)
    DATABASE_URL: str = "sqlite:///./fitform.db"

    # AI service
    OPENAI_API_KEY: str = ""
    OPENAI_BASE_URL: str = "https://api.openai.com/v1"
    OPENAI_MODEL: str = "gpt-4o"
    OPENAI_TIMEOUT_SECONDS: float = 120.0
    PLAN_TEMPERATURE: float = 0.7
    ANALYSIS_TEMPERATURE: float = 0.5
    ANALYSIS_MAX_TOKENS: int = 2000

    # Form check: frames sampled from a clip, and how many are sent
    FORM_KEY_FRAMES: int = 8
    FORM_MAX_FRAMES: int = 4

    # Session
    MIDNIGHT_SCHEDULER_ENABLED: bool = True
    SAVED_WORKOUT_SLOTS: int = 3

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
