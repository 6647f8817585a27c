"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and the Lambda handler.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from backend.configs.base import BaseSettings
from backend.configs.bedrock import BedrockSettings
from backend.configs.observability import ObservabilitySettings
from backend.configs.story import StorySettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    bedrock: BedrockSettings = Field(default_factory=BedrockSettings)
    story: StorySettings = Field(default_factory=StorySettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once per process (or warm Lambda container).

    Returns:
        Settings: Application settings instance

    Usage:
        from backend.configs import get_settings
        settings = get_settings()
    """
    return Settings()
