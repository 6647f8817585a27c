"""
Story endpoint configuration settings.

Request defaults, CORS origin and prompt registry options for the
story generation endpoint.

Dependencies: pydantic, pydantic_settings
System role: Request handling configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class StorySettings(BaseSettings):
    """Story generation endpoint configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORY_",
        case_sensitive=False,
        extra="ignore",
    )

    default_topic: str = Field(
        default="a brave explorer on an alien planet",
        description="Topic used when the request omits one",
    )
    default_style: str = Field(
        default="adventure",
        description="Writing style used when the request omits one",
    )
    default_length: Literal["short", "medium", "long"] = Field(
        default="medium",
        description="Story length used when the request omits one",
    )
    cors_allow_origin: str = Field(
        default="*",
        description="Value of the Access-Control-Allow-Origin header",
    )
    use_prompt_registry: bool = Field(
        default=False,
        description="Fetch the story prompt from Langfuse when available",
    )
    prompt_label: str | None = Field(
        default=None,
        description="Langfuse label to fetch when using the registry",
    )
