"""
Bedrock model configuration settings.

Model identifier and sampling parameters for the story generation model
served through AWS Bedrock's Converse API.

Dependencies: pydantic, pydantic_settings
System role: LLM invocation configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class BedrockSettings(BaseSettings):
    """AWS Bedrock model configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="BEDROCK_",
        case_sensitive=False,
        extra="ignore",
    )

    model_id: str = Field(
        default="amazon.nova-pro-v1:0",
        description="Bedrock model identifier",
    )
    region: str = Field(default="us-east-1", description="AWS region for Bedrock")
    temperature: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Sampling temperature",
    )
    max_tokens: int = Field(
        default=4096,
        gt=0,
        description="Maximum tokens in the model response",
    )
