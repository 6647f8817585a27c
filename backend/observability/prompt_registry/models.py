"""
Pydantic models for prompt registry configuration.

Model parameters tracked alongside prompts in Langfuse.

Dependencies: pydantic
System role: Configuration validation for prompt-model pairs
"""

from typing import Any

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """
    LLM model configuration stored with a prompt version.

    Attributes:
        model: Bedrock model identifier (e.g., "amazon.nova-pro-v1:0")
        temperature: Sampling temperature
        max_tokens: Maximum tokens in response
    """

    model: str = Field(description="LLM model identifier")
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Sampling temperature",
    )
    max_tokens: int | None = Field(
        default=None,
        gt=0,
        description="Maximum tokens in response",
    )

    def to_langfuse_config(self) -> dict[str, Any]:
        """Convert to the config dict Langfuse stores with the prompt."""
        return self.model_dump(exclude_none=True)
