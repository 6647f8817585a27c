"""
Observability module.

Provides logging configuration, correlation ID tracking, and prompt
version management through Langfuse.
"""

from backend.observability.correlation import get_correlation_id, set_correlation_id
from backend.observability.prompt_registry import ModelConfig, PromptRegistry

__all__ = ["PromptRegistry", "ModelConfig", "get_correlation_id", "set_correlation_id"]
