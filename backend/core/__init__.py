"""
Core business logic module.

Contains the exception hierarchy, the story agent and the Lambda entry point.
"""

from backend.core.exceptions import (
    RequestParseError,
    StoryGenerationError,
    StoryGeneratorException,
    ValidationError,
)

__all__ = [
    "StoryGeneratorException",
    "ValidationError",
    "RequestParseError",
    "StoryGenerationError",
]
