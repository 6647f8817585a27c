"""API-specific dependencies."""

from .dependencies import (
    get_service_cache,
    get_story_service,
)

__all__ = [
    "get_service_cache",
    "get_story_service",
]
