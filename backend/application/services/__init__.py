"""Service orchestrators."""

from .story_service import StoryService, create_story_service

__all__ = [
    "StoryService",
    "create_story_service",
]
