"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.application.services
System role: DI container for service injection
"""

from backend.application.services.story_service import StoryService, create_story_service


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._story_service: StoryService | None = None

    @property
    def story_service(self) -> StoryService:
        """Get cached story service (and its Bedrock client)."""
        if self._story_service is None:
            self._story_service = create_story_service()
        return self._story_service

    def clear(self) -> None:
        """Clear all cached instances."""
        self._story_service = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_story_service() -> StoryService:
    """
    Get story service instance.

    Returns:
        StoryService: Cached story service
    """
    return get_service_cache().story_service
