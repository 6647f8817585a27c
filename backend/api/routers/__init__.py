"""API routers."""

from .health import router as health_router
from .stories import router as stories_router

__all__ = [
    "health_router",
    "stories_router",
]
