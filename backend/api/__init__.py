"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import health_router, stories_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(stories_router)

__all__ = ["api_router"]
