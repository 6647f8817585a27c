"""
FastAPI application entry point.

Local development server for the story endpoint. Serves the same
request/response contract as the Lambda handler.

Dependencies: fastapi, uvicorn, backend.api, backend.observability, backend.configs
System role: Application initialization and configuration
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api import api_router
from backend.api.deps import get_service_cache
from backend.configs import get_settings
from backend.observability.logger import configure_logging
from backend.observability.middleware import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging and pre-warms the story service so the Bedrock
    client is built once at startup.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    cache = get_service_cache()
    try:
        _ = cache.story_service
        logger.info("Application startup complete: story service initialized")
    except Exception as e:
        logger.exception(
            "Failed to initialize story service",
            extra={"error": str(e)},
        )
        raise

    yield

    cache.clear()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title="Story Generator API",
        description="Structured short-story generation backed by AWS Bedrock",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Added first = last to execute
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.story.cors_allow_origin],
        allow_credentials=False,
        allow_methods=["POST", "OPTIONS", "GET"],
        allow_headers=["Content-Type"],
    )

    app.include_router(api_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "backend.main:app",
        host="localhost",
        port=8082,
        reload=True,
    )
