"""
Lambda handler for the story generation HTTP endpoint.

Handles API Gateway proxy events: parse body -> apply defaults ->
build prompt -> invoke Bedrock -> validate structured output -> respond.
Every failure is returned as a 500 with {success: false, error}.

Environment variables:
- BEDROCK_MODEL_ID, BEDROCK_REGION: model selection
- STORY_DEFAULT_TOPIC, STORY_DEFAULT_STYLE, STORY_DEFAULT_LENGTH: request defaults
- STORY_CORS_ALLOW_ORIGIN: Access-Control-Allow-Origin value
- LANGFUSE_SECRETS_ARN: optional Secrets Manager ARN holding Langfuse keys
- LOG_LEVEL: Logging level

Dependencies: lambda_utils, backend.application.services.story_service
System role: Lambda entry point for story generation
"""

import logging
import os
from typing import Any, Dict

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()

from backend.application.services.story_service import StoryService, create_story_service
from backend.configs import get_settings
from backend.core.story_generation.lambda_utils.config import configure_secrets
from backend.core.story_generation.lambda_utils.event_parser import (
    parse_event,
    parse_request_body,
)
from backend.core.story_generation.lambda_utils.responses import (
    build_error_response,
    build_preflight_response,
    build_success_response,
)
from backend.observability.correlation import (
    CORRELATION_ID_HEADER,
    clear_correlation_id,
    set_correlation_id,
)
from backend.observability.log_utils import log_exception_with_context, sanitize_event
from backend.observability.logger import configure_logging

configure_logging(os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

# Langfuse keys must be in the environment before settings are first loaded
configure_secrets()


def describe_context(context: Any) -> Dict[str, Any]:
    """Pick the loggable fields off a Lambda context object."""
    if context is None:
        return {}
    remaining = getattr(context, "get_remaining_time_in_millis", None)
    return {
        "aws_request_id": getattr(context, "aws_request_id", None),
        "function_name": getattr(context, "function_name", None),
        "memory_limit_in_mb": getattr(context, "memory_limit_in_mb", None),
        "remaining_time_ms": remaining() if callable(remaining) else None,
    }


def _get_story_service() -> StoryService:
    """Build the story service once per warm container."""
    if not hasattr(handler, "_story_service"):
        handler._story_service = create_story_service()
    return handler._story_service


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Lambda handler for API Gateway story requests.

    Args:
        event: API Gateway proxy event (payload format 1.0 or 2.0)
        context: Lambda context object

    Returns:
        Dict with statusCode, headers and JSON body
    """
    event = event or {}
    headers = event.get("headers") or {}
    header_correlation_id = next(
        (v for k, v in headers.items() if k.lower() == CORRELATION_ID_HEADER.lower()),
        None,
    )
    correlation_id = set_correlation_id(
        header_correlation_id or getattr(context, "aws_request_id", None)
    )

    logger.info("handler - Event", extra={"event": sanitize_event(event)})
    logger.info("handler - Context", extra=describe_context(context))

    allow_origin = "*"
    try:
        allow_origin = get_settings().story.cors_allow_origin

        proxy_event = parse_event(event)
        if proxy_event.method == "OPTIONS":
            logger.info("handler - Answering CORS preflight")
            return build_preflight_response(allow_origin, correlation_id)

        body = parse_request_body(proxy_event)

        service = _get_story_service()
        story = service.generate(service.build_input(body))
        return build_success_response(story, allow_origin, correlation_id)

    except Exception as e:
        log_exception_with_context(logger, "handler - Error generating story", e)
        return build_error_response(str(e), allow_origin, correlation_id)

    finally:
        clear_correlation_id()
