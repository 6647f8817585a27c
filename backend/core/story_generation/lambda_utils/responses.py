"""
API Gateway proxy response builders for Lambda.
"""

from typing import Any, Dict

from backend.core.agentic_system.story_agent.story_agent_schema import Story
from backend.models.common import ErrorResponse, SuccessResponse
from backend.observability.correlation import CORRELATION_ID_HEADER

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"
UNKNOWN_ERROR_MESSAGE = "Unknown error occurred"


def cors_headers(allow_origin: str = "*", correlation_id: str | None = None) -> Dict[str, str]:
    """Full CORS header set sent on success and preflight responses."""
    headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": allow_origin,
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
        "Access-Control-Allow-Headers": ALLOWED_HEADERS,
    }
    if correlation_id:
        headers[CORRELATION_ID_HEADER] = correlation_id
    return headers


def build_success_response(
    story: Story,
    allow_origin: str = "*",
    correlation_id: str | None = None,
) -> Dict[str, Any]:
    """200 response carrying {success: true, data: story}."""
    return {
        "statusCode": 200,
        "headers": cors_headers(allow_origin, correlation_id),
        "body": SuccessResponse[Story](data=story).model_dump_json(),
    }


def build_error_response(
    message: str | None,
    allow_origin: str = "*",
    correlation_id: str | None = None,
) -> Dict[str, Any]:
    """500 response carrying {success: false, error: message}."""
    headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": allow_origin,
    }
    if correlation_id:
        headers[CORRELATION_ID_HEADER] = correlation_id
    return {
        "statusCode": 500,
        "headers": headers,
        "body": ErrorResponse(error=message or UNKNOWN_ERROR_MESSAGE).model_dump_json(),
    }


def build_preflight_response(
    allow_origin: str = "*",
    correlation_id: str | None = None,
) -> Dict[str, Any]:
    """200 response with CORS headers and an empty body for OPTIONS requests."""
    return {
        "statusCode": 200,
        "headers": cors_headers(allow_origin, correlation_id),
        "body": "",
    }
