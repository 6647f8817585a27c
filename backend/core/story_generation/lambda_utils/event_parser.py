"""
API Gateway event parsing utilities for Lambda.
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict

from backend.core.exceptions import RequestParseError
from backend.core.story_generation.models.api_gateway_event import APIGatewayProxyEvent

logger = logging.getLogger(__name__)


def parse_event(event: Dict[str, Any]) -> APIGatewayProxyEvent:
    """
    Validate the raw Lambda event as an API Gateway proxy event.

    Raises:
        RequestParseError: Event does not look like a proxy event
    """
    try:
        return APIGatewayProxyEvent.model_validate(event or {})
    except ValueError as e:
        logger.error("parse_event - ValueError: %s", e)
        raise RequestParseError(f"Invalid API Gateway event: {e}") from e


def decode_json_body(raw_body: str | bytes | None) -> Dict[str, Any]:
    """
    Decode a JSON request body into a dict.

    An absent or blank body, or a JSON value that is not an object
    (null, list, number, string), yields an empty dict so defaults apply.

    Raises:
        RequestParseError: Body is not valid JSON
    """
    if raw_body is None:
        return {}
    if isinstance(raw_body, bytes):
        try:
            raw_body = raw_body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise RequestParseError(f"Request body is not valid UTF-8: {e}") from e
    if not raw_body.strip():
        return {}

    try:
        body = json.loads(raw_body)
    except json.JSONDecodeError as e:
        logger.error("decode_json_body - JSONDecodeError: %s", e)
        raise RequestParseError(f"Invalid JSON in request body: {e}") from e

    if not isinstance(body, dict):
        logger.warning(
            "decode_json_body - Ignoring non-object body",
            extra={"body_type": type(body).__name__},
        )
        return {}
    return body


def parse_request_body(proxy_event: APIGatewayProxyEvent) -> Dict[str, Any]:
    """
    Extract the JSON body from a proxy event, decoding base64 if flagged.

    Raises:
        RequestParseError: Body is not valid base64 or JSON
    """
    raw_body: str | bytes | None = proxy_event.body
    if raw_body and proxy_event.isBase64Encoded:
        try:
            raw_body = base64.b64decode(raw_body, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.error("parse_request_body - Invalid base64 body: %s", e)
            raise RequestParseError(f"Invalid base64 request body: {e}") from e

    return decode_json_body(raw_body)
