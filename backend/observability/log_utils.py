"""
Logging utilities for safe structured logging.

Helpers for logging arbitrary values, and for logging API Gateway events
without leaking credentials or dumping full request bodies.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

REDACTED_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Safely convert any value to a string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def sanitize_event(event: dict[str, Any], max_body_length: int = 1000) -> dict[str, Any]:
    """
    Build a log-safe copy of an API Gateway proxy event.

    Credential-bearing headers are masked and the body is truncated.

    Args:
        event: Raw Lambda event
        max_body_length: Maximum body characters to keep

    Returns:
        dict: Shallow copy of the event suitable for logging
    """
    sanitized = dict(event)

    headers = event.get("headers") or {}
    sanitized["headers"] = {
        key: "***" if key.lower() in REDACTED_HEADERS else value
        for key, value in headers.items()
    }

    body = event.get("body")
    if isinstance(body, str):
        sanitized["body"] = safe_log_value(body, max_length=max_body_length)

    return sanitized


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with structured context, safely converting all values.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Context dict with arbitrary key-value pairs
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    logger.log(level, message, extra=safe_context)


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception with full context and traceback.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context dict
    """
    safe_context = {key: safe_log_value(val) for key, val in context.items()}
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": str(exc),
    })
    logger.error(message, exc_info=exc, extra=safe_context)
