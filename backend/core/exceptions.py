"""
Exception hierarchy for the story generator.

Every failure surfaces to callers as the same HTTP 500 envelope; the
hierarchy exists so logs and tests can tell the failure sources apart.

Dependencies: None (pure domain layer)
System role: Centralized exception definitions
"""

from typing import Any


class StoryGeneratorException(Exception):
    """Base exception for all story generator errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the message; details are for logs, not clients."""
        return self.message


class ValidationError(StoryGeneratorException):
    """Raised when story request input fails schema validation."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class RequestParseError(StoryGeneratorException):
    """Raised when the HTTP request body is not valid JSON."""


class StoryGenerationError(StoryGeneratorException):
    """Raised when the model returns no usable structured output."""
