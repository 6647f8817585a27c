"""Tests for API Gateway proxy response builders."""

import json

from backend.core.agentic_system.story_agent.story_agent_schema import Story
from backend.core.story_generation.lambda_utils.responses import (
    build_error_response,
    build_preflight_response,
    build_success_response,
    cors_headers,
)


class TestCorsHeaders:
    """Tests for the CORS header set."""

    def test_default_headers(self) -> None:
        """Default header set allows any origin."""
        assert cors_headers() == {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
            "Access-Control-Allow-Methods": "POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        }

    def test_correlation_id_header(self) -> None:
        """Correlation id is echoed when given."""
        headers = cors_headers("https://app.example.com", "abc-123")

        assert headers["Access-Control-Allow-Origin"] == "https://app.example.com"
        assert headers["X-Correlation-ID"] == "abc-123"


class TestSuccessResponse:
    """Tests for 200 responses."""

    def test_success_body(self, sample_story: Story) -> None:
        """Body is the success envelope with the story."""
        response = build_success_response(sample_story)

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {
            "success": True,
            "data": sample_story.model_dump(),
        }
        assert response["headers"]["Access-Control-Allow-Methods"] == "POST, OPTIONS"


class TestErrorResponse:
    """Tests for 500 responses."""

    def test_error_body(self) -> None:
        """Body is the error envelope with the message."""
        response = build_error_response("Bedrock throttled")

        assert response["statusCode"] == 500
        assert json.loads(response["body"]) == {"success": False, "error": "Bedrock throttled"}

    def test_error_headers_are_minimal(self) -> None:
        """Error responses carry only content type and origin."""
        response = build_error_response("boom")

        assert response["headers"] == {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
        }

    def test_empty_message_uses_fallback(self) -> None:
        """Missing messages become the generic error text."""
        for message in (None, ""):
            body = json.loads(build_error_response(message)["body"])
            assert body["error"] == "Unknown error occurred"


class TestPreflightResponse:
    """Tests for OPTIONS responses."""

    def test_preflight(self) -> None:
        """Preflight answers 200 with CORS headers and no body."""
        response = build_preflight_response("*", "cid-1")

        assert response["statusCode"] == 200
        assert response["body"] == ""
        assert response["headers"]["Access-Control-Allow-Headers"] == "Content-Type"
        assert response["headers"]["X-Correlation-ID"] == "cid-1"
