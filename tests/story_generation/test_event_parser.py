"""Tests for API Gateway event and body parsing."""

import base64

import pytest

from backend.core.exceptions import RequestParseError
from backend.core.story_generation.lambda_utils.event_parser import (
    decode_json_body,
    parse_event,
    parse_request_body,
)
from backend.core.story_generation.models.api_gateway_event import APIGatewayProxyEvent


class TestDecodeJsonBody:
    """Tests for JSON body decoding."""

    @pytest.mark.parametrize("raw", [None, "", "   ", b""])
    def test_absent_body_is_empty(self, raw) -> None:
        """Absent or blank body decodes to an empty dict."""
        assert decode_json_body(raw) == {}

    def test_object_body(self) -> None:
        """JSON object is returned as dict."""
        assert decode_json_body('{"topic": "owls"}') == {"topic": "owls"}

    def test_bytes_body(self) -> None:
        """UTF-8 bytes are decoded."""
        assert decode_json_body('{"topic": "café"}'.encode("utf-8")) == {"topic": "café"}

    @pytest.mark.parametrize("raw", ["null", "[1, 2]", "42", '"story"', "true"])
    def test_non_object_json_is_empty(self, raw: str) -> None:
        """Non-object JSON values decode to an empty dict."""
        assert decode_json_body(raw) == {}

    @pytest.mark.parametrize("raw", ["{not json", '{"topic": ', "topic=owls"])
    def test_malformed_json_raises(self, raw: str) -> None:
        """Malformed JSON raises RequestParseError."""
        with pytest.raises(RequestParseError, match="Invalid JSON"):
            decode_json_body(raw)

    def test_invalid_utf8_raises(self) -> None:
        """Undecodable bytes raise RequestParseError."""
        with pytest.raises(RequestParseError):
            decode_json_body(b"\xff\xfe{")


class TestParseRequestBody:
    """Tests for extracting the body from a proxy event."""

    def test_plain_body(self) -> None:
        """Plain JSON body is parsed."""
        event = APIGatewayProxyEvent(body='{"length": "short"}')

        assert parse_request_body(event) == {"length": "short"}

    def test_base64_body(self) -> None:
        """Base64-flagged body is decoded before parsing."""
        encoded = base64.b64encode(b'{"style": "noir"}').decode("ascii")
        event = APIGatewayProxyEvent(body=encoded, isBase64Encoded=True)

        assert parse_request_body(event) == {"style": "noir"}

    def test_invalid_base64_raises(self) -> None:
        """Invalid base64 raises RequestParseError."""
        event = APIGatewayProxyEvent(body="!!not-base64!!", isBase64Encoded=True)

        with pytest.raises(RequestParseError, match="base64"):
            parse_request_body(event)

    def test_missing_body(self) -> None:
        """Missing body yields an empty dict."""
        assert parse_request_body(APIGatewayProxyEvent()) == {}


class TestParseEvent:
    """Tests for proxy event validation."""

    def test_v1_method(self) -> None:
        """Payload format 1.0 method is read from httpMethod."""
        proxy_event = parse_event({"httpMethod": "post", "body": None})

        assert proxy_event.method == "POST"

    def test_v2_method(self) -> None:
        """Payload format 2.0 method is read from requestContext.http."""
        proxy_event = parse_event({
            "version": "2.0",
            "requestContext": {"http": {"method": "OPTIONS", "path": "/story"}},
        })

        assert proxy_event.method == "OPTIONS"

    def test_empty_event(self) -> None:
        """An empty event parses with no method."""
        proxy_event = parse_event({})

        assert proxy_event.method == ""
        assert proxy_event.body is None

    def test_invalid_event_raises(self) -> None:
        """Events with wrongly typed fields raise RequestParseError."""
        with pytest.raises(RequestParseError):
            parse_event({"body": {"topic": "not a string"}})
