"""Event models for the story Lambda."""

from .api_gateway_event import APIGatewayProxyEvent

__all__ = ["APIGatewayProxyEvent"]
