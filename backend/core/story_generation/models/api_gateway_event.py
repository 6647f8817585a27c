"""
API Gateway proxy event schema.

Validates the subset of the API Gateway Lambda proxy event (payload
format 1.0 and 2.0) the story handler reads.

Dependencies: pydantic
System role: Data validation and contract definition
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class APIGatewayProxyEvent(BaseModel):
    """API Gateway proxy integration event."""

    model_config = ConfigDict(extra="allow")

    httpMethod: str | None = None  # payload format 1.0
    headers: dict[str, str] | None = None
    body: str | None = None
    isBase64Encoded: bool = False
    requestContext: dict[str, Any] = Field(default_factory=dict)

    @property
    def method(self) -> str:
        """HTTP method in upper case, from either payload format."""
        method = self.httpMethod or self.requestContext.get("http", {}).get("method", "")
        return method.upper()
