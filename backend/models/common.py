"""
Common response models.

Success and error envelopes shared by the Lambda handler and the
FastAPI routes.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: Literal[True] = True
    data: T


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: Literal[False] = False
    error: str = Field(description="Error message")
