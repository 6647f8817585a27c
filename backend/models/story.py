"""
Story API models.

Request body and response envelope for the story endpoint.

Dependencies: pydantic, backend.models.common
System role: Story endpoint HTTP contract
"""

from pydantic import BaseModel, ConfigDict, Field

from backend.core.agentic_system.story_agent.story_agent_schema import Story
from backend.models.common import SuccessResponse


class StoryRequest(BaseModel):
    """
    Raw story request body.

    All fields are optional and unvalidated here; defaults and length
    validation are applied by StoryService.build_input.
    """

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={
            "example": {
                "topic": "a lighthouse keeper who talks to whales",
                "style": "mystery",
                "length": "short",
            }
        },
    )

    topic: str | None = Field(default=None, description="The main topic or theme for the story")
    style: str | None = Field(default=None, description="Writing style (e.g., adventure, mystery)")
    length: str | None = Field(default=None, description="One of short, medium, long")


StoryResponse = SuccessResponse[Story]
