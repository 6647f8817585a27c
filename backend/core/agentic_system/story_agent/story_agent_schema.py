"""
Story agent schemas.

Defines the request input accepted by the story flow and the structured
output schema the model must return.

Dependencies: pydantic
System role: Agent input/output schema definitions
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

StoryLength = Literal["short", "medium", "long"]

# Target word range requested from the model per story length
LENGTH_WORD_RANGES: dict[str, str] = {
    "short": "200-300",
    "medium": "500-700",
    "long": "1000-1500",
}


class StoryInput(BaseModel):
    """Validated input for one story generation."""

    topic: str = Field(description="The main topic or theme for the story")
    style: str | None = Field(
        default=None,
        description="Writing style (e.g., adventure, mystery, sci-fi)",
    )
    length: StoryLength = Field(default="medium", description="Target story length")

    @property
    def word_range(self) -> str:
        """Word range requested from the model for this length."""
        return LENGTH_WORD_RANGES[self.length]


class Story(BaseModel):
    """Structured story returned by the model."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "The Glass Dunes of Kepler-22b",
                "genre": "adventure",
                "story": "Captain Ama Reyes stepped onto the shimmering sand...",
                "wordCount": 612,
                "themes": ["courage", "discovery", "isolation"],
            }
        }
    )

    title: str = Field(description="Story title")
    genre: str = Field(description="Genre of the story")
    story: str = Field(description="Full story text")
    wordCount: int | float = Field(description="Number of words in the story")
    themes: list[str] = Field(description="Main themes explored by the story")
