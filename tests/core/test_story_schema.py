"""Tests for story agent input and output schemas.

Dependencies: pytest, pydantic
System role: Agent schema validation
"""

import pytest
from pydantic import ValidationError

from backend.core.agentic_system.story_agent.story_agent_schema import (
    LENGTH_WORD_RANGES,
    Story,
    StoryInput,
)


class TestStoryInputSchema:
    """Test StoryInput validation and derived values."""

    def test_input_with_all_fields(self) -> None:
        """Should keep every provided field."""
        story_input = StoryInput(topic="a haunted lighthouse", style="mystery", length="long")

        assert story_input.topic == "a haunted lighthouse"
        assert story_input.style == "mystery"
        assert story_input.length == "long"

    def test_input_defaults(self) -> None:
        """Style defaults to None and length to medium."""
        story_input = StoryInput(topic="a lost robot")

        assert story_input.style is None
        assert story_input.length == "medium"

    def test_input_requires_topic(self) -> None:
        """Should raise validation error when topic missing."""
        with pytest.raises(ValidationError):
            StoryInput()  # type: ignore[call-arg]

    def test_input_rejects_unknown_length(self) -> None:
        """Length is restricted to short, medium and long."""
        with pytest.raises(ValidationError):
            StoryInput(topic="x", length="epic")  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("length", "expected"),
        [("short", "200-300"), ("medium", "500-700"), ("long", "1000-1500")],
    )
    def test_word_range_per_length(self, length: str, expected: str) -> None:
        """Each length maps to its requested word range."""
        assert StoryInput(topic="x", length=length).word_range == expected

    def test_word_ranges_cover_every_length(self) -> None:
        """Range table has exactly the three lengths."""
        assert set(LENGTH_WORD_RANGES) == {"short", "medium", "long"}


class TestStorySchema:
    """Test Story output model validation."""

    def test_story_creation(self, sample_story: Story) -> None:
        """Should create story with all fields."""
        assert sample_story.title == "The Glass Dunes of Kepler-22b"
        assert sample_story.wordCount == 612
        assert sample_story.themes == ["courage", "discovery", "isolation"]

    def test_story_serializes_camel_case_word_count(self, sample_story: Story) -> None:
        """wordCount keeps its wire name when dumped."""
        dumped = sample_story.model_dump()

        assert set(dumped) == {"title", "genre", "story", "wordCount", "themes"}

    def test_story_accepts_fractional_word_count(self) -> None:
        """wordCount is any number, not only integers."""
        story = Story(title="t", genre="g", story="s", wordCount=512.5, themes=[])

        assert story.wordCount == 512.5

    def test_story_accepts_empty_themes(self) -> None:
        """An empty themes list is valid."""
        story = Story(title="t", genre="g", story="s", wordCount=1, themes=[])

        assert story.themes == []

    def test_story_missing_field_fails(self) -> None:
        """Should raise validation error when a field is missing."""
        with pytest.raises(ValidationError):
            Story.model_validate({"title": "t", "genre": "g", "story": "s", "wordCount": 3})

    def test_story_themes_must_be_strings(self) -> None:
        """Themes must be a list of strings."""
        with pytest.raises(ValidationError):
            Story.model_validate(
                {"title": "t", "genre": "g", "story": "s", "wordCount": 3, "themes": [{"a": 1}]}
            )
