"""
Shared test fixtures and configuration for entire test suite.

Provides: Environment isolation, settings cache reset, sample stories and
story service mocks.
Dependencies: pytest, backend.configs, backend.observability
System role: Test infrastructure and fixture management
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest

from backend.configs import get_settings
from backend.configs.story import StorySettings
from backend.core.agentic_system.story_agent.story_agent_schema import Story
from backend.observability.correlation import clear_correlation_id
from backend.observability.prompt_registry.registry import PromptRegistry

_ENV_PREFIXES = ("STORY_", "BEDROCK_", "LANGFUSE_")


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """
    Strip story-related environment variables and reset cached singletons.

    Keeps a developer's local .env or shell from leaking into tests.
    """
    for key in list(os.environ):
        if key.upper().startswith(_ENV_PREFIXES):
            monkeypatch.delenv(key)
    monkeypatch.chdir(os.path.dirname(__file__))

    get_settings.cache_clear()
    PromptRegistry.reset()
    clear_correlation_id()
    yield
    get_settings.cache_clear()
    PromptRegistry.reset()
    clear_correlation_id()


@pytest.fixture
def sample_story() -> Story:
    """Provide a schema-valid story."""
    return Story(
        title="The Glass Dunes of Kepler-22b",
        genre="adventure",
        story="Captain Ama Reyes stepped onto the shimmering sand and listened.",
        wordCount=612,
        themes=["courage", "discovery", "isolation"],
    )


@pytest.fixture
def story_settings() -> StorySettings:
    """Provide story settings with the standard request defaults."""
    return StorySettings()


@pytest.fixture
def mock_story_agent(sample_story: Story) -> MagicMock:
    """
    Create mock StoryAgent for testing.

    Returns:
        MagicMock: Agent whose invoke/ainvoke return sample_story
    """
    agent = MagicMock()
    agent.invoke.return_value = sample_story
    agent.ainvoke = AsyncMock(return_value=sample_story)
    return agent
