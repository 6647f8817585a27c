"""
Story service for the request-to-story pipeline.

Normalises raw request bodies into StoryInput (filling defaults) and runs
the story agent. Shared by the Lambda handler and the FastAPI router.

Dependencies: pydantic, backend.core.agentic_system.story_agent, backend.configs
System role: Story generation orchestration layer
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from backend.configs import get_settings
from backend.configs.story import StorySettings
from backend.core.agentic_system.story_agent.story_agent import StoryAgent
from backend.core.agentic_system.story_agent.story_agent_schema import Story, StoryInput
from backend.core.exceptions import ValidationError
from backend.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class StoryService:
    """
    Story generation service.

    Applies request defaults, validates input and delegates generation
    to the story agent.
    """

    def __init__(self, agent: StoryAgent, settings: StorySettings | None = None) -> None:
        """
        Initialize story service.

        Args:
            agent: Story agent used for generation
            settings: Request defaults (environment-loaded if omitted)
        """
        self.agent = agent
        self.settings = settings or StorySettings()

    def build_input(self, body: Mapping[str, Any] | None) -> StoryInput:
        """
        Build a validated StoryInput from a request body.

        Missing, null or empty fields take the configured defaults.

        Args:
            body: Parsed JSON request body (None treated as empty)

        Returns:
            StoryInput: Validated input

        Raises:
            ValidationError: A provided field has an invalid value
        """
        body = body or {}
        raw = {
            "topic": body.get("topic") or self.settings.default_topic,
            "style": body.get("style") or self.settings.default_style,
            "length": body.get("length") or self.settings.default_length,
        }

        try:
            return StoryInput.model_validate(raw)
        except PydanticValidationError as e:
            first = e.errors()[0]
            field = ".".join(str(part) for part in first["loc"])
            raise ValidationError(
                f"Invalid story request: {field}: {first['msg']}",
                field=field,
                details={"errors": e.error_count()},
            ) from e

    def generate(self, story_input: StoryInput) -> Story:
        """
        Generate a story.

        Args:
            story_input: Validated story input

        Returns:
            Story: Generated story
        """
        logger.info(
            "generate - Generating story with input",
            extra={"story_input": story_input.model_dump()},
        )
        story = self.agent.invoke(story_input)
        log_with_context(
            logger, logging.INFO, "generate - Story generated successfully",
            title=story.title, word_count=story.wordCount, themes=story.themes,
        )
        return story

    async def agenerate(self, story_input: StoryInput) -> Story:
        """
        Async version of generate.

        Args:
            story_input: Validated story input

        Returns:
            Story: Generated story
        """
        logger.info(
            "agenerate - Generating story with input",
            extra={"story_input": story_input.model_dump()},
        )
        story = await self.agent.ainvoke(story_input)
        log_with_context(
            logger, logging.INFO, "agenerate - Story generated successfully",
            title=story.title, word_count=story.wordCount, themes=story.themes,
        )
        return story


def create_story_service() -> StoryService:
    """
    Build a StoryService from application settings.

    Returns:
        StoryService: Service wired to a Bedrock-backed StoryAgent
    """
    settings = get_settings()
    agent = StoryAgent(
        model_id=settings.bedrock.model_id,
        region=settings.bedrock.region,
        temperature=settings.bedrock.temperature,
        max_tokens=settings.bedrock.max_tokens,
        use_prompt_registry=settings.story.use_prompt_registry,
        prompt_label=settings.story.prompt_label,
    )
    return StoryService(agent=agent, settings=settings.story)
