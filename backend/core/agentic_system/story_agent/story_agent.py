"""
Story generation agent implementation.

Sends the story prompt to a Bedrock-hosted model through LangChain's
create_agent with a structured output strategy, and returns the
schema-validated Story. Model retries and output coercion are handled
inside langchain-aws and the agent runtime.

Dependencies: langchain.agents, langchain_aws, backend.observability.prompt_registry
System role: Story generation model orchestration
"""

import logging
from typing import Any

from langchain.agents import create_agent
from langchain.agents.structured_output import ToolStrategy
from langchain_aws import ChatBedrockConverse

from backend.core.agentic_system.story_agent.story_agent_prompt import (
    build_story_prompt_variables,
    get_story_prompt,
    register_story_prompt,
)
from backend.core.agentic_system.story_agent.story_agent_schema import Story, StoryInput
from backend.core.exceptions import StoryGenerationError

logger = logging.getLogger(__name__)


class StoryAgent:
    """
    Story generator backed by a Bedrock chat model.

    Uses create_agent without tools and with ToolStrategy(Story), so the
    model's answer is forced into the Story schema.
    """

    def __init__(
        self,
        model_id: str = "amazon.nova-pro-v1:0",
        region: str = "us-east-1",
        temperature: float = 0.7,
        max_tokens: int | None = None,
        use_prompt_registry: bool = False,
        prompt_label: str | None = None,
    ) -> None:
        """
        Initialize story agent with a Bedrock model.

        Args:
            model_id: Bedrock model identifier
            region: AWS region for Bedrock
            temperature: Model temperature
            max_tokens: Optional cap on response tokens
            use_prompt_registry: Whether to fetch prompts from Langfuse
            prompt_label: Optional label filter when using registry
        """
        self._model_id = model_id
        self._temperature = temperature
        self._use_prompt_registry = use_prompt_registry
        self._prompt_label = prompt_label

        self._model = ChatBedrockConverse(
            model=model_id,
            region_name=region,
            temperature=temperature,
            max_tokens=max_tokens,
        )

        self._agent = create_agent(
            model=self._model,
            tools=[],
            response_format=ToolStrategy(Story),
        )

        if use_prompt_registry:
            register_story_prompt(
                model_id=model_id,
                temperature=temperature,
                labels=[prompt_label] if prompt_label else None,
            )

        logger.info(
            f"{__name__}:__init__ - StoryAgent initialized (model={model_id}, region={region})"
        )

    def _build_messages(self, story_input: StoryInput) -> list:
        prompt = get_story_prompt(
            use_registry=self._use_prompt_registry,
            label=self._prompt_label,
        )
        return prompt.invoke(build_story_prompt_variables(story_input)).to_messages()

    @staticmethod
    def _extract_story(result: dict[str, Any]) -> Story:
        output = result.get("structured_response") if result else None
        if not output:
            raise StoryGenerationError("Failed to generate story")
        if isinstance(output, Story):
            return output
        return Story.model_validate(output)

    def invoke(self, story_input: StoryInput) -> Story:
        """
        Generate a story for the given input.

        Args:
            story_input: Validated story request

        Returns:
            Story: Schema-validated story

        Raises:
            StoryGenerationError: Model returned no structured output
        """
        messages = self._build_messages(story_input)
        result = self._agent.invoke({"messages": messages})
        return self._extract_story(result)

    async def ainvoke(self, story_input: StoryInput) -> Story:
        """
        Async version of invoke.

        Args:
            story_input: Validated story request

        Returns:
            Story: Schema-validated story

        Raises:
            StoryGenerationError: Model returned no structured output
        """
        messages = self._build_messages(story_input)
        result = await self._agent.ainvoke({"messages": messages})
        return self._extract_story(result)
