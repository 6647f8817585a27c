"""
Story agent prompt.

Defines the prompt template for story generation and the Langfuse
registry integration used to version it.

Dependencies: langchain_core.prompts, backend.observability.prompt_registry
System role: Prompt template for story generation
"""

import logging

from langchain_core.prompts import ChatPromptTemplate

from backend.core.agentic_system.story_agent.story_agent_schema import StoryInput
from backend.observability.prompt_registry.models import ModelConfig
from backend.observability.prompt_registry.registry import PromptRegistry

logger = logging.getLogger(__name__)

STORY_PROMPT_NAME = "story-generator"

# Used in the prompt when the request carries no style
FALLBACK_STYLE = "fictional"

STORY_USER_PROMPT = """Create a creative {style} story with the following requirements:
  Topic: {topic}
  Length: {word_count} words

Please provide a captivating story with a clear beginning, middle, and end.
Include rich descriptions and engaging characters."""

STORY_PROMPT = ChatPromptTemplate.from_messages([
    ("human", STORY_USER_PROMPT),
])


def build_story_prompt_variables(story_input: StoryInput) -> dict[str, str]:
    """
    Map a story input onto the prompt template variables.

    Args:
        story_input: Validated story request

    Returns:
        dict: Values for style, topic and word_count
    """
    return {
        "style": story_input.style or FALLBACK_STYLE,
        "topic": story_input.topic,
        "word_count": story_input.word_range,
    }


def register_story_prompt(
    model_id: str,
    temperature: float | None = None,
    labels: list[str] | None = None,
) -> None:
    """
    Register the story prompt with Langfuse.

    Args:
        model_id: Bedrock model identifier
        temperature: Model temperature
        labels: Optional labels (e.g., ["production", "staging"])
    """
    registry = PromptRegistry()

    if not registry.is_enabled:
        logger.debug("Prompt registry disabled, skipping registration")
        return

    registry.register_prompt(
        name=STORY_PROMPT_NAME,
        template=STORY_PROMPT,
        config=ModelConfig(model=model_id, temperature=temperature),
        labels=labels or ["development"],
    )
    logger.info("Registered story prompt: name=%s", STORY_PROMPT_NAME)


def get_story_prompt(
    use_registry: bool = False,
    label: str | None = None,
) -> ChatPromptTemplate:
    """
    Get the story prompt template.

    Args:
        use_registry: Whether to fetch from Langfuse registry
        label: Optional label filter when using registry

    Returns:
        ChatPromptTemplate: Registry version if available, else the local template
    """
    if use_registry:
        registry = PromptRegistry()
        if registry.is_enabled:
            try:
                prompt = registry.get_langchain_prompt(STORY_PROMPT_NAME, label=label)
            except Exception as e:
                logger.warning(
                    "get_story_prompt - Registry fetch failed, using local template: %s: %s",
                    type(e).__name__,
                    e,
                )
                return STORY_PROMPT
            if prompt is not None:
                logger.debug("Using prompt from registry: name=%s", STORY_PROMPT_NAME)
                return prompt
            logger.debug("Prompt not found in registry, using local template")

    return STORY_PROMPT
