"""Tests for LangChain to Langfuse converter."""

import pytest
from langchain_core.prompts import ChatPromptTemplate

from backend.core.agentic_system.story_agent.story_agent_prompt import STORY_PROMPT
from backend.observability.prompt_registry.converter import (
    convert_chat_template,
    to_langfuse_variables,
)


class TestVariableConversion:
    """Tests for variable syntax conversion."""

    def test_single_variable(self) -> None:
        """Convert single variable from {var} to {{var}}."""
        assert to_langfuse_variables("Hello {name}!") == "Hello {{name}}!"

    def test_multiple_variables(self) -> None:
        """Convert multiple variables."""
        assert to_langfuse_variables("A {style} story about {topic}") == (
            "A {{style}} story about {{topic}}"
        )

    def test_no_variables(self) -> None:
        """Text without variables unchanged."""
        assert to_langfuse_variables("Hello world!") == "Hello world!"

    def test_already_doubled(self) -> None:
        """Already doubled braces unchanged."""
        assert to_langfuse_variables("Hello {{name}}!") == "Hello {{name}}!"

    def test_empty_braces(self) -> None:
        """Empty braces are not variables."""
        assert to_langfuse_variables("Hello {}!") == "Hello {}!"


class TestChatTemplateConversion:
    """Tests for ChatPromptTemplate conversion."""

    def test_roles_mapped(self) -> None:
        """System, human and ai messages map to Langfuse roles."""
        template = ChatPromptTemplate.from_messages([
            ("system", "You are a {role}."),
            ("human", "{question}"),
            ("ai", "Sure."),
        ])

        result = convert_chat_template(template)

        assert result == [
            {"role": "system", "content": "You are a {{role}}."},
            {"role": "user", "content": "{{question}}"},
            {"role": "assistant", "content": "Sure."},
        ]

    def test_story_prompt_conversion(self) -> None:
        """The story prompt converts to a single user message."""
        result = convert_chat_template(STORY_PROMPT)

        assert len(result) == 1
        assert result[0]["role"] == "user"
        for variable in ("{{style}}", "{{topic}}", "{{word_count}}"):
            assert variable in result[0]["content"]

    def test_placeholder_unsupported(self) -> None:
        """Message placeholders cannot be converted."""
        template = ChatPromptTemplate.from_messages([
            ("placeholder", "{history}"),
            ("human", "{question}"),
        ])

        with pytest.raises(ValueError, match="Unsupported message type"):
            convert_chat_template(template)
