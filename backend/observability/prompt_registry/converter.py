"""
LangChain to Langfuse prompt converter.

Converts a ChatPromptTemplate into Langfuse chat messages, rewriting
LangChain's {variable} placeholders into Langfuse's {{variable}} form.

Dependencies: langchain_core.prompts
System role: Template format conversion for prompt registry
"""

import re
from typing import TypedDict

from langchain_core.prompts import ChatPromptTemplate
from langchain_core.prompts.chat import (
    AIMessagePromptTemplate,
    HumanMessagePromptTemplate,
    SystemMessagePromptTemplate,
)

# Single braces only; already doubled braces are left alone
_VARIABLE_PATTERN = re.compile(r"(?<!\{)\{([^{}]+)\}(?!\})")

_ROLES = (
    (SystemMessagePromptTemplate, "system"),
    (HumanMessagePromptTemplate, "user"),
    (AIMessagePromptTemplate, "assistant"),
)


class LangfuseMessage(TypedDict):
    """Langfuse chat message format."""

    role: str
    content: str


def to_langfuse_variables(content: str) -> str:
    """
    Rewrite {variable} placeholders as {{variable}}.

    Args:
        content: Template string with LangChain variables

    Returns:
        str: Template string with Langfuse variables
    """
    return _VARIABLE_PATTERN.sub(r"{{\1}}", content)


def _message_role(message: object) -> str:
    for template_cls, role in _ROLES:
        if isinstance(message, template_cls):
            return role
    raise ValueError(f"Unsupported message type: {type(message)}")


def convert_chat_template(template: ChatPromptTemplate) -> list[LangfuseMessage]:
    """
    Convert a LangChain ChatPromptTemplate to Langfuse message format.

    Args:
        template: LangChain ChatPromptTemplate instance

    Returns:
        list[LangfuseMessage]: Langfuse-formatted messages

    Raises:
        ValueError: If template contains unsupported message types

    Example:
        >>> template = ChatPromptTemplate.from_messages([
        ...     ("system", "You are a {role}"),
        ...     ("human", "{question}")
        ... ])
        >>> convert_chat_template(template)[0]
        {'role': 'system', 'content': 'You are a {{role}}'}
    """
    return [
        LangfuseMessage(
            role=_message_role(message),
            content=to_langfuse_variables(str(message.prompt.template)),
        )
        for message in template.messages
    ]
