"""
Story generation agent module.

Provides the Bedrock-backed story agent, its prompt and its schemas.

Dependencies: langchain, langchain_aws
System role: Agent module exports
"""

from backend.core.agentic_system.story_agent.story_agent import StoryAgent
from backend.core.agentic_system.story_agent.story_agent_prompt import register_story_prompt
from backend.core.agentic_system.story_agent.story_agent_schema import Story, StoryInput

__all__ = ["StoryAgent", "Story", "StoryInput", "register_story_prompt"]
