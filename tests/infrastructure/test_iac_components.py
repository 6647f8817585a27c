"""
Tests for IAC configuration, naming and tagging.

Validates:
1. EnvironmentConfig fields and derived properties
2. Constants the Lambda depends on
3. Resource naming and tag factories
"""

from dataclasses import FrozenInstanceError, is_dataclass

import pytest

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import (
    BEDROCK_DEFAULTS,
    DEFAULT_TAGS,
    LAMBDA_DEFAULTS,
    LAMBDA_HANDLER,
    STORY_ROUTE_PATH,
)
from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags, merge_tags


def make_config(environment: str = "dev") -> EnvironmentConfig:
    return EnvironmentConfig(
        environment=environment,
        lambda_memory=512,
        lambda_timeout=60,
        bedrock_model_id="amazon.nova-pro-v1:0",
        bedrock_region="us-east-1",
        cors_allow_origin="*",
        image_tag="latest",
    )


class TestIacConfiguration:
    """Validate configuration structure."""

    def test_environment_config_dataclass(self):
        """EnvironmentConfig should be a frozen dataclass."""
        config = make_config()

        assert is_dataclass(EnvironmentConfig)
        with pytest.raises(FrozenInstanceError):
            config.environment = "prod"  # type: ignore[misc]

    def test_environment_config_properties(self):
        """Production flag and log retention follow the environment."""
        assert make_config("dev").is_production is False
        assert make_config("dev").log_retention_days == 14
        assert make_config("prod").is_production is True
        assert make_config("prod").log_retention_days == 90

    def test_lambda_handler_path_matches_module(self):
        """Handler path points at the story Lambda handler."""
        from backend.core.story_generation import lambda_handler

        module_path, _, func_name = LAMBDA_HANDLER.rpartition(".")
        assert module_path == lambda_handler.__name__
        assert callable(getattr(lambda_handler, func_name))

    def test_constants(self):
        """Defaults used by the stack are defined."""
        assert BEDROCK_DEFAULTS["model_id"] == "amazon.nova-pro-v1:0"
        assert LAMBDA_DEFAULTS["memory_mb"] > 0
        assert LAMBDA_DEFAULTS["timeout_seconds"] > 0
        assert STORY_ROUTE_PATH == "/story"
        assert DEFAULT_TAGS["Project"] == "story-generator"


class TestIacUtilities:
    """Validate utility functions."""

    def test_resource_naming(self):
        """ResourceNamer should generate consistent names."""
        namer = ResourceNamer(project="story-generator", environment="dev")

        assert namer.name("story-fn") == "story-generator-dev-story-fn"
        assert namer.name("") == "story-generator-dev"
        assert namer.secret_name("langfuse-keys") == "story-generator/dev/langfuse-keys"

    def test_create_tags_function(self):
        """create_tags should generate proper tag dictionary."""
        tags = create_tags("dev", "test-resource", ExtraTag="extra-value")

        assert tags["Project"] == "story-generator"
        assert tags["ManagedBy"] == "pulumi"
        assert tags["Environment"] == "dev"
        assert tags["Name"] == "test-resource"
        assert tags["ExtraTag"] == "extra-value"

    def test_merge_tags_function(self):
        """merge_tags should merge tag dictionaries correctly."""
        tags1 = {"Tag1": "value1", "Shared": "original"}
        tags2 = {"Tag2": "value2", "Shared": "updated"}

        merged = merge_tags(tags1, tags2)

        assert merged == {"Tag1": "value1", "Tag2": "value2", "Shared": "updated"}
        assert tags1["Shared"] == "original"
