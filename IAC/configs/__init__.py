"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from IAC.configs.base import EnvironmentConfig
from IAC.configs.environment import get_config
from IAC.configs.constants import (
    BEDROCK_DEFAULTS,
    DEFAULT_TAGS,
    LAMBDA_DEFAULTS,
    LAMBDA_HANDLER,
)

__all__ = [
    "EnvironmentConfig",
    "get_config",
    "BEDROCK_DEFAULTS",
    "DEFAULT_TAGS",
    "LAMBDA_DEFAULTS",
    "LAMBDA_HANDLER",
]
