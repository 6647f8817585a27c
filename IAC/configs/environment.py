"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import BEDROCK_DEFAULTS, LAMBDA_DEFAULTS


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
    """
    config = pulumi.Config()

    return EnvironmentConfig(
        environment=config.require("environment"),
        lambda_memory=config.get_int("lambda_memory") or LAMBDA_DEFAULTS["memory_mb"],
        lambda_timeout=config.get_int("lambda_timeout") or LAMBDA_DEFAULTS["timeout_seconds"],
        bedrock_model_id=config.get("bedrock_model_id") or BEDROCK_DEFAULTS["model_id"],
        bedrock_region=config.get("bedrock_region") or BEDROCK_DEFAULTS["region"],
        cors_allow_origin=config.get("cors_allow_origin") or "*",
        image_tag=config.get("image_tag") or "latest",
    )
