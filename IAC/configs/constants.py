"""
Infrastructure constants for the story generator.

Contains Lambda defaults, Bedrock defaults, and default tags.
"""

from typing import Final

# Lambda configuration
LAMBDA_DEFAULTS: Final[dict[str, int]] = {
    "memory_mb": 512,
    "timeout_seconds": 60,
}

# Model invoked by the story Lambda (Amazon Nova Pro)
BEDROCK_DEFAULTS: Final[dict[str, str]] = {
    "model_id": "amazon.nova-pro-v1:0",
    "region": "us-east-1",
}

# Lambda handler inside the container image
LAMBDA_HANDLER: Final[str] = "backend.core.story_generation.lambda_handler.handler"

# Route served by the HTTP API
STORY_ROUTE_PATH: Final[str] = "/story"

# HTTP API integration timeout ceiling
API_INTEGRATION_TIMEOUT_MS: Final[int] = 30000

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": "story-generator",
    "ManagedBy": "pulumi",
}
