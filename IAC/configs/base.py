"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        lambda_memory: Lambda function memory in MB
        lambda_timeout: Lambda function timeout in seconds
        bedrock_model_id: Bedrock model the Lambda invokes
        bedrock_region: Region the Bedrock model is served from
        cors_allow_origin: Allowed origin for browser clients
        image_tag: Container image tag deployed to the Lambda
    """
    environment: str
    lambda_memory: int
    lambda_timeout: int
    bedrock_model_id: str
    bedrock_region: str
    cors_allow_origin: str
    image_tag: str

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def log_retention_days(self) -> int:
        """CloudWatch log retention for the Lambda log group."""
        return 90 if self.is_production else 14
