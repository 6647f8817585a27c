"""
Secrets Manager component for Langfuse credentials.

The story Lambda reads this secret at cold start (LANGFUSE_SECRETS_ARN)
and exports the keys as LANGFUSE_PUBLIC_KEY / LANGFUSE_SECRET_KEY.
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags

PLACEHOLDER_VALUE = "PLACEHOLDER_SET_VIA_CLI"


@dataclass
class SecretsOutputs:
    """Output values from secrets component."""
    langfuse_secret_arn: pulumi.Output[str]


class SecretsManagerComponent(pulumi.ComponentResource):
    """
    Secrets Manager component for storing sensitive configuration.

    Secrets are created with placeholder values that should be
    populated manually or via CI/CD pipeline.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:SecretsManager", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.langfuse_keys = aws.secretsmanager.Secret(
            f"{name}-langfuse-keys",
            name=namer.secret_name("langfuse-keys"),
            description="Langfuse public/secret keys for prompt registry and tracing",
            recovery_window_in_days=0 if environment != "prod" else 7,
            tags=create_tags(environment, f"{name}-langfuse-keys"),
            opts=child_opts,
        )

        # Actual values set via console/CLI
        aws.secretsmanager.SecretVersion(
            f"{name}-langfuse-keys-version",
            secret_id=self.langfuse_keys.id,
            secret_string=json.dumps({
                "public_key": PLACEHOLDER_VALUE,
                "secret_key": PLACEHOLDER_VALUE,
            }),
            opts=pulumi.ResourceOptions(parent=self, ignore_changes=["secret_string"]),
        )

        self.register_outputs({
            "langfuse_secret_arn": self.langfuse_keys.arn,
        })

    def get_outputs(self) -> SecretsOutputs:
        """Get secrets output values."""
        return SecretsOutputs(langfuse_secret_arn=self.langfuse_keys.arn)
