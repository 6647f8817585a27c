"""
Story Lambda component.

Creates:
- CloudWatch log group for function logs
- Lambda function (container image) running the story handler
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.base import EnvironmentConfig
from IAC.configs.constants import LAMBDA_HANDLER
from IAC.utils.tags import create_tags


@dataclass
class LambdaOutputs:
    """Output values from Lambda component."""
    function_arn: pulumi.Output[str]
    function_name: pulumi.Output[str]
    invoke_arn: pulumi.Output[str]


class StoryLambdaComponent(pulumi.ComponentResource):
    """
    Lambda function serving story generation requests.

    Invoked by API Gateway with proxy events; calls Bedrock and
    returns the structured story.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: EnvironmentConfig,
        role_arn: pulumi.Input[str],
        ecr_image_uri: pulumi.Input[str],
        langfuse_secret_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:StoryLambda", name, None, opts)

        self.log_group = aws.cloudwatch.LogGroup(
            f"{name}-logs",
            name=f"/aws/lambda/{name}",
            retention_in_days=config.log_retention_days,
            tags=create_tags(environment, f"{name}-logs"),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.function = aws.lambda_.Function(
            f"{name}-function",
            name=name,
            role=role_arn,
            package_type="Image",
            image_uri=ecr_image_uri,
            image_config=aws.lambda_.FunctionImageConfigArgs(
                command=[LAMBDA_HANDLER],
            ),
            memory_size=config.lambda_memory,
            timeout=config.lambda_timeout,
            environment=aws.lambda_.FunctionEnvironmentArgs(
                variables={
                    "ENVIRONMENT": environment,
                    "BEDROCK_MODEL_ID": config.bedrock_model_id,
                    "BEDROCK_REGION": config.bedrock_region,
                    "STORY_CORS_ALLOW_ORIGIN": config.cors_allow_origin,
                    "LANGFUSE_SECRETS_ARN": langfuse_secret_arn,
                    "LOG_LEVEL": "INFO",
                },
            ),
            tags=create_tags(environment, f"{name}-function"),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=[self.log_group],
            ),
        )

        self.register_outputs({
            "function_arn": self.function.arn,
            "function_name": self.function.name,
        })

    def get_outputs(self) -> LambdaOutputs:
        """Get Lambda output values."""
        return LambdaOutputs(
            function_arn=self.function.arn,
            function_name=self.function.name,
            invoke_arn=self.function.invoke_arn,
        )
