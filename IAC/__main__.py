"""
Pulumi program entry point for story generator infrastructure.

Instantiates all component resources in dependency order:
1. Configuration
2. Secrets Manager, ECR repository
3. IAM role
4. Story Lambda
5. HTTP API Gateway
"""

import pulumi

from IAC.configs.environment import get_config
from IAC.configs.constants import DEFAULT_TAGS
from IAC.utils.naming import ResourceNamer

from IAC.components.security.iam_roles import IamRolesComponent
from IAC.components.security.secrets_manager import SecretsManagerComponent
from IAC.components.storage.ecr_repository import EcrRepositoryComponent
from IAC.components.compute.story_lambda import StoryLambdaComponent
from IAC.components.edge.api_gateway import ApiGatewayComponent


def main() -> None:
    """Main Pulumi program."""
    config = get_config()
    namer = ResourceNamer(project=DEFAULT_TAGS["Project"], environment=config.environment)
    base_name = namer.name("")

    # --- Security & Storage ---
    secrets = SecretsManagerComponent(
        name=base_name,
        environment=config.environment,
        namer=namer,
    )
    secrets_outputs = secrets.get_outputs()

    ecr = EcrRepositoryComponent(
        name=base_name,
        environment=config.environment,
    )
    ecr_outputs = ecr.get_outputs()

    iam_roles = IamRolesComponent(
        name=base_name,
        environment=config.environment,
        langfuse_secret_arn=secrets_outputs.langfuse_secret_arn,
    )

    # --- Compute ---
    story_lambda = StoryLambdaComponent(
        name=namer.name("story-fn"),
        environment=config.environment,
        config=config,
        role_arn=iam_roles.get_outputs().lambda_role_arn,
        ecr_image_uri=ecr_outputs.repository_url.apply(lambda url: f"{url}:{config.image_tag}"),
        langfuse_secret_arn=secrets_outputs.langfuse_secret_arn,
    )
    lambda_outputs = story_lambda.get_outputs()

    # --- Edge ---
    api_gateway = ApiGatewayComponent(
        name=base_name,
        environment=config.environment,
        function_name=lambda_outputs.function_name,
        function_invoke_arn=lambda_outputs.invoke_arn,
    )
    api_outputs = api_gateway.get_outputs()

    # --- Exports ---
    pulumi.export("environment", config.environment)
    pulumi.export("ecr_repository_url", ecr_outputs.repository_url)
    pulumi.export("langfuse_secret_arn", secrets_outputs.langfuse_secret_arn)
    pulumi.export("lambda_function_name", lambda_outputs.function_name)
    pulumi.export("api_endpoint", api_outputs.api_endpoint)
    pulumi.export("story_url", api_outputs.story_url)


main()
