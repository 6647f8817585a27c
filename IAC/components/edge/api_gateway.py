"""
API Gateway Component for the story endpoint.

The dependency chain:
1. API: The HTTP API container.
2. Integration: AWS_PROXY to the story Lambda (payload format 2.0).
3. Routes: POST /story and OPTIONS /story, both forwarded to the integration.
4. Stage: "$default" with auto-deploy gives a clean URL.
5. Permission: lets API Gateway invoke the Lambda.

No cors_configuration is set on the API: when it is, API Gateway answers
preflight itself and the OPTIONS route never reaches the Lambda, which
owns the CORS headers.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import API_INTEGRATION_TIMEOUT_MS, STORY_ROUTE_PATH
from IAC.utils.tags import create_tags


@dataclass
class ApiGatewayOutputs:
    """Output values from API Gateway component."""
    api_endpoint: pulumi.Output[str]
    api_id: pulumi.Output[str]
    story_url: pulumi.Output[str]


class ApiGatewayComponent(pulumi.ComponentResource):
    """
    HTTP API Gateway fronting the story Lambda.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        function_name: pulumi.Input[str],
        function_invoke_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:edge:ApiGateway", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.api = aws.apigatewayv2.Api(
            f"{name}-api",
            name=f"{name}-api",
            protocol_type="HTTP",
            tags=create_tags(environment, f"{name}-api"),
            opts=child_opts,
        )

        self.integration = aws.apigatewayv2.Integration(
            f"{name}-lambda-integration",
            api_id=self.api.id,
            integration_type="AWS_PROXY",
            integration_uri=function_invoke_arn,
            integration_method="POST",
            payload_format_version="2.0",
            timeout_milliseconds=API_INTEGRATION_TIMEOUT_MS,
            opts=child_opts,
        )

        target = self.integration.id.apply(lambda integration_id: f"integrations/{integration_id}")

        self.routes = [
            aws.apigatewayv2.Route(
                f"{name}-{method.lower()}-story-route",
                api_id=self.api.id,
                route_key=f"{method} {STORY_ROUTE_PATH}",
                target=target,
                opts=child_opts,
            )
            for method in ("POST", "OPTIONS")
        ]

        self.stage = aws.apigatewayv2.Stage(
            f"{name}-stage",
            api_id=self.api.id,
            name="$default",
            auto_deploy=True,
            tags=create_tags(environment, f"{name}-stage"),
            opts=pulumi.ResourceOptions(parent=self, depends_on=self.routes),
        )

        aws.lambda_.Permission(
            f"{name}-invoke-permission",
            action="lambda:InvokeFunction",
            function=function_name,
            principal="apigateway.amazonaws.com",
            source_arn=self.api.execution_arn.apply(lambda arn: f"{arn}/*/*"),
            opts=child_opts,
        )

        self.register_outputs({
            "api_endpoint": self.api.api_endpoint,
            "api_id": self.api.id,
        })

    def get_outputs(self) -> ApiGatewayOutputs:
        """Get API Gateway output values."""
        return ApiGatewayOutputs(
            api_endpoint=self.api.api_endpoint,
            api_id=self.api.id,
            story_url=self.api.api_endpoint.apply(lambda url: f"{url}{STORY_ROUTE_PATH}"),
        )
