"""Edge components: HTTP API Gateway."""

from IAC.components.edge.api_gateway import ApiGatewayComponent, ApiGatewayOutputs

__all__ = ["ApiGatewayComponent", "ApiGatewayOutputs"]
