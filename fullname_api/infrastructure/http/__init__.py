"""HTTP client adapters."""

from fullname_api.infrastructure.http.api_gateway_client import (
    ApiGatewayClient,
    ApiResponse,
)

__all__ = ["ApiGatewayClient", "ApiResponse"]
