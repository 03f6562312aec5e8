"""
Edge components for CDN and API routing.

Components:
- ApiGatewayComponent: HTTP API with one route per Lambda function
- CloudFrontComponent: CDN distribution for frontend and /api/* proxy
"""

from infra.components.edge.api_gateway import ApiGatewayComponent, ApiGatewayOutputs
from infra.components.edge.cloudfront import CloudFrontComponent, CloudFrontOutputs

__all__ = [
    "ApiGatewayComponent",
    "ApiGatewayOutputs",
    "CloudFrontComponent",
    "CloudFrontOutputs",
]
