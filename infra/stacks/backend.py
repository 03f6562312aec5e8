"""
Backend declaration: Lambda functions behind an HTTP API.

Instantiates, in dependency order:
1. IAM execution role
2. Lambda functions (one per descriptor)
3. API Gateway (one integration, route and permission per descriptor)
"""

from dataclasses import dataclass

import pulumi

from infra.components.compute.lambda_functions import LambdaFunctionsComponent
from infra.components.edge.api_gateway import ApiGatewayComponent
from infra.components.security.iam_roles import IamRolesComponent
from infra.configs.base import EnvironmentConfig
from infra.utils.naming import ResourceNamer


@dataclass
class BackendOutputs:
    """Handles returned by deploy_backend()."""
    api_domain_name: pulumi.Output[str]
    api_endpoint: pulumi.Output[str]
    iam_roles: IamRolesComponent
    lambda_functions: LambdaFunctionsComponent
    api_gateway: ApiGatewayComponent

    def exports(self) -> dict[str, pulumi.Output[str]]:
        """Stack exports for the backend."""
        return {
            "api_domain_name": self.api_domain_name,
            "api_endpoint": self.api_endpoint,
        }


def deploy_backend(config: EnvironmentConfig, namer: ResourceNamer) -> BackendOutputs:
    """
    Declare the serverless API.

    Args:
        config: Validated environment configuration
        namer: ResourceNamer for the stack

    Returns:
        BackendOutputs with the normalized API domain name
    """
    base_name = namer.name("backend")

    iam_roles = IamRolesComponent(name=base_name, namer=namer)
    iam_outputs = iam_roles.get_outputs()

    lambda_functions = LambdaFunctionsComponent(
        name=base_name,
        namer=namer,
        functions=config.lambda_functions,
        artifact_bucket=config.artifact_bucket,
        role_arn=iam_outputs.lambda_role_arn,
        log_retention_days=config.log_retention_days,
    )

    api_gateway = ApiGatewayComponent(
        name=base_name,
        namer=namer,
        functions=config.lambda_functions,
        lambda_functions=lambda_functions.functions,
        cors_allow_origins=config.cors_allow_origins,
    )
    api_outputs = api_gateway.get_outputs()

    pulumi.log.info(
        f"Backend declares {len(config.lambda_functions)} route(s): "
        + ", ".join(spec.route_key for spec in config.lambda_functions.values())
    )

    return BackendOutputs(
        api_domain_name=api_outputs.domain_name,
        api_endpoint=api_outputs.api_endpoint,
        iam_roles=iam_roles,
        lambda_functions=lambda_functions,
        api_gateway=api_gateway,
    )
