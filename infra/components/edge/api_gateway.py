"""
API Gateway Component for the serverless backend.

One HTTP API fronts every function in the catalog. Per logical name:
1. Integration: AWS_PROXY to the function's invoke ARN (payload format 2.0).
2. Route: the descriptor's route key ("GET /api/hello") targeting that integration.
3. Permission: lets apigateway.amazonaws.com invoke the function from this API only.

Shared by all functions:
- API: the HTTP API container (protocol type, CORS settings).
- Stage: "$default" with auto-deploy, so route changes go live on apply
  and the invoke URL has no stage prefix.

Route key uniqueness is checked when the config is loaded; API Gateway
would otherwise reject the second route at apply time.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from infra.configs.constants import ALL_METHODS, API_PAYLOAD_FORMAT_VERSION, API_STAGE_NAME
from infra.models.lambda_function import LambdaFunctionSpec
from infra.utils.naming import ResourceNamer, normalize_domain
from infra.utils.tags import create_tags


@dataclass
class ApiGatewayOutputs:
    """Output values from API Gateway component."""
    api_endpoint: pulumi.Output[str]
    api_id: pulumi.Output[str]
    domain_name: pulumi.Output[str]


def permission_statement_id(logical_name: str) -> str:
    """Statement ID of the invoke permission granted for a catalog entry."""
    return f"AllowApiGatewayInvoke-{logical_name}"


class ApiGatewayComponent(pulumi.ComponentResource):
    """
    HTTP API Gateway dispatching routes to Lambda functions.

    `functions` and `lambda_functions` share the same keys: the descriptor
    supplies the route, the Lambda resource supplies the invoke target.
    """

    def __init__(
        self,
        name: str,
        namer: ResourceNamer,
        functions: dict[str, LambdaFunctionSpec],
        lambda_functions: dict[str, aws.lambda_.Function],
        cors_allow_origins: list[str] | tuple[str, ...] = ("*",),
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:edge:ApiGateway", name, None, opts)

        missing = sorted(set(functions) - set(lambda_functions))
        if missing:
            raise ValueError(f"No Lambda function supplied for: {', '.join(missing)}")

        child_opts = pulumi.ResourceOptions(parent=self)
        api_name = namer.name("api")

        # HTTP API
        self.api = aws.apigatewayv2.Api(
            f"{name}-api",
            name=api_name,
            protocol_type="HTTP",
            cors_configuration=aws.apigatewayv2.ApiCorsConfigurationArgs(
                allow_origins=list(cors_allow_origins),
                allow_methods=ALL_METHODS,
                allow_headers=["*"],
                max_age=86400,
            ),
            tags=create_tags(namer.environment, api_name, project=namer.project),
            opts=child_opts,
        )

        self.integrations: dict[str, aws.apigatewayv2.Integration] = {}
        self.routes: dict[str, aws.apigatewayv2.Route] = {}
        self.permissions: dict[str, aws.lambda_.Permission] = {}

        for key, spec in functions.items():
            function = lambda_functions[key]

            integration = aws.apigatewayv2.Integration(
                f"{name}-{key}-integration",
                api_id=self.api.id,
                integration_type="AWS_PROXY",
                integration_method=spec.integration_method,
                integration_uri=function.invoke_arn,
                payload_format_version=API_PAYLOAD_FORMAT_VERSION,
                opts=child_opts,
            )

            self.routes[key] = aws.apigatewayv2.Route(
                f"{name}-{key}-route",
                api_id=self.api.id,
                route_key=spec.route_key,
                target=integration.id.apply(lambda id: f"integrations/{id}"),
                opts=child_opts,
            )

            # Scoped to this API: any stage, any method/path
            self.permissions[key] = aws.lambda_.Permission(
                f"{name}-{key}-permission",
                statement_id=permission_statement_id(key),
                action="lambda:InvokeFunction",
                function=function.name,
                principal="apigateway.amazonaws.com",
                source_arn=pulumi.Output.concat(self.api.execution_arn, "/*/*"),
                opts=child_opts,
            )
            self.integrations[key] = integration

        # Default stage with auto-deploy
        self.stage = aws.apigatewayv2.Stage(
            f"{name}-stage",
            api_id=self.api.id,
            name=API_STAGE_NAME,
            auto_deploy=True,
            tags=create_tags(namer.environment, f"{api_name}-stage", project=namer.project),
            opts=pulumi.ResourceOptions(
                parent=self,
                depends_on=list(self.routes.values()),
            ),
        )

        self.domain_name = self.api.api_endpoint.apply(normalize_domain)

        self.register_outputs({
            "api_endpoint": self.api.api_endpoint,
            "api_id": self.api.id,
            "domain_name": self.domain_name,
        })

    def get_outputs(self) -> ApiGatewayOutputs:
        """Get API Gateway output values."""
        return ApiGatewayOutputs(
            api_endpoint=self.api.api_endpoint,
            api_id=self.api.id,
            domain_name=self.domain_name,
        )
