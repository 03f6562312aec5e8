"""
Lambda functions component for the backend API.

Fans out one function per catalog entry. For each logical name it creates:
- CloudWatch log group (/aws/lambda/<function-name>) with bounded retention
- Lambda function packaged as a zip at s3://<artifact-bucket>/<name>/<artifact_key>

Every resource is keyed by the logical name, so dropping an entry from the
catalog removes only that function's resources.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from infra.models.lambda_function import LambdaFunctionSpec
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags


@dataclass
class LambdaOutputs:
    """Output values from Lambda component."""
    function_arns: dict[str, pulumi.Output[str]]
    function_names: dict[str, pulumi.Output[str]]
    invoke_arns: dict[str, pulumi.Output[str]]


class LambdaFunctionsComponent(pulumi.ComponentResource):
    """
    Zip-packaged Lambda functions sourced from a shared artifact bucket.

    The artifact objects must already exist; a missing object fails the
    function create/update at apply time.
    """

    def __init__(
        self,
        name: str,
        namer: ResourceNamer,
        functions: dict[str, LambdaFunctionSpec],
        artifact_bucket: pulumi.Input[str],
        role_arn: pulumi.Input[str],
        log_retention_days: int,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:LambdaFunctions", name, None, opts)

        self.log_groups: dict[str, aws.cloudwatch.LogGroup] = {}
        self.functions: dict[str, aws.lambda_.Function] = {}

        for key, spec in functions.items():
            function_name = namer.function_name(key)
            tags = create_tags(namer.environment, function_name, project=namer.project, Function=key)

            # Created up front so retention applies from the first invocation
            log_group = aws.cloudwatch.LogGroup(
                f"{name}-{key}-logs",
                name=namer.log_group_name(key),
                retention_in_days=log_retention_days,
                tags=tags,
                opts=pulumi.ResourceOptions(parent=self),
            )

            self.functions[key] = aws.lambda_.Function(
                f"{name}-{key}-function",
                name=function_name,
                role=role_arn,
                handler=spec.handler,
                runtime=spec.runtime,
                s3_bucket=artifact_bucket,
                s3_key=spec.artifact_path(key),
                memory_size=spec.memory_size,
                timeout=spec.timeout,
                environment=aws.lambda_.FunctionEnvironmentArgs(
                    variables={
                        "ENVIRONMENT": namer.environment,
                        "FUNCTION_KEY": key,
                        **spec.environment,
                    },
                ),
                tags=tags,
                opts=pulumi.ResourceOptions(
                    parent=self,
                    depends_on=[log_group],
                ),
            )
            self.log_groups[key] = log_group

        self.register_outputs({
            "function_arns": {key: fn.arn for key, fn in self.functions.items()},
            "function_names": {key: fn.name for key, fn in self.functions.items()},
        })

    def get_outputs(self) -> LambdaOutputs:
        """Get Lambda output values."""
        return LambdaOutputs(
            function_arns={key: fn.arn for key, fn in self.functions.items()},
            function_names={key: fn.name for key, fn in self.functions.items()},
            invoke_arns={key: fn.invoke_arn for key, fn in self.functions.items()},
        )
