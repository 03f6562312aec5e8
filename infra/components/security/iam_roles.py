"""
IAM roles component for the backend Lambda functions.

Creates:
- Lambda execution role shared by every function in the catalog
- AWSLambdaBasicExecutionRole attachment (CloudWatch Logs write access)
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from infra.configs.constants import LAMBDA_BASIC_EXECUTION_POLICY_ARN
from infra.utils.naming import ResourceNamer
from infra.utils.tags import create_tags


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    lambda_role_arn: pulumi.Output[str]
    lambda_role_name: pulumi.Output[str]


def lambda_assume_role_policy() -> str:
    """Trust policy letting the Lambda service assume the execution role."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": "lambda.amazonaws.com"},
            "Action": "sts:AssumeRole",
        }],
    })


class IamRolesComponent(pulumi.ComponentResource):
    """
    Execution role for the backend Lambda functions.

    Functions only need to write their own logs; invoke rights for
    API Gateway are granted per function by resource-based permissions.
    """

    def __init__(
        self,
        name: str,
        namer: ResourceNamer,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        role_name = namer.name("lambda-role")

        self.lambda_role = aws.iam.Role(
            f"{name}-lambda-role",
            name=role_name,
            assume_role_policy=lambda_assume_role_policy(),
            tags=create_tags(namer.environment, role_name, project=namer.project),
            opts=child_opts,
        )

        self.basic_execution = aws.iam.RolePolicyAttachment(
            f"{name}-lambda-basic-execution",
            role=self.lambda_role.name,
            policy_arn=LAMBDA_BASIC_EXECUTION_POLICY_ARN,
            opts=child_opts,
        )

        self.register_outputs({
            "lambda_role_arn": self.lambda_role.arn,
            "lambda_role_name": self.lambda_role.name,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            lambda_role_arn=self.lambda_role.arn,
            lambda_role_name=self.lambda_role.name,
        )
