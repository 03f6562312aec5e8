"""
Tests for the Lambda execution role.
"""

import json

import pulumi

from infra.components.security.iam_roles import IamRolesComponent, lambda_assume_role_policy
from infra.configs.constants import LAMBDA_BASIC_EXECUTION_POLICY_ARN


def test_assume_role_policy_trusts_lambda_only():
    """Only the Lambda service may assume the execution role."""
    policy = json.loads(lambda_assume_role_policy())
    (statement,) = policy["Statement"]

    assert statement["Principal"] == {"Service": "lambda.amazonaws.com"}
    assert statement["Action"] == "sts:AssumeRole"


def test_role_gets_basic_execution_policy(pulumi_mocks, namer):
    """The shared role should carry the managed logging policy."""
    @pulumi.runtime.test
    def check_role():
        roles = IamRolesComponent(name="serverless-site-dev-backend", namer=namer)

        def check(args):
            role_name, attached_role, policy_arn = args
            assert role_name == "serverless-site-dev-lambda-role"
            assert attached_role == role_name
            assert policy_arn == LAMBDA_BASIC_EXECUTION_POLICY_ARN

        return pulumi.Output.all(
            roles.lambda_role.name,
            roles.basic_execution.role,
            roles.basic_execution.policy_arn,
        ).apply(check)

    check_role()
