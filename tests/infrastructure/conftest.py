"""Pytest fixtures for infrastructure tests."""

import sys
from pathlib import Path

import pulumi
import pytest


@pytest.fixture(scope="session", autouse=True)
def add_infra_to_path():
    """Add project root to Python path for imports."""
    project_root = Path(__file__).parent.parent.parent
    sys.path.insert(0, str(project_root))
    yield
    # Cleanup
    sys.path.remove(str(project_root))


@pytest.fixture
def infra_project_root():
    """Return the infra package directory."""
    return Path(__file__).parent.parent.parent / "infra"


@pytest.fixture
def python_files_in_infra(infra_project_root):
    """Return all Python files in the infra package."""
    return [f for f in infra_project_root.rglob("*.py") if "__pycache__" not in str(f)]


class InfraMocks(pulumi.runtime.Mocks):
    """
    Echo resource inputs back as outputs, adding the computed attributes
    the components read (ARNs, endpoints, domain names).
    """

    def __init__(self) -> None:
        self.resources: list[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)
        outputs.setdefault("arn", f"arn:aws:mock:us-east-1:123456789012:{args.name}")

        if args.typ == "aws:apigatewayv2/api:Api":
            outputs["apiEndpoint"] = f"https://{args.name}.execute-api.us-east-1.amazonaws.com"
            outputs["executionArn"] = f"arn:aws:execute-api:us-east-1:123456789012:{args.name}"
        elif args.typ == "aws:lambda/function:Function":
            outputs["invokeArn"] = (
                "arn:aws:apigateway:us-east-1:lambda:path/2015-03-31/functions/"
                f"{outputs['arn']}/invocations"
            )
        elif args.typ == "aws:cloudfront/distribution:Distribution":
            outputs["arn"] = f"arn:aws:cloudfront::123456789012:distribution/{args.name}"
            outputs["domainName"] = f"{args.name}.cloudfront.net"
        elif args.typ == "aws:s3/bucket:Bucket":
            bucket = args.inputs.get("bucket", args.name)
            outputs["arn"] = f"arn:aws:s3:::{bucket}"
            outputs["bucketRegionalDomainName"] = f"{bucket}.s3.us-east-1.amazonaws.com"

        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


@pytest.fixture
def pulumi_mocks():
    """Route resource registrations to in-memory mocks."""
    mocks = InfraMocks()
    pulumi.runtime.set_mocks(mocks, project="serverless-site", stack="test", preview=False)
    return mocks


@pytest.fixture
def raw_lambda_functions():
    """Descriptor map as it appears in stack config."""
    return {
        "hello": {
            "handler": "app.handler",
            "artifact_key": "v0.1.0.zip",
            "route_key": "GET /api/hello",
        },
        "items": {
            "handler": "items.handler",
            "runtime": "python3.11",
            "artifact_key": "v0.1.0.zip",
            "route_key": "POST /api/items",
            "memory_size": 256,
            "timeout": 10,
        },
        "health": {
            "handler": "health.handler",
            "artifact_key": "build-42.zip",
            "route_key": "ANY /api/health",
            "integration_method": "post",
        },
    }


@pytest.fixture
def lambda_specs(raw_lambda_functions):
    """Validated descriptors."""
    from infra.models.lambda_function import parse_lambda_functions

    return parse_lambda_functions(raw_lambda_functions)


@pytest.fixture
def env_config(lambda_specs):
    """Configuration deploying both declarations in dev."""
    from infra.configs.base import EnvironmentConfig

    return EnvironmentConfig(
        environment="dev",
        deploy_target="all",
        artifact_bucket="serverless-site-artifacts",
        lambda_functions=lambda_specs,
    )


@pytest.fixture
def namer():
    """ResourceNamer for the dev environment."""
    from infra.utils.naming import ResourceNamer

    return ResourceNamer(project="serverless-site", environment="dev")
