"""
Pulumi program entry point for serverless-site infrastructure.

Instantiates the selected declarations in dependency order:
1. Configuration (validated before any resource is registered)
2. Backend: IAM role -> Lambda functions -> API Gateway
3. Frontend: S3 bucket -> CloudFront (proxying /api/* to the backend)

deploy_target selects what this stack owns:
- all:      both declarations; the API domain flows straight into CloudFront
- backend:  API only; hand `api_domain_name` to the frontend stack
- frontend: CDN only; `backend_domain_name` must be set in stack config
"""

import pulumi

from infra.configs.environment import get_config
from infra.observability.logger import configure_logging
from infra.stacks.backend import deploy_backend
from infra.stacks.frontend import deploy_frontend
from infra.utils.naming import ResourceNamer
from infra.utils.outputs import write_outputs_to_env


def main() -> None:
    """Deploy serverless-site infrastructure."""
    configure_logging()

    # Load configuration
    config = get_config()
    namer = ResourceNamer(project=config.project, environment=config.environment)

    outputs: dict[str, pulumi.Output[str]] = {}
    backend_domain_name: pulumi.Input[str] | None = config.backend_domain_name

    # --- Backend: API surface ---
    if config.deploys_backend:
        backend = deploy_backend(config, namer)
        outputs.update(backend.exports())
        backend_domain_name = backend.api_domain_name

    # --- Frontend: delivery ---
    if config.deploys_frontend:
        if config.deploy_target == "all" and config.backend_domain_name:
            pulumi.log.warn(
                "backend_domain_name is ignored when deploy_target is 'all'; "
                "CloudFront uses the API deployed in this stack"
            )
        frontend = deploy_frontend(config, namer, backend_domain_name)
        outputs.update(frontend.exports())

    # Write outputs to .env file for local development
    write_outputs_to_env(outputs, "infrastructure.env")

    # Export to Pulumi stack
    for key, value in outputs.items():
        pulumi.export(key, value)

    pulumi.log.info(f"✓ {config.deploy_target} deployment declared for {config.environment}")


# Execute
main()
