"""
Base configuration dataclass for environment settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from infra.configs.constants import LAMBDA_DEFAULTS, PRICE_CLASS_DEFAULT, PROJECT_NAME

if TYPE_CHECKING:
    from infra.models.lambda_function import LambdaFunctionSpec


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        environment: Deployment environment (dev, staging, prod)
        deploy_target: Which declaration(s) to deploy: all, backend or frontend
        artifact_bucket: Bucket holding Lambda deployment packages
        lambda_functions: Function descriptors keyed by logical name
        backend_domain_name: API domain proxied by CloudFront (frontend-only deploys)
        project: Project identifier used in resource names
        price_class: CloudFront price class
        log_retention_days: Retention for Lambda log groups
        cors_allow_origins: Origins allowed by the HTTP API CORS config
        spa_fallback: Serve index.html for S3 403/404 responses
    """
    environment: str
    deploy_target: str = "all"
    artifact_bucket: str | None = None
    lambda_functions: dict[str, "LambdaFunctionSpec"] = field(default_factory=dict)
    backend_domain_name: str | None = None
    project: str = PROJECT_NAME
    price_class: str = PRICE_CLASS_DEFAULT
    log_retention_days: int = LAMBDA_DEFAULTS["log_retention_days"]
    cors_allow_origins: tuple[str, ...] = ("*",)
    spa_fallback: bool = False

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def deploys_backend(self) -> bool:
        """Check if the API surface is part of this stack."""
        return self.deploy_target in ("all", "backend")

    @property
    def deploys_frontend(self) -> bool:
        """Check if the delivery layer is part of this stack."""
        return self.deploy_target in ("all", "frontend")
