"""
Environment configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import re

import pulumi

from infra.configs.base import EnvironmentConfig
from infra.configs.constants import (
    DEPLOY_TARGETS,
    LAMBDA_DEFAULTS,
    LAMBDA_FUNCTION_NAME_MAX_LENGTH,
    PRICE_CLASS_DEFAULT,
    PROJECT_NAME,
)
from infra.exceptions import ConfigurationError
from infra.models.lambda_function import parse_lambda_functions
from infra.observability.logger import get_logger
from infra.utils.naming import ResourceNamer, normalize_domain

logger = get_logger(__name__)

# Environment names end up in bucket names: lowercase, digits, hyphens
ENVIRONMENT_PATTERN = re.compile(r"^[a-z0-9][a-z0-9-]{0,19}$")


def validate_config(config: EnvironmentConfig) -> EnvironmentConfig:
    """
    Check cross-field rules that the stack YAML schema cannot express.

    Args:
        config: Configuration assembled from stack values

    Returns:
        The same configuration, unchanged

    Raises:
        ConfigurationError: If a rule is violated
    """
    if not ENVIRONMENT_PATTERN.match(config.environment):
        raise ConfigurationError(
            f"Invalid environment name {config.environment!r}: "
            "use up to 20 lowercase letters, digits or hyphens",
            field="environment",
        )

    if config.deploy_target not in DEPLOY_TARGETS:
        raise ConfigurationError(
            f"deploy_target must be one of {', '.join(DEPLOY_TARGETS)}",
            field="deploy_target",
            details={"value": config.deploy_target},
        )

    if config.deploys_backend and not config.artifact_bucket:
        raise ConfigurationError(
            "artifact_bucket is required when deploying the backend",
            field="artifact_bucket",
        )

    # With "all" the domain comes from the backend deployed alongside
    if config.deploy_target == "frontend" and not config.backend_domain_name:
        raise ConfigurationError(
            "backend_domain_name is required when deploying only the frontend",
            field="backend_domain_name",
        )

    if config.log_retention_days < 1:
        raise ConfigurationError(
            "log_retention_days must be positive",
            field="log_retention_days",
        )

    if config.deploys_backend:
        namer = ResourceNamer(project=config.project, environment=config.environment)
        too_long = sorted(
            key for key in config.lambda_functions
            if len(namer.function_name(key)) > LAMBDA_FUNCTION_NAME_MAX_LENGTH
        )
        if too_long:
            raise ConfigurationError(
                f"Function names for {', '.join(too_long)} exceed "
                f"{LAMBDA_FUNCTION_NAME_MAX_LENGTH} characters; shorten the logical names",
                field="lambda_functions",
                details={"functions": too_long},
            )

    return config


def get_config() -> EnvironmentConfig:
    """
    Load environment configuration from Pulumi stack config.

    Returns:
        EnvironmentConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If required config values are missing
        ConfigurationError: If values are present but inconsistent
    """
    config = pulumi.Config()

    backend_domain = config.get("backend_domain_name")
    cors_origins = config.get_object("cors_allow_origins") or ["*"]

    env_config = EnvironmentConfig(
        environment=config.require("environment"),
        deploy_target=config.get("deploy_target") or "all",
        artifact_bucket=config.get("artifact_bucket"),
        lambda_functions=parse_lambda_functions(config.get_object("lambda_functions")),
        backend_domain_name=normalize_domain(backend_domain) if backend_domain else None,
        project=config.get("project") or PROJECT_NAME,
        price_class=config.get("price_class") or PRICE_CLASS_DEFAULT,
        log_retention_days=config.get_int("log_retention_days") or LAMBDA_DEFAULTS["log_retention_days"],
        cors_allow_origins=tuple(cors_origins),
        spa_fallback=config.get_bool("spa_fallback") or False,
    )

    logger.info(
        "Loaded config for environment=%s deploy_target=%s",
        env_config.environment,
        env_config.deploy_target,
    )
    return validate_config(env_config)
