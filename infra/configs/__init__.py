"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
Load stack values with infra.configs.environment.get_config().
"""

from infra.configs.base import EnvironmentConfig
from infra.configs.constants import (
    DEFAULT_TAGS,
    LAMBDA_DEFAULTS,
    PROJECT_NAME,
)

__all__ = [
    "EnvironmentConfig",
    "DEFAULT_TAGS",
    "LAMBDA_DEFAULTS",
    "PROJECT_NAME",
]
