"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, and output utilities.
"""

from infra.utils.naming import ResourceNamer, normalize_domain
from infra.utils.tags import create_tags
from infra.utils.outputs import format_env_lines, write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "normalize_domain",
    "create_tags",
    "format_env_lines",
    "write_outputs_to_env",
]
