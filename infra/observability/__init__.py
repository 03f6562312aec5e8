"""
Observability helpers for the Pulumi program.
"""

from infra.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
