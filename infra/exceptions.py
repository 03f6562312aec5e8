"""
Exception hierarchy for serverless-site infrastructure.

Raised while loading and validating stack configuration, before any
resource is registered with the Pulumi engine. Provisioning failures
reported by AWS are surfaced by the engine itself.

Dependencies: None
System role: Configuration error reporting
"""

from typing import Any


class InfraException(Exception):
    """Base exception for all infrastructure program errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(InfraException):
    """Raised when stack configuration is missing or inconsistent."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error message
            field: Config key that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        self.field = field
        super().__init__(message, details)


class DuplicateRouteError(ConfigurationError):
    """Raised when descriptors share a route key; reports every clashing group."""

    def __init__(self, duplicates: dict[str, list[str]]) -> None:
        self.duplicates = {route: sorted(names) for route, names in sorted(duplicates.items())}
        self.route_key, self.functions = next(iter(self.duplicates.items()))
        routes = ", ".join(f"'{route}'" for route in self.duplicates)
        super().__init__(
            f"Route key(s) {routes} declared by more than one function",
            field="lambda_functions",
            details={"duplicates": self.duplicates},
        )
