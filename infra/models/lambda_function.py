"""
Function descriptor schema.

A descriptor describes one deployable Lambda: its entrypoint, runtime,
artifact location and the HTTP route that invokes it. Descriptors are
supplied as a map keyed by logical name; the key is reused for resource
names, the artifact path and the invoke permission statement ID.

Dependencies: pydantic
System role: Stack config contract for the backend fan-out
"""

import re
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    RootModel,
    StringConstraints,
    ValidationError,
    field_validator,
)

from infra.configs.constants import LAMBDA_DEFAULTS, ROUTE_METHODS
from infra.exceptions import ConfigurationError, DuplicateRouteError
from infra.observability.logger import get_logger

logger = get_logger(__name__)

ROUTE_KEY_PATTERN = re.compile(rf"^({'|'.join(ROUTE_METHODS)}) (/\S*)$")

# Length is bounded in validate_config, where the full function name is known
LogicalName = Annotated[str, StringConstraints(pattern=r"^[A-Za-z0-9_-]+$", min_length=1)]


class LambdaFunctionSpec(BaseModel):
    """Descriptor for one Lambda function and its HTTP route."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    handler: str = Field(min_length=1, description="Entrypoint, e.g. 'app.handler'")
    runtime: str = Field(default=LAMBDA_DEFAULTS["runtime"], min_length=1)
    artifact_key: str = Field(
        min_length=1,
        description="Artifact identifier inside the function's folder of the artifact bucket",
    )
    route_key: str = Field(description="'<METHOD> /<path>' dispatched to this function")
    memory_size: int = Field(default=LAMBDA_DEFAULTS["memory_mb"], ge=128, le=10240)
    timeout: int = Field(default=LAMBDA_DEFAULTS["timeout_seconds"], ge=1, le=900)
    integration_method: str = Field(default=LAMBDA_DEFAULTS["integration_method"])
    environment: dict[str, str] = Field(default_factory=dict)

    @field_validator("route_key")
    @classmethod
    def _check_route_key(cls, value: str) -> str:
        if not ROUTE_KEY_PATTERN.match(value):
            raise ValueError(
                f"route_key must look like '<METHOD> /<path>' with METHOD in "
                f"{', '.join(ROUTE_METHODS)}; got {value!r}"
            )
        return value

    @field_validator("integration_method")
    @classmethod
    def _check_integration_method(cls, value: str) -> str:
        value = value.upper()
        if value not in ROUTE_METHODS:
            raise ValueError(f"unsupported integration_method {value!r}")
        return value

    @field_validator("artifact_key")
    @classmethod
    def _check_artifact_key(cls, value: str) -> str:
        return value.lstrip("/")

    @property
    def method(self) -> str:
        """HTTP method part of the route key."""
        return self.route_key.split(" ", 1)[0]

    @property
    def path(self) -> str:
        """Path part of the route key."""
        return self.route_key.split(" ", 1)[1]

    def artifact_path(self, name: str) -> str:
        """
        S3 object key of this function's deployment package.

        Args:
            name: Logical name of the function in the catalog

        Returns:
            Object key in the shared artifact bucket
        """
        return f"{name}/{self.artifact_key}"


class LambdaFunctionCatalog(RootModel[dict[LogicalName, LambdaFunctionSpec]]):
    """Mapping of logical function name to descriptor."""

    def duplicate_routes(self) -> dict[str, list[str]]:
        """Return route keys declared by more than one function."""
        owners: dict[str, list[str]] = {}
        for name, spec in self.root.items():
            owners.setdefault(spec.route_key, []).append(name)
        return {route: names for route, names in owners.items() if len(names) > 1}


def parse_lambda_functions(raw: dict[str, Any] | None) -> dict[str, LambdaFunctionSpec]:
    """
    Validate the `lambda_functions` config value.

    Args:
        raw: Mapping loaded from stack config (None is treated as empty)

    Returns:
        Validated descriptors keyed by logical name

    Raises:
        ConfigurationError: If any descriptor fails schema validation
        DuplicateRouteError: If two descriptors declare the same route key
    """
    try:
        catalog = LambdaFunctionCatalog.model_validate(raw or {})
    except ValidationError as exc:
        raise ConfigurationError(
            "Invalid lambda_functions configuration",
            field="lambda_functions",
            details={"errors": exc.errors(include_url=False, include_input=False, include_context=False)},
        ) from exc

    duplicates = catalog.duplicate_routes()
    if duplicates:
        raise DuplicateRouteError(duplicates)

    if not catalog.root:
        logger.warning("No lambda_functions configured; the API will have no routes")
    else:
        logger.info("Loaded %d function descriptor(s): %s", len(catalog.root), ", ".join(sorted(catalog.root)))
    return dict(catalog.root)
