"""
Tests for configuration loading and validation.

get_config() is exercised against a stand-in for pulumi.Config so no
engine or stack file is needed.
"""

import json
from dataclasses import is_dataclass, replace

import pytest

from infra.configs import environment as environment_module
from infra.configs.base import EnvironmentConfig
from infra.configs.environment import get_config, validate_config
from infra.exceptions import ConfigurationError, DuplicateRouteError


class FakeConfig:
    """Minimal pulumi.Config replacement backed by a dict of strings."""

    values: dict[str, str] = {}

    def __init__(self, name: str | None = None) -> None:
        self.name = name

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def require(self, key: str) -> str:
        if key not in self.values:
            raise KeyError(f"Missing required configuration variable '{key}'")
        return self.values[key]

    def get_object(self, key: str):
        value = self.values.get(key)
        return json.loads(value) if value is not None else None

    def get_int(self, key: str) -> int | None:
        value = self.values.get(key)
        return int(value) if value is not None else None

    def get_bool(self, key: str) -> bool | None:
        value = self.values.get(key)
        return value == "true" if value is not None else None


@pytest.fixture
def stack_config(monkeypatch, raw_lambda_functions):
    """Patch pulumi.Config with a mutable dict of stack values."""
    values = {
        "environment": "dev",
        "artifact_bucket": "serverless-site-artifacts",
        "lambda_functions": json.dumps(raw_lambda_functions),
    }
    monkeypatch.setattr(FakeConfig, "values", values)
    monkeypatch.setattr(environment_module.pulumi, "Config", FakeConfig)
    return values


class TestEnvironmentConfig:
    """Validate the configuration dataclass."""

    def test_environment_config_dataclass(self):
        """EnvironmentConfig should be a frozen dataclass with the expected fields."""
        assert is_dataclass(EnvironmentConfig)

        fields = {f.name for f in EnvironmentConfig.__dataclass_fields__.values()}
        expected_fields = {
            "environment",
            "deploy_target",
            "artifact_bucket",
            "lambda_functions",
            "backend_domain_name",
            "price_class",
            "log_retention_days",
        }
        assert expected_fields.issubset(fields)

    def test_environment_config_properties(self, env_config):
        """Deploy target should drive which declarations are deployed."""
        assert env_config.is_production is False
        assert env_config.deploys_backend is True
        assert env_config.deploys_frontend is True

        backend_only = replace(env_config, deploy_target="backend")
        assert backend_only.deploys_frontend is False

        frontend_only = replace(env_config, deploy_target="frontend")
        assert frontend_only.deploys_backend is False

        assert replace(env_config, environment="prod").is_production is True


class TestValidateConfig:
    """Validate cross-field configuration rules."""

    @pytest.mark.parametrize("environment", ["Dev", "dev_1", "", "-dev", "a" * 21])
    def test_invalid_environment_rejected(self, env_config, environment):
        """Environment names must be usable in bucket names."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(replace(env_config, environment=environment))

        assert exc_info.value.field == "environment"

    def test_unknown_deploy_target_rejected(self, env_config):
        """Only all, backend and frontend are valid targets."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(replace(env_config, deploy_target="everything"))

        assert exc_info.value.field == "deploy_target"

    def test_backend_requires_artifact_bucket(self, env_config):
        """Lambda packages need a bucket to come from."""
        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(replace(env_config, artifact_bucket=None))

        assert exc_info.value.field == "artifact_bucket"

    def test_frontend_only_requires_backend_domain(self, env_config):
        """A standalone frontend must be told where the API lives."""
        config = replace(env_config, deploy_target="frontend", artifact_bucket=None)

        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(config)

        assert exc_info.value.field == "backend_domain_name"

        config = replace(config, backend_domain_name="abc.execute-api.us-east-1.amazonaws.com")
        assert validate_config(config) is config

    def test_valid_config_returned_unchanged(self, env_config):
        """A valid config should pass through."""
        assert validate_config(env_config) is env_config

    def test_function_name_over_lambda_limit_rejected(self, env_config, lambda_specs):
        """Long environment plus long key must fail before the provider sees it."""
        long_key = "k" * 40
        config = replace(
            env_config,
            environment="e" * 20,
            lambda_functions={**lambda_specs, long_key: lambda_specs["hello"]},
        )

        with pytest.raises(ConfigurationError) as exc_info:
            validate_config(config)

        assert exc_info.value.field == "lambda_functions"
        assert exc_info.value.details["functions"] == [long_key]

    def test_function_name_at_lambda_limit_accepted(self, env_config, lambda_specs):
        """serverless-site-dev- leaves 44 characters for the logical name."""
        key = "k" * (64 - len("serverless-site-dev-"))
        config = replace(env_config, lambda_functions={key: lambda_specs["hello"]})

        assert validate_config(config) is config

    def test_function_name_length_ignored_without_backend(self, env_config, lambda_specs):
        """A frontend-only stack declares no functions, so their names cannot fail."""
        config = replace(
            env_config,
            deploy_target="frontend",
            backend_domain_name="abc.execute-api.us-east-1.amazonaws.com",
            lambda_functions={"k" * 60: lambda_specs["hello"]},
        )

        assert validate_config(config) is config


class TestGetConfig:
    """Validate loading from stack config."""

    def test_loads_and_parses_functions(self, stack_config):
        """Descriptor map should be validated into specs."""
        config = get_config()

        assert config.environment == "dev"
        assert config.deploy_target == "all"
        assert config.artifact_bucket == "serverless-site-artifacts"
        assert set(config.lambda_functions) == {"hello", "items", "health"}
        assert config.lambda_functions["hello"].route_key == "GET /api/hello"
        assert config.log_retention_days == 14
        assert config.cors_allow_origins == ("*",)
        assert config.spa_fallback is False

    def test_backend_domain_normalized(self, stack_config):
        """Operator-supplied domains may be pasted as URLs."""
        stack_config.update({
            "deploy_target": "frontend",
            "backend_domain_name": "https://abc123.execute-api.us-east-1.amazonaws.com/",
        })

        config = get_config()

        assert config.backend_domain_name == "abc123.execute-api.us-east-1.amazonaws.com"

    def test_optional_overrides(self, stack_config):
        """Optional keys should override defaults."""
        stack_config.update({
            "project": "docs-site",
            "price_class": "PriceClass_All",
            "log_retention_days": "30",
            "cors_allow_origins": json.dumps(["https://example.com"]),
            "spa_fallback": "true",
        })

        config = get_config()

        assert config.project == "docs-site"
        assert config.price_class == "PriceClass_All"
        assert config.log_retention_days == 30
        assert config.cors_allow_origins == ("https://example.com",)
        assert config.spa_fallback is True

    def test_missing_environment_propagates(self, stack_config):
        """Missing required values should fail before any resource is declared."""
        del stack_config["environment"]

        with pytest.raises(KeyError):
            get_config()

    def test_duplicate_routes_fail_config_load(self, stack_config, raw_lambda_functions):
        """Duplicate routes should surface at preview time."""
        raw_lambda_functions["other"] = dict(raw_lambda_functions["hello"])
        stack_config["lambda_functions"] = json.dumps(raw_lambda_functions)

        with pytest.raises(DuplicateRouteError):
            get_config()
