"""
Unit tests for stack configuration loading and validation.

Covers: S3 bucket naming rules, InfraConfig validation, get_config defaults
and overrides, operator settings.
"""

import pytest

from IAC.configs.base import validate_bucket_name
from IAC.configs.constants import (
    DEFAULT_AMI,
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_KEY_NAME,
    DEFAULT_PUBLIC_KEY_PATH,
    DEFAULT_REGION,
)
from IAC.errors import ConfigurationError


class FakeConfig:
    """Stand-in for pulumi.Config backed by a dict per namespace."""

    values: dict[str, dict[str, str]] = {}

    def __init__(self, name: str | None = None):
        self._values = self.values.get(name or "project", {})

    def get(self, key):
        return self._values.get(key)

    def require(self, key):
        if key not in self._values:
            raise KeyError(f"missing required configuration variable '{key}'")
        return self._values[key]


@pytest.fixture
def fake_pulumi_config(monkeypatch):
    """Patch pulumi.Config in the loader and return the backing dict."""
    from IAC.configs import environment

    values: dict[str, dict[str, str]] = {"project": {}, "aws": {}}
    monkeypatch.setattr(FakeConfig, "values", values)
    monkeypatch.setattr(environment.pulumi, "Config", FakeConfig)
    return values


class TestBucketNameValidation:
    """S3 general purpose bucket naming rules."""

    @pytest.mark.parametrize(
        "name",
        ["abc", "my-bucket", "my.bucket.name", "bucket-123", "a" * 63, "1bucket"],
    )
    def test_valid_names(self, name):
        assert validate_bucket_name(name) == name

    @pytest.mark.parametrize(
        "name, reason",
        [
            ("ab", "too short"),
            ("a" * 64, "too long"),
            ("My-Bucket", "uppercase"),
            ("my_bucket", "underscore"),
            ("-bucket", "leading hyphen"),
            ("bucket-", "trailing hyphen"),
            ("my..bucket", "adjacent dots"),
            ("192.168.5.4", "ip address"),
            ("xn--bucket", "reserved prefix"),
            ("bucket-s3alias", "reserved suffix"),
        ],
    )
    def test_invalid_names(self, name, reason):
        with pytest.raises(ConfigurationError):
            validate_bucket_name(name)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_bucket_name("UPPER")


class TestInfraConfig:
    """InfraConfig construction checks."""

    def test_valid_config(self, make_config):
        config = make_config()

        assert config.aws_region == "us-east-1"
        assert config.environment == "dev"

    def test_rejects_bad_bucket_name(self, make_config):
        with pytest.raises(ConfigurationError, match="bucket_name"):
            make_config(bucket_name="Not_Valid")

    def test_rejects_non_ami_id(self, make_config):
        with pytest.raises(ConfigurationError, match="amazon_linux_ami"):
            make_config(amazon_linux_ami="amzn2-ami-hvm")

    def test_rejects_blank_key_name(self, make_config):
        with pytest.raises(ConfigurationError, match="key_name"):
            make_config(key_name="  ")

    def test_is_frozen(self, make_config):
        config = make_config()
        with pytest.raises(Exception):
            config.bucket_name = "other-bucket"


class TestGetConfig:
    """Loading InfraConfig from Pulumi stack config."""

    def test_defaults_apply_when_only_bucket_is_set(self, fake_pulumi_config):
        from IAC.configs.environment import get_config

        fake_pulumi_config["project"]["bucket_name"] = "only-the-bucket"

        config = get_config()

        assert config.aws_region == DEFAULT_REGION
        assert config.amazon_linux_ami == DEFAULT_AMI
        assert config.key_name == DEFAULT_KEY_NAME
        assert config.public_key_path == DEFAULT_PUBLIC_KEY_PATH
        assert config.instance_type == DEFAULT_INSTANCE_TYPE
        assert config.environment == "dev"
        assert config.bucket_name == "only-the-bucket"

    def test_bucket_name_is_required(self, fake_pulumi_config):
        from IAC.configs.environment import get_config

        with pytest.raises(KeyError, match="bucket_name"):
            get_config()

    def test_region_falls_back_to_provider_region(self, fake_pulumi_config):
        from IAC.configs.environment import get_config

        fake_pulumi_config["project"]["bucket_name"] = "region-bucket"
        fake_pulumi_config["aws"]["region"] = "eu-west-1"

        assert get_config().aws_region == "eu-west-1"

    def test_explicit_values_override_defaults(self, fake_pulumi_config):
        from IAC.configs.environment import get_config

        fake_pulumi_config["project"].update({
            "bucket_name": "override-bucket",
            "aws_region": "us-west-2",
            "amazon_linux_ami": "ami-0abcdef1234567890",
            "key_name": "ops-key",
            "public_key_path": "/keys/ops.pub",
            "instance_type": "t3.micro",
            "environment": "prod",
        })
        fake_pulumi_config["aws"]["region"] = "eu-west-1"

        config = get_config()

        assert config.aws_region == "us-west-2"
        assert config.amazon_linux_ami == "ami-0abcdef1234567890"
        assert config.key_name == "ops-key"
        assert config.public_key_path == "/keys/ops.pub"
        assert config.instance_type == "t3.micro"
        assert config.environment == "prod"


class TestDeployerSettings:
    """Operator settings from the environment."""

    def test_defaults(self, monkeypatch, tmp_path):
        from IAC.configs.settings import DeployerSettings

        monkeypatch.chdir(tmp_path)
        for var in ["INFRA_STACK_NAME", "INFRA_BACKEND_URL", "INFRA_LOG_LEVEL"]:
            monkeypatch.delenv(var, raising=False)

        settings = DeployerSettings()

        assert settings.project_name == "basic-aws-infra"
        assert settings.stack_name == "dev"
        assert settings.backend_url is None
        assert settings.log_level == "INFO"

    def test_env_prefix(self, monkeypatch, tmp_path):
        from IAC.configs.settings import DeployerSettings

        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("INFRA_STACK_NAME", "prod")
        monkeypatch.setenv("INFRA_BACKEND_URL", "s3://state-bucket")

        settings = DeployerSettings()

        assert settings.stack_name == "prod"
        assert settings.backend_url == "s3://state-bucket"
