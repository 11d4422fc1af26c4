"""
Stack configuration loader.

Loads and validates configuration from Pulumi stack config files.
"""

import pulumi

from IAC.configs.base import InfraConfig
from IAC.configs.constants import (
    DEFAULT_AMI,
    DEFAULT_ENVIRONMENT,
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_KEY_NAME,
    DEFAULT_PUBLIC_KEY_PATH,
    DEFAULT_REGION,
)


def get_config() -> InfraConfig:
    """
    Load stack configuration from Pulumi stack config.

    The region falls back to the provider's ``aws:region`` setting before
    the built-in default.

    Returns:
        InfraConfig: Validated configuration object

    Raises:
        pulumi.ConfigMissingError: If bucket_name is not set
        ConfigurationError: If a value breaks a validation rule
    """
    config = pulumi.Config()
    aws_config = pulumi.Config("aws")

    return InfraConfig(
        aws_region=config.get("aws_region") or aws_config.get("region") or DEFAULT_REGION,
        amazon_linux_ami=config.get("amazon_linux_ami") or DEFAULT_AMI,
        key_name=config.get("key_name") or DEFAULT_KEY_NAME,
        public_key_path=config.get("public_key_path") or DEFAULT_PUBLIC_KEY_PATH,
        bucket_name=config.require("bucket_name"),
        instance_type=config.get("instance_type") or DEFAULT_INSTANCE_TYPE,
        environment=config.get("environment") or DEFAULT_ENVIRONMENT,
    )
