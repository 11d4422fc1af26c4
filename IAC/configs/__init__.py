"""
Configuration module for Pulumi infrastructure.

Provides type-safe configuration loading from Pulumi stack config files.
"""

from IAC.configs.base import InfraConfig, validate_bucket_name
from IAC.configs.environment import get_config
from IAC.configs.constants import (
    ANYWHERE_CIDR,
    DEFAULT_TAGS,
    PORTS,
    USER_DATA,
)

__all__ = [
    "InfraConfig",
    "validate_bucket_name",
    "get_config",
    "ANYWHERE_CIDR",
    "DEFAULT_TAGS",
    "PORTS",
    "USER_DATA",
]
