"""
Base configuration dataclass for stack settings.

Provides type-safe configuration structure loaded from Pulumi stack configs.
"""

import ipaddress
import re
from dataclasses import dataclass

from IAC.configs.constants import (
    BUCKET_NAME_FORBIDDEN_PREFIXES,
    BUCKET_NAME_FORBIDDEN_SUFFIXES,
    BUCKET_NAME_MAX_LENGTH,
    BUCKET_NAME_MIN_LENGTH,
)
from IAC.errors import ConfigurationError

_BUCKET_NAME_PATTERN = re.compile(r"^[a-z0-9][a-z0-9.-]*[a-z0-9]$")


def validate_bucket_name(bucket_name: str) -> str:
    """
    Check a bucket name against the S3 general purpose bucket naming rules.

    Global uniqueness is only known to AWS and is reported at apply time.

    Args:
        bucket_name: Candidate bucket name

    Returns:
        The bucket name, unchanged

    Raises:
        ConfigurationError: If the name breaks a naming rule
    """
    length = len(bucket_name)
    if not BUCKET_NAME_MIN_LENGTH <= length <= BUCKET_NAME_MAX_LENGTH:
        raise ConfigurationError(
            f"bucket_name must be {BUCKET_NAME_MIN_LENGTH}-{BUCKET_NAME_MAX_LENGTH} "
            f"characters long, got {length}: {bucket_name!r}"
        )
    if not _BUCKET_NAME_PATTERN.match(bucket_name):
        raise ConfigurationError(
            "bucket_name may only contain lowercase letters, digits, dots and hyphens, "
            f"and must begin and end with a letter or digit: {bucket_name!r}"
        )
    if ".." in bucket_name:
        raise ConfigurationError(f"bucket_name must not contain '..': {bucket_name!r}")

    try:
        ipaddress.IPv4Address(bucket_name)
    except ValueError:
        pass
    else:
        raise ConfigurationError(f"bucket_name must not be an IP address: {bucket_name!r}")

    if bucket_name.startswith(BUCKET_NAME_FORBIDDEN_PREFIXES):
        raise ConfigurationError(f"bucket_name uses a reserved prefix: {bucket_name!r}")
    if bucket_name.endswith(BUCKET_NAME_FORBIDDEN_SUFFIXES):
        raise ConfigurationError(f"bucket_name uses a reserved suffix: {bucket_name!r}")
    return bucket_name


@dataclass(frozen=True)
class InfraConfig:
    """
    Stack configuration for the basic AWS infrastructure.

    Attributes:
        aws_region: AWS region to deploy into
        amazon_linux_ami: AMI ID for the EC2 instance (must exist in aws_region)
        key_name: Name of the EC2 key pair to create
        public_key_path: Local path of the OpenSSH public key to import
        bucket_name: S3 bucket name (globally unique)
        instance_type: EC2 instance type
        environment: Deployment environment used in names and tags
    """
    aws_region: str
    amazon_linux_ami: str
    key_name: str
    public_key_path: str
    bucket_name: str
    instance_type: str
    environment: str

    def __post_init__(self) -> None:
        validate_bucket_name(self.bucket_name)
        if not self.amazon_linux_ami.startswith("ami-"):
            raise ConfigurationError(
                f"amazon_linux_ami must be an AMI ID (ami-...), got {self.amazon_linux_ami!r}"
            )
        if not self.key_name.strip():
            raise ConfigurationError("key_name must not be empty")
