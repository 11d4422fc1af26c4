"""
Infrastructure constants for the basic AWS stack.

Contains default variable values, port numbers, CIDR blocks, and the boot script.
"""

from typing import Final

# Variable defaults (overridable per stack via `pulumi config set`)
DEFAULT_REGION: Final[str] = "us-east-1"
DEFAULT_AMI: Final[str] = "ami-0c02fb55956c7d316"  # Amazon Linux 2 (us-east-1)
DEFAULT_KEY_NAME: Final[str] = "basic-infra-key"
DEFAULT_PUBLIC_KEY_PATH: Final[str] = "~/.ssh/id_rsa.pub"
DEFAULT_INSTANCE_TYPE: Final[str] = "t2.micro"
DEFAULT_ENVIRONMENT: Final[str] = "dev"

PROJECT_NAME: Final[str] = "basic-aws-infra"

# Open to the internet
ANYWHERE_CIDR: Final[str] = "0.0.0.0/0"

# Port configurations
PORTS: Final[dict[str, int]] = {
    "ssh": 22,
    "http": 80,
}

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "Project": PROJECT_NAME,
    "ManagedBy": "pulumi",
}

# Runs once at first boot
USER_DATA: Final[str] = """#!/bin/bash
yum update -y
"""

# S3 bucket naming limits
BUCKET_NAME_MIN_LENGTH: Final[int] = 3
BUCKET_NAME_MAX_LENGTH: Final[int] = 63
BUCKET_NAME_FORBIDDEN_PREFIXES: Final[tuple[str, ...]] = ("xn--", "sthree-")
BUCKET_NAME_FORBIDDEN_SUFFIXES: Final[tuple[str, ...]] = ("-s3alias", "--ol-s3")
