"""
Shared test fixtures and configuration for entire test suite.

Provides: public key files, stack config factory, deployer settings
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import pytest

SAMPLE_PUBLIC_KEY = (
    "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIGv1sJ3xQKzB0d3mWb2Yx0oV3n1w8KqfQ0bH6r7c9T2a "
    "operator@workstation"
)


@pytest.fixture
def public_key_file(tmp_path):
    """Write a valid OpenSSH public key and return its path."""
    key_path = tmp_path / "id_ed25519.pub"
    key_path.write_text(SAMPLE_PUBLIC_KEY + "\n", encoding="utf-8")
    return key_path


@pytest.fixture
def make_config(public_key_file):
    """
    Build InfraConfig objects with valid defaults.

    Yields:
        Callable accepting keyword overrides for any InfraConfig field
    """
    from IAC.configs.base import InfraConfig

    def _make(**overrides):
        values = {
            "aws_region": "us-east-1",
            "amazon_linux_ami": "ami-0c02fb55956c7d316",
            "key_name": "test-key",
            "public_key_path": str(public_key_file),
            "bucket_name": "basic-infra-test-bucket-12345",
            "instance_type": "t2.micro",
            "environment": "dev",
        }
        values.update(overrides)
        return InfraConfig(**values)

    yield _make


@pytest.fixture
def deployer_settings(tmp_path):
    """Deployer settings pointing at a temporary work directory."""
    from IAC.configs.settings import DeployerSettings

    return DeployerSettings(
        project_name="basic-aws-infra",
        stack_name="test",
        work_dir=tmp_path,
        aws_region="us-east-1",
    )
