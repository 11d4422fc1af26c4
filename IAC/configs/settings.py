"""
Operator tooling settings.

Settings for the CLI and the Automation API deployer, read from INFRA_*
environment variables or a local .env file.

Dependencies: pydantic_settings
System role: Configuration for code that runs outside the Pulumi program
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from IAC.configs.constants import DEFAULT_REGION, PROJECT_NAME

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class DeployerSettings(BaseSettings):
    """Settings for driving Pulumi stacks from Python."""

    model_config = SettingsConfigDict(
        env_prefix="INFRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    project_name: str = Field(
        default=PROJECT_NAME,
        description="Pulumi project name",
    )
    stack_name: str = Field(
        default="dev",
        description="Pulumi stack to operate on",
    )
    work_dir: Path = Field(
        default=PROJECT_ROOT,
        description="Directory holding Pulumi.yaml and the stack config files",
    )
    backend_url: Optional[str] = Field(
        default=None,
        description="State backend URL (s3://..., file://...); Pulumi Cloud when unset",
    )
    aws_region: str = Field(
        default=DEFAULT_REGION,
        description="Region used for credential checks and new stacks",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )


@lru_cache
def get_settings() -> DeployerSettings:
    """Get cached deployer settings."""
    return DeployerSettings()
