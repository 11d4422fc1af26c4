"""Pulumi Automation API orchestration for the stack lifecycle.

Drives the same project the Pulumi CLI runs (Pulumi.yaml at the repository
root), so `infra plan` and `pulumi preview` are interchangeable.
"""

import os
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Mapping

import boto3
from botocore.exceptions import BotoCoreError, ClientError, NoCredentialsError
from pulumi import automation as auto

from IAC.configs.base import validate_bucket_name
from IAC.configs.constants import (
    DEFAULT_AMI,
    DEFAULT_ENVIRONMENT,
    DEFAULT_INSTANCE_TYPE,
    DEFAULT_KEY_NAME,
    DEFAULT_PUBLIC_KEY_PATH,
)
from IAC.configs.settings import DeployerSettings, get_settings
from IAC.errors import ConfigurationError, CredentialsError, DeployerError
from IAC.observability.logger import get_logger

logger = get_logger(__name__)

OutputCallback = Callable[[str], None]


def qualify_config_key(project_name: str, key: str) -> str:
    """Prefix a bare config key with the project namespace.

    Keys that already carry a namespace (``aws:region``) are returned as-is.
    """
    if ":" in key:
        return key
    return f"{project_name}:{key}"


def parse_config_pairs(pairs: Iterable[str]) -> dict[str, str]:
    """Parse ``key=value`` strings from the command line.

    Args:
        pairs: Strings of the form key=value

    Returns:
        Mapping of key to value; later pairs win

    Raises:
        ConfigurationError: If a pair has no '=' or an empty key
    """
    parsed: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ConfigurationError(f"Expected key=value, got {pair!r}")
        parsed[key] = value
    return parsed


def default_stack_config(settings: DeployerSettings) -> dict[str, str]:
    """Config values written to a new stack, keyed by bare name."""
    return {
        "aws:region": settings.aws_region,
        "aws_region": settings.aws_region,
        "amazon_linux_ami": DEFAULT_AMI,
        "key_name": DEFAULT_KEY_NAME,
        "public_key_path": DEFAULT_PUBLIC_KEY_PATH,
        "instance_type": DEFAULT_INSTANCE_TYPE,
        "environment": DEFAULT_ENVIRONMENT,
    }


def _workspace_options(settings: DeployerSettings) -> auto.LocalWorkspaceOptions:
    env_vars = {
        "AWS_REGION": settings.aws_region,
        # Passphrase for encrypting secrets in state (self-managed backends)
        "PULUMI_CONFIG_PASSPHRASE": os.environ.get("PULUMI_CONFIG_PASSPHRASE", ""),
    }
    if settings.backend_url:
        env_vars["PULUMI_BACKEND_URL"] = settings.backend_url
    return auto.LocalWorkspaceOptions(env_vars=env_vars)


def _select_stack(settings: DeployerSettings, stack_name: str, create: bool) -> auto.Stack:
    """Select (or create) a stack of the on-disk project."""
    work_dir = str(settings.work_dir)
    opts = _workspace_options(settings)
    try:
        if create:
            return auto.create_or_select_stack(stack_name=stack_name, work_dir=work_dir, opts=opts)
        return auto.select_stack(stack_name=stack_name, work_dir=work_dir, opts=opts)
    except auto.StackNotFoundError as e:
        raise DeployerError(
            f"Stack '{stack_name}' does not exist; run `infra init --stack {stack_name}` first"
        ) from e
    except auto.CommandError as e:
        raise DeployerError(f"Could not open stack '{stack_name}': {e}") from e


def _validate_values(project_name: str, values: Mapping[str, str]) -> None:
    bucket_key = qualify_config_key(project_name, "bucket_name")
    for key, value in values.items():
        if qualify_config_key(project_name, key) == bucket_key:
            validate_bucket_name(value)


def _apply_config(stack: auto.Stack, project_name: str, values: Mapping[str, str]) -> None:
    if not values:
        return
    _validate_values(project_name, values)
    config = {
        qualify_config_key(project_name, key): auto.ConfigValue(value=value)
        for key, value in values.items()
    }
    try:
        stack.set_all_config(config)
    except auto.CommandError as e:
        raise DeployerError(f"Could not update stack config: {e}") from e
    logger.info(f"Set {len(config)} config value(s) on stack {stack.name}")


@contextmanager
def _temporary_config(stack: auto.Stack, project_name: str, values: Mapping[str, str]) -> Iterator[None]:
    """Set config values for the duration of the block, then restore the stack file."""
    if not values:
        yield
        return
    try:
        existing = stack.get_all_config()
    except auto.CommandError as e:
        raise DeployerError(f"Could not read stack config: {e}") from e

    keys = {qualify_config_key(project_name, key) for key in values}
    _apply_config(stack, project_name, values)
    try:
        yield
    finally:
        previous = {key: existing[key] for key in keys if key in existing}
        added = sorted(key for key in keys if key not in existing)
        try:
            if previous:
                stack.set_all_config(previous)
            if added:
                stack.remove_all_config(added)
        except auto.CommandError as e:
            raise DeployerError(f"Could not restore stack config: {e}") from e
        logger.info(f"Restored {len(keys)} config value(s) on stack {stack.name}")


def mask_outputs(outputs: Mapping[str, auto.OutputValue]) -> dict[str, object]:
    """Plain output values keyed by name, with secrets masked."""
    return {
        key: "[secret]" if output.secret else output.value
        for key, output in outputs.items()
    }


def init_stack(
    stack_name: str | None = None,
    bucket_name: str | None = None,
    overrides: Mapping[str, str] | None = None,
    settings: DeployerSettings | None = None,
) -> auto.Stack:
    """Create or select a stack and fill in unset config values.

    Existing values are left untouched; overrides always win.

    Args:
        stack_name: Stack to initialize (defaults to settings.stack_name)
        bucket_name: S3 bucket name to record in the stack config
        overrides: Extra key=value config to set
        settings: Deployer settings (defaults to environment settings)

    Returns:
        The initialized stack

    Raises:
        ConfigurationError: If bucket_name breaks the S3 naming rules
        DeployerError: If the Pulumi CLI fails
    """
    settings = settings or get_settings()
    stack_name = stack_name or settings.stack_name
    stack = _select_stack(settings, stack_name, create=True)

    try:
        existing = stack.get_all_config()
    except auto.CommandError as e:
        raise DeployerError(f"Could not read stack config: {e}") from e

    values = {
        key: value
        for key, value in default_stack_config(settings).items()
        if qualify_config_key(settings.project_name, key) not in existing
    }
    if bucket_name:
        values["bucket_name"] = bucket_name
    values.update(overrides or {})

    _apply_config(stack, settings.project_name, values)
    logger.info(f"Stack {stack_name} ready in {settings.work_dir}")
    return stack


def preview_stack(
    stack_name: str | None = None,
    overrides: Mapping[str, str] | None = None,
    on_output: OutputCallback = print,
    settings: DeployerSettings | None = None,
) -> auto.PreviewResult:
    """Preview changes without applying them (`terraform plan`).

    Overrides apply to this preview only; the stack config file is restored
    afterwards.

    Raises:
        ConfigurationError: If an override breaks a naming rule
        DeployerError: If the stack is missing or the preview fails
    """
    settings = settings or get_settings()
    stack = _select_stack(settings, stack_name or settings.stack_name, create=False)
    with _temporary_config(stack, settings.project_name, overrides or {}):
        try:
            return stack.preview(on_output=on_output)
        except auto.CommandError as e:
            raise DeployerError(f"Preview failed: {e}") from e


def deploy_stack(
    stack_name: str | None = None,
    overrides: Mapping[str, str] | None = None,
    on_output: OutputCallback = print,
    settings: DeployerSettings | None = None,
) -> auto.UpResult:
    """Create or update the declared resources (`terraform apply`).

    Raises:
        DeployerError: If the stack is missing, locked, or the update fails
    """
    settings = settings or get_settings()
    stack = _select_stack(settings, stack_name or settings.stack_name, create=False)
    _apply_config(stack, settings.project_name, overrides or {})
    try:
        result = stack.up(on_output=on_output)
    except auto.ConcurrentUpdateError as e:
        raise DeployerError(f"Stack {stack.name} is locked by another update: {e}") from e
    except auto.CommandError as e:
        raise DeployerError(f"Update failed: {e}") from e
    logger.info(f"Update of {stack.name} finished: {result.summary.result}")
    return result


def destroy_stack(
    stack_name: str | None = None,
    on_output: OutputCallback = print,
    settings: DeployerSettings | None = None,
) -> auto.DestroyResult:
    """Delete every resource managed by the stack (`terraform destroy`).

    Raises:
        DeployerError: If the stack is missing or the destroy fails
    """
    settings = settings or get_settings()
    stack = _select_stack(settings, stack_name or settings.stack_name, create=False)
    try:
        result = stack.destroy(on_output=on_output)
    except auto.CommandError as e:
        raise DeployerError(f"Destroy failed: {e}") from e
    logger.info(f"Destroy of {stack.name} finished: {result.summary.result}")
    return result


def get_stack_outputs(
    stack_name: str | None = None,
    settings: DeployerSettings | None = None,
) -> dict[str, object]:
    """Return the stack's current outputs; secret values are masked.

    Raises:
        DeployerError: If the stack is missing or outputs cannot be read
    """
    settings = settings or get_settings()
    stack = _select_stack(settings, stack_name or settings.stack_name, create=False)
    try:
        outputs = stack.outputs()
    except auto.CommandError as e:
        raise DeployerError(f"Could not read outputs: {e}") from e
    return mask_outputs(outputs)


def check_aws_credentials(region: str | None = None) -> dict[str, str]:
    """Verify that AWS credentials resolve and are accepted by STS.

    Args:
        region: Region for the STS client (defaults to settings.aws_region)

    Returns:
        Account, Arn and UserId of the caller

    Raises:
        CredentialsError: If no credentials are configured or AWS rejects them
    """
    region = region or get_settings().aws_region
    try:
        sts = boto3.client("sts", region_name=region)
        identity = sts.get_caller_identity()
    except NoCredentialsError as e:
        raise CredentialsError("No AWS credentials found; run `aws configure`") from e
    except ClientError as e:
        raise CredentialsError(f"AWS rejected the credentials: {e}") from e
    except BotoCoreError as e:
        raise CredentialsError(f"Could not reach AWS STS: {e}") from e

    logger.info(f"Authenticated as {identity['Arn']}")
    return {
        "Account": identity["Account"],
        "Arn": identity["Arn"],
        "UserId": identity["UserId"],
    }
