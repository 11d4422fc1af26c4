"""Click CLI for the stack lifecycle: init, plan, apply, destroy."""

import sys
from typing import NoReturn

import click

from IAC import deployer
from IAC.configs.settings import get_settings
from IAC.errors import ConfigurationError, CredentialsError, DeployerError, InfraError
from IAC.observability.logger import configure_logging

stack_option = click.option(
    "--stack", "-s", "stack_name", default=None, help="Stack name (default: INFRA_STACK_NAME or 'dev')"
)
config_option = click.option(
    "--config", "-c", "config_pairs", multiple=True, metavar="KEY=VALUE",
    help="Override a stack config value; repeatable",
)


@click.group()
@click.version_option(package_name="basic-aws-infra")
@click.option("--log-level", default=None, help="Logging level (default: INFRA_LOG_LEVEL or INFO)")
def cli(log_level: str | None) -> None:
    """Manage the basic AWS infrastructure stack with Pulumi."""
    configure_logging(log_level or get_settings().log_level)


@cli.command()
@stack_option
@click.option("--bucket-name", default=None, help="Globally unique S3 bucket name")
@config_option
def init(stack_name: str | None, bucket_name: str | None, config_pairs: tuple[str, ...]) -> None:
    """Create or select a stack and write default config values."""
    try:
        overrides = deployer.parse_config_pairs(config_pairs)
        stack = deployer.init_stack(stack_name, bucket_name=bucket_name, overrides=overrides)
    except InfraError as e:
        _fail(e)
    click.echo(f"Stack '{stack.name}' initialized.")


@cli.command()
@stack_option
@config_option
def plan(stack_name: str | None, config_pairs: tuple[str, ...]) -> None:
    """Preview changes without applying them; --config values are not saved."""
    try:
        overrides = deployer.parse_config_pairs(config_pairs)
        result = deployer.preview_stack(stack_name, overrides=overrides)
    except InfraError as e:
        _fail(e)
    _print_change_summary(result.change_summary)


@cli.command()
@stack_option
@config_option
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
def apply(stack_name: str | None, config_pairs: tuple[str, ...], yes: bool) -> None:
    """Create or update the declared resources."""
    if not yes:
        click.confirm("Apply changes to AWS?", abort=True)
    try:
        overrides = deployer.parse_config_pairs(config_pairs)
        result = deployer.deploy_stack(stack_name, overrides=overrides)
    except InfraError as e:
        _fail(e)
    _print_outputs(deployer.mask_outputs(result.outputs))


@cli.command()
@stack_option
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
def destroy(stack_name: str | None, yes: bool) -> None:
    """Delete every resource managed by the stack."""
    if not yes:
        click.confirm("Destroy all resources in the stack? This cannot be undone.", abort=True)
    try:
        result = deployer.destroy_stack(stack_name)
    except InfraError as e:
        _fail(e)
    click.echo("\nDestruction complete.")
    if result.summary.result == "succeeded":
        click.echo("All resources have been removed.")


@cli.command()
@stack_option
def outputs(stack_name: str | None) -> None:
    """Show the stack outputs."""
    try:
        values = deployer.get_stack_outputs(stack_name)
    except InfraError as e:
        _fail(e)
    _print_outputs(values)


@cli.command()
@click.option("--region", default=None, help="Region for the STS call")
def whoami(region: str | None) -> None:
    """Check that AWS credentials are configured."""
    try:
        identity = deployer.check_aws_credentials(region)
    except InfraError as e:
        _fail(e)
    click.echo(f"Account: {identity['Account']}")
    click.echo(f"Arn:     {identity['Arn']}")


def _fail(error: InfraError) -> NoReturn:
    """Print the error and exit with status 1."""
    if isinstance(error, CredentialsError):
        label = "Credentials error"
    elif isinstance(error, ConfigurationError):
        label = "Configuration error"
    elif isinstance(error, DeployerError):
        label = "Deployment error"
    else:
        label = "Error"
    click.echo(f"{label}: {error}", err=True)
    sys.exit(1)


def _print_change_summary(summary: dict[str, int] | None) -> None:
    """Print a summary of changes from preview."""
    changes = {
        getattr(op, "value", op): count
        for op, count in (summary or {}).items()
        if count > 0 and getattr(op, "value", op) != "same"
    }
    if not changes:
        click.echo("No changes detected.")
        return
    click.echo("\nChange summary:")
    for change_type, count in changes.items():
        click.echo(f"  {change_type}: {count}")


def _print_outputs(values: dict[str, object]) -> None:
    """Print stack outputs."""
    if not values:
        click.echo("\nNo outputs.")
        return
    click.echo("\nOutputs:")
    for key, value in values.items():
        click.echo(f"  {key}: {value}")


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
