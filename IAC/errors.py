"""
Exception hierarchy for the infrastructure package.

Errors raised by AWS or the Pulumi engine are not wrapped here; they surface
through Pulumi's own reporting. These cover local checks and the operator CLI.
"""


class InfraError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(InfraError, ValueError):
    """Raised when a stack configuration value is missing or invalid."""


class PublicKeyError(ConfigurationError):
    """Raised when the public key file cannot be used for a key pair."""


class DeployerError(InfraError):
    """Raised when a Pulumi Automation API operation fails."""


class CredentialsError(InfraError):
    """Raised when AWS credentials are missing or rejected."""
