"""Logging setup for the operator tooling."""

from IAC.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
