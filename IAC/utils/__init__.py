"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, key loading and output utilities.
"""

from IAC.utils.naming import ResourceNamer
from IAC.utils.tags import create_tags, merge_tags
from IAC.utils.keys import read_public_key
from IAC.utils.outputs import write_outputs_to_env

__all__ = [
    "ResourceNamer",
    "create_tags",
    "merge_tags",
    "read_public_key",
    "write_outputs_to_env",
]
