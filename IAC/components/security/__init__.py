"""
Security components.

Components:
- KeyPairComponent: EC2 key pair imported from a local public key
"""

from IAC.components.security.key_pair import KeyPairComponent, KeyPairOutputs

__all__ = [
    "KeyPairComponent",
    "KeyPairOutputs",
]
