"""
Networking components.

Components:
- lookup_default_vpc: Reads the region's default VPC (no resources created)
- WebSecurityGroupComponent: SSH + HTTP inbound, all outbound
"""

from IAC.components.networking.vpc import lookup_default_vpc, VpcOutputs
from IAC.components.networking.security_groups import (
    WebSecurityGroupComponent,
    SecurityGroupOutputs,
)

__all__ = [
    "lookup_default_vpc",
    "VpcOutputs",
    "WebSecurityGroupComponent",
    "SecurityGroupOutputs",
]
