"""
Compute components.

Components:
- Ec2InstanceComponent: Amazon Linux 2 web instance
"""

from IAC.components.compute.ec2_instance import Ec2InstanceComponent, Ec2Outputs

__all__ = [
    "Ec2InstanceComponent",
    "Ec2Outputs",
]
