"""
Default VPC lookup.

No network is created. Every AWS account has one default VPC per region,
with a public subnet in each availability zone and an internet gateway
already attached. The security group is placed in it, and the instance lands
in one of its default subnets with a public IP.

This is a data lookup: it reads existing state and never appears in a
destroy plan.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws


@dataclass
class VpcOutputs:
    """Values read from the default VPC."""
    vpc_id: str
    cidr_block: str


def lookup_default_vpc(opts: pulumi.InvokeOptions | None = None) -> VpcOutputs:
    """
    Look up the default VPC of the configured region.

    Args:
        opts: Invoke options (e.g. an explicit provider)

    Returns:
        VpcOutputs with the VPC ID and CIDR block

    Raises:
        Exception: Propagated from the provider when the region has no default VPC
    """
    vpc = aws.ec2.get_vpc(default=True, opts=opts)
    pulumi.log.info(f"Using default VPC {vpc.id} ({vpc.cidr_block})")
    return VpcOutputs(vpc_id=vpc.id, cidr_block=vpc.cidr_block)
