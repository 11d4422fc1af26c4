"""
EC2 Instance Component for the web server.

Key Components:
1. AMI: Amazon Linux 2, passed in by ID (AMI IDs are per region, so the
   configured ID must exist in aws_region).
2. User Data: Bootstrap script that runs ONCE at first boot (package update).
3. Placement: No subnet is given, so EC2 picks a default subnet of the
   default VPC and assigns a public IP.
4. Access: Security group referenced by ID, key pair referenced by name.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.base import InfraConfig
from IAC.configs.constants import USER_DATA
from IAC.utils.tags import create_tags


@dataclass
class Ec2Outputs:
    """Output values from EC2 component."""
    instance_id: pulumi.Output[str]
    public_ip: pulumi.Output[str]
    public_dns: pulumi.Output[str]


class Ec2InstanceComponent(pulumi.ComponentResource):
    """
    Single EC2 instance reachable over SSH and HTTP.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        config: InfraConfig,
        security_group_id: pulumi.Input[str],
        key_name: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:Ec2Instance", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.instance = aws.ec2.Instance(
            f"{name}-instance",
            ami=config.amazon_linux_ami,
            instance_type=config.instance_type,
            vpc_security_group_ids=[security_group_id],
            key_name=key_name,
            user_data=USER_DATA,
            tags=create_tags(environment, f"{name}-instance"),
            opts=child_opts,
        )

        self.register_outputs({
            "instance_id": self.instance.id,
            "public_ip": self.instance.public_ip,
            "public_dns": self.instance.public_dns,
        })

    def get_outputs(self) -> Ec2Outputs:
        """Get EC2 output values."""
        return Ec2Outputs(
            instance_id=self.instance.id,
            public_ip=self.instance.public_ip,
            public_dns=self.instance.public_dns,
        )
