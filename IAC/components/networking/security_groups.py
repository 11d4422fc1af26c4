"""
Web Security Group Component.

One security group for the web instance:
   - Ingress: SSH (22/tcp) and HTTP (80/tcp) from anywhere (0.0.0.0/0).
   - Egress: everything, so the boot script can reach the yum mirrors.

Rules are declared inline on the group, so the group owns its full rule set
and Pulumi removes rules added outside the program on the next update.

Security Groups are stateful: replies to allowed inbound traffic are allowed
out regardless of egress rules.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.configs.constants import ANYWHERE_CIDR, PORTS
from IAC.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security group component."""
    security_group_id: pulumi.Output[str]
    security_group_name: pulumi.Output[str]


def build_ingress_rules() -> list[aws.ec2.SecurityGroupIngressArgs]:
    """Inbound rules: SSH and HTTP from anywhere."""
    return [
        aws.ec2.SecurityGroupIngressArgs(
            description="SSH",
            protocol="tcp",
            from_port=PORTS["ssh"],
            to_port=PORTS["ssh"],
            cidr_blocks=[ANYWHERE_CIDR],
        ),
        aws.ec2.SecurityGroupIngressArgs(
            description="HTTP",
            protocol="tcp",
            from_port=PORTS["http"],
            to_port=PORTS["http"],
            cidr_blocks=[ANYWHERE_CIDR],
        ),
    ]


def build_egress_rules() -> list[aws.ec2.SecurityGroupEgressArgs]:
    """Outbound rules: all protocols, all ports."""
    return [
        aws.ec2.SecurityGroupEgressArgs(
            description="All outbound traffic",
            protocol="-1",
            from_port=0,
            to_port=0,
            cidr_blocks=[ANYWHERE_CIDR],
        ),
    ]


class WebSecurityGroupComponent(pulumi.ComponentResource):
    """
    Security group allowing SSH and HTTP in, everything out.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        vpc_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:WebSecurityGroup", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.security_group = aws.ec2.SecurityGroup(
            f"{name}-sg",
            description="Allow SSH and HTTP inbound, all outbound",
            vpc_id=vpc_id,
            ingress=build_ingress_rules(),
            egress=build_egress_rules(),
            tags=create_tags(environment, f"{name}-sg"),
            opts=child_opts,
        )

        self.register_outputs({
            "security_group_id": self.security_group.id,
            "security_group_name": self.security_group.name,
        })

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            security_group_id=self.security_group.id,
            security_group_name=self.security_group.name,
        )
