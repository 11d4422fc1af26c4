"""
Stack definition for the basic AWS infrastructure.

Declares resources in dependency order:
1. AWS provider pinned to the configured region
2. Default VPC lookup → Security Group
3. Key Pair (from the local public key)
4. EC2 Instance (references 2 and 3 by ID)
5. S3 Bucket (independent)

Shared by __main__ (run by the Pulumi CLI and IAC.deployer) and the
unit tests.
"""

import pulumi
import pulumi_aws as aws

from IAC.components.compute.ec2_instance import Ec2InstanceComponent
from IAC.components.networking.security_groups import WebSecurityGroupComponent
from IAC.components.networking.vpc import lookup_default_vpc
from IAC.components.security.key_pair import KeyPairComponent
from IAC.components.storage.s3_bucket import S3BucketComponent
from IAC.configs.base import InfraConfig
from IAC.configs.constants import PROJECT_NAME
from IAC.configs.environment import get_config
from IAC.utils.keys import read_public_key
from IAC.utils.naming import ResourceNamer
from IAC.utils.outputs import write_outputs_to_env


def create_infrastructure(config: InfraConfig) -> dict[str, pulumi.Input[str]]:
    """
    Declare every resource of the stack.

    Args:
        config: Validated stack configuration

    Returns:
        Stack outputs keyed by export name

    Raises:
        PublicKeyError: If public_key_path does not hold a usable public key
    """
    namer = ResourceNamer(project=PROJECT_NAME, environment=config.environment)
    public_key = read_public_key(config.public_key_path)

    provider = aws.Provider(
        namer.name("aws"),
        region=config.aws_region,
    )
    component_opts = pulumi.ResourceOptions(providers=[provider])

    # --- Networking ---
    vpc = lookup_default_vpc(opts=pulumi.InvokeOptions(provider=provider))

    security_group = WebSecurityGroupComponent(
        name=namer.name("web"),
        environment=config.environment,
        vpc_id=vpc.vpc_id,
        opts=component_opts,
    )
    sg_outputs = security_group.get_outputs()

    # --- Access ---
    key_pair = KeyPairComponent(
        name=namer.name("ssh"),
        environment=config.environment,
        key_name=config.key_name,
        public_key=public_key,
        opts=component_opts,
    )
    key_outputs = key_pair.get_outputs()

    # --- Compute ---
    instance = Ec2InstanceComponent(
        name=namer.name("web"),
        environment=config.environment,
        config=config,
        security_group_id=sg_outputs.security_group_id,
        key_name=key_outputs.key_name,
        opts=component_opts,
    )
    ec2_outputs = instance.get_outputs()

    # --- Storage ---
    bucket = S3BucketComponent(
        name=namer.name("data"),
        environment=config.environment,
        bucket_name=config.bucket_name,
        opts=component_opts,
    )
    s3_outputs = bucket.get_outputs()

    return {
        "aws_region": config.aws_region,
        "vpc_id": vpc.vpc_id,
        "security_group_id": sg_outputs.security_group_id,
        "key_name": key_outputs.key_name,
        "instance_id": ec2_outputs.instance_id,
        "instance_public_ip": ec2_outputs.public_ip,
        "instance_public_dns": ec2_outputs.public_dns,
        "bucket_name": s3_outputs.bucket_name,
        "bucket_arn": s3_outputs.bucket_arn,
    }


def pulumi_program() -> None:
    """Load stack config, declare resources and export outputs."""
    config = get_config()
    outputs = create_infrastructure(config)

    write_outputs_to_env(outputs, "infrastructure.env")

    for key, value in outputs.items():
        pulumi.export(key, value)
