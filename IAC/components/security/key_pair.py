"""
Key Pair Component for SSH access.

The private key never leaves the operator's machine: only the public half is
imported into EC2. The instance receives it in ~ec2-user/.ssh/authorized_keys
on first boot.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags


@dataclass
class KeyPairOutputs:
    """Output values from key pair component."""
    key_name: pulumi.Output[str]
    key_pair_id: pulumi.Output[str]
    fingerprint: pulumi.Output[str]


class KeyPairComponent(pulumi.ComponentResource):
    """
    EC2 key pair imported from a local OpenSSH public key.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        key_name: str,
        public_key: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:KeyPair", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.key_pair = aws.ec2.KeyPair(
            f"{name}-key",
            key_name=key_name,
            public_key=public_key,
            tags=create_tags(environment, key_name),
            opts=child_opts,
        )

        self.register_outputs({
            "key_name": self.key_pair.key_name,
            "key_pair_id": self.key_pair.key_pair_id,
            "fingerprint": self.key_pair.fingerprint,
        })

    def get_outputs(self) -> KeyPairOutputs:
        """Get key pair output values."""
        return KeyPairOutputs(
            key_name=self.key_pair.key_name,
            key_pair_id=self.key_pair.key_pair_id,
            fingerprint=self.key_pair.fingerprint,
        )
