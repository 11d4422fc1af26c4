"""
S3 Bucket Component.

A single named bucket. The name is global across all AWS accounts, so a
taken name fails at apply time with BucketAlreadyExists.

force_destroy stays off: `pulumi destroy` fails on a non-empty bucket rather
than deleting its objects.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from IAC.utils.tags import create_tags


@dataclass
class S3BucketOutputs:
    """Output values from S3 bucket component."""
    bucket_name: pulumi.Output[str]
    bucket_arn: pulumi.Output[str]


class S3BucketComponent(pulumi.ComponentResource):
    """
    One S3 bucket with an explicit, globally unique name.
    """

    def __init__(
        self,
        name: str,
        environment: str,
        bucket_name: str,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:S3Bucket", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.bucket = aws.s3.Bucket(
            f"{name}-bucket",
            bucket=bucket_name,
            force_destroy=False,
            tags=create_tags(environment, bucket_name),
            opts=child_opts,
        )

        self.register_outputs({
            "bucket_name": self.bucket.bucket,
            "bucket_arn": self.bucket.arn,
        })

    def get_outputs(self) -> S3BucketOutputs:
        """Get S3 bucket output values."""
        return S3BucketOutputs(
            bucket_name=self.bucket.bucket,
            bucket_arn=self.bucket.arn,
        )
