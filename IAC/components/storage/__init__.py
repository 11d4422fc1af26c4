"""
Storage components.

Components:
- S3BucketComponent: Single named S3 bucket
"""

from IAC.components.storage.s3_bucket import S3BucketComponent, S3BucketOutputs

__all__ = [
    "S3BucketComponent",
    "S3BucketOutputs",
]
