"""
Pulumi component resources for the basic AWS infrastructure.

Each submodule provides ComponentResource classes:
- networking: default VPC lookup, web security group
- security: EC2 key pair
- compute: EC2 instance
- storage: S3 bucket
"""
