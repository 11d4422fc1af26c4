"""
Pulumi infrastructure-as-code for a basic AWS environment.

This package defines:
- A lookup of the region's default VPC
- A security group allowing SSH and HTTP in, all traffic out
- An EC2 key pair imported from a local public key
- A t2.micro Amazon Linux 2 instance with a boot-time package update
- An S3 bucket
- An operator CLI (`infra`) driving the stack through the Automation API
"""
