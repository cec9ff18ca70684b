"""
AWS integration: S3 object storage and CloudFront invalidations.

Uses boto3, imported lazily so the rest of the package works without it.
"""

from .clients import AwsClients, DependencyMissingError, get_aws_clients
from .cloudfront import CloudFrontOperations
from .s3 import S3Operations

__all__ = [
    "AwsClients",
    "CloudFrontOperations",
    "DependencyMissingError",
    "S3Operations",
    "get_aws_clients",
]
