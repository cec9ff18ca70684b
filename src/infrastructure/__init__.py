"""
Infrastructure layer - external service integrations.

Each subdirectory wraps an external dependency:
- aws: S3 object storage and CloudFront invalidations (boto3)
- git: Commit hash lookup via the git CLI

These wrappers stay thin: errors from the underlying service propagate
unchanged.
"""
