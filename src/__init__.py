"""
Release AWS adapter - S3 and CloudFront access for release tooling.

This package contains:
- config: AWS settings loaded from the environment
- infrastructure: External service integrations (AWS, git)
- testing: Helpers for release tests against real buckets
"""

__version__ = "0.1.0"
