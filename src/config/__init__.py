"""
AWS configuration using Pydantic settings.

Configuration comes from environment variables or a local .env file.
"""

from .settings import AwsCredentials, AwsSettings, ConfigurationError, get_settings

__all__ = ["AwsCredentials", "AwsSettings", "ConfigurationError", "get_settings"]
