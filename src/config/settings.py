"""
AWS configuration using Pydantic settings.

Credentials and S3 options are loaded from environment variables (or a
local .env file). Loading never fails: missing credentials are reported
by validate_required_fields() and raised by credentials(), so callers
decide when a missing key becomes fatal.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when a required credential variable is not set."""
    pass


@dataclass(frozen=True)
class AwsCredentials:
    """Static credentials shared by the S3 and CloudFront clients."""
    access_key_id: str
    secret_access_key: str
    session_token: Optional[str] = None

    def as_client_kwargs(self) -> dict[str, Optional[str]]:
        """Keyword arguments accepted by boto3.client()."""
        return {
            "aws_access_key_id": self.access_key_id,
            "aws_secret_access_key": self.secret_access_key,
            "aws_session_token": self.session_token,
        }


class AwsSettings(BaseSettings):
    """
    AWS settings loaded from environment variables.

    Field names match the standard AWS variable names, so
    AWS_ACCESS_KEY_ID populates aws_access_key_id and so on.
    """

    aws_access_key_id: Optional[str] = Field(
        default=None,
        description="Access key for S3 and CloudFront. Required."
    )
    aws_secret_access_key: Optional[str] = Field(
        default=None,
        description="Secret key for S3 and CloudFront. Required."
    )
    aws_session_token: Optional[str] = Field(
        default=None,
        description="Session token for temporary credentials (optional)"
    )
    aws_s3_endpoint: Optional[str] = Field(
        default=None,
        description="Custom S3 endpoint, e.g. a MinIO or R2 URL (optional)"
    )
    aws_s3_force_path_style: Optional[str] = Field(
        default=None,
        description="Any non-empty value enables path-style S3 addressing."
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def s3_endpoint(self) -> Optional[str]:
        """Custom endpoint URL, or None to let boto3 pick the AWS default."""
        return self.aws_s3_endpoint or None

    @property
    def s3_force_path_style(self) -> bool:
        """
        Whether S3 requests use path-style addressing.

        Presence of any non-empty value enables it; "false" and "0" count
        as set too.
        """
        return bool(self.aws_s3_force_path_style)

    def validate_required_fields(self) -> list[str]:
        """Return the names of required variables that are missing."""
        missing = []
        if not self.aws_access_key_id:
            missing.append("AWS_ACCESS_KEY_ID")
        if not self.aws_secret_access_key:
            missing.append("AWS_SECRET_ACCESS_KEY")
        return missing

    def credentials(self) -> AwsCredentials:
        """
        Build the credentials used to sign requests.

        Raises:
            ConfigurationError: If the access key or secret key is unset
        """
        if not self.aws_access_key_id:
            raise ConfigurationError("AWS_ACCESS_KEY_ID not set")
        if not self.aws_secret_access_key:
            raise ConfigurationError("AWS_SECRET_ACCESS_KEY not set")

        return AwsCredentials(
            access_key_id=self.aws_access_key_id,
            secret_access_key=self.aws_secret_access_key,
            session_token=self.aws_session_token or None,
        )


@lru_cache()
def get_settings() -> AwsSettings:
    """
    Get cached settings instance.

    Settings are read once per process. For tests, call
    get_settings.cache_clear() to reset.
    """
    return AwsSettings()
