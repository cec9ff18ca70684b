"""
Memoized boto3 clients for S3 and CloudFront.

AwsClients is the explicit context object that owns both client handles.
Credentials are resolved once, when the context is created, and every
client built afterwards reuses them. Each client is built on first use
and then cached for the lifetime of the context.

Most code goes through get_aws_clients(), which keeps one context per
process, and then through the async operation wrappers:

    clients = get_aws_clients()
    await clients.s3.head_object(Bucket="my-bucket", Key="path/file.txt")
"""

import logging
import threading
from functools import lru_cache
from typing import Any, Optional

from ...config.settings import AwsSettings, get_settings
from .cloudfront import CloudFrontOperations
from .s3 import S3Operations

logger = logging.getLogger(__name__)


class DependencyMissingError(ImportError):
    """Raised when boto3 is not installed."""
    pass


def _import_boto3():
    """
    Import boto3 and botocore's Config lazily.

    The adapter can be imported without the AWS SDK; the SDK is only
    required once a client is actually needed.
    """
    try:
        import boto3
        from botocore.config import Config
    except ImportError as e:
        raise DependencyMissingError(
            f"{e}\nboto3 is needed to talk to S3 and CloudFront.\n"
            "Install it with: pip install boto3 (or install this package's [aws] extra)"
        ) from e
    return boto3, Config


class AwsClients:
    """
    Lazily constructed, memoized S3 and CloudFront clients.

    At most one instance of each client exists per context. Creation is
    guarded by a lock so concurrent first access from several threads
    still yields a single instance.
    """

    def __init__(self, settings: Optional[AwsSettings] = None) -> None:
        """
        Resolve credentials for this context.

        Args:
            settings: AWS settings (defaults to the process-wide settings)

        Raises:
            ConfigurationError: If a required credential variable is unset
        """
        self._settings = settings or get_settings()
        self._credentials = self._settings.credentials()
        self._lock = threading.Lock()
        self._storage_client: Optional[Any] = None
        self._cdn_client: Optional[Any] = None

    def storage_client(self) -> Any:
        """Return the cached S3 client, building it on first use."""
        if self._storage_client is None:
            with self._lock:
                if self._storage_client is None:
                    self._storage_client = self._build_storage_client()
        return self._storage_client

    def cdn_client(self) -> Any:
        """Return the cached CloudFront client, building it on first use."""
        if self._cdn_client is None:
            with self._lock:
                if self._cdn_client is None:
                    self._cdn_client = self._build_cdn_client()
        return self._cdn_client

    @property
    def s3(self) -> S3Operations:
        return S3Operations(self)

    @property
    def cloudfront(self) -> CloudFrontOperations:
        return CloudFrontOperations(self)

    def _build_storage_client(self) -> Any:
        boto3, Config = _import_boto3()

        client_config = None
        if self._settings.s3_force_path_style:
            client_config = Config(s3={"addressing_style": "path"})

        client = boto3.client(
            "s3",
            endpoint_url=self._settings.s3_endpoint,
            config=client_config,
            **self._credentials.as_client_kwargs(),
        )

        logger.debug(
            "Initialized S3 client",
            extra={
                "endpoint": self._settings.s3_endpoint,
                "path_style": self._settings.s3_force_path_style,
            }
        )
        return client

    def _build_cdn_client(self) -> Any:
        boto3, _ = _import_boto3()

        client = boto3.client("cloudfront", **self._credentials.as_client_kwargs())

        logger.debug("Initialized CloudFront client")
        return client


@lru_cache()
def get_aws_clients() -> AwsClients:
    """
    Get the process-wide client context.

    The first call reads credentials, so a missing variable surfaces here
    rather than at import time. For tests, call get_aws_clients.cache_clear().
    """
    return AwsClients()
