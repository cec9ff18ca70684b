"""
Shared fixtures.

Every test starts with empty settings and client caches and a clean set
of AWS variables, so nothing leaks in from the developer's environment.
"""

import pytest

from src.config.settings import get_settings
from src.infrastructure.aws.clients import get_aws_clients

AWS_ENV_VARS = (
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "AWS_S3_ENDPOINT",
    "AWS_S3_FORCE_PATH_STYLE",
)


@pytest.fixture(autouse=True)
def clean_aws_env(monkeypatch):
    """Remove AWS variables and reset the cached settings/clients."""
    for name in AWS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    get_aws_clients.cache_clear()
    yield
    get_settings.cache_clear()
    get_aws_clients.cache_clear()


@pytest.fixture
def aws_env(monkeypatch):
    """Set valid credentials in the environment."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "test-access-key")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "test-secret-key")
