"""Pytest configuration and shared fixtures.

This configuration ensures:
1. Each test builds its own store and cache (no container singletons)
2. Container lru_caches are cleared between tests
3. Namespace environment variables never leak between tests
"""

import os
from unittest.mock import Mock

import pytest

from secretcache.core.container import (
    get_logger,
    secret_cache_for,
    versioned_store_for,
)
from secretcache.infrastructure.cache.secret_cache import SecretCache
from secretcache.infrastructure.secrets.memory_adapter import MemoryAdapter

TEST_NAMESPACE = "test-ns"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Remove namespace/backend env vars and reset container singletons."""
    for name in ("SECRETS_NAMESPACE", "SECRETS_BACKEND", "SECRETS_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    get_logger.cache_clear()
    versioned_store_for.cache_clear()
    secret_cache_for.cache_clear()
    yield
    get_logger.cache_clear()
    versioned_store_for.cache_clear()
    secret_cache_for.cache_clear()


@pytest.fixture
def aws_credentials(monkeypatch):
    """Fake AWS credentials so boto3 never reaches a real account."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    yield os.environ


@pytest.fixture
def mock_logger():
    """Logger double whose bind() returns itself."""
    logger = Mock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger


@pytest.fixture
def memory_store():
    """Fresh in-memory versioned store."""
    return MemoryAdapter(namespace=TEST_NAMESPACE)


@pytest.fixture
def cache(memory_store, mock_logger):
    """SecretCache over a fresh in-memory store."""
    return SecretCache(memory_store, logger=mock_logger)


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "aws: Tests running against moto's mocked AWS Secrets Manager"
    )
