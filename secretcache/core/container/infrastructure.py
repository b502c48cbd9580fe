"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (console, structlog)
- Versioned store (AWS Secrets Manager / in-memory), one per namespace
- Secret cache, one per namespace, sharing that namespace's store

The namespace is resolved first (explicit argument, then SECRETS_NAMESPACE)
and the singletons are memoized with lru_cache keyed by the resolved name,
so each namespace gets one shared backend client for the process lifetime
however it was spelled by the caller. Tests call
versioned_store_for.cache_clear() / secret_cache_for.cache_clear() or build
SecretCache(MemoryAdapter(...)) directly.
"""

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from secretcache.core.config import resolve_namespace, settings
from secretcache.core.enums import Environment, SecretsBackend

if TYPE_CHECKING:
    from secretcache.domain.protocols.logger_protocol import LoggerProtocol
    from secretcache.domain.protocols.secret_cache_protocol import SecretCacheProtocol
    from secretcache.domain.protocols.versioned_store_protocol import (
        VersionedStoreProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from secretcache.infrastructure.logging.console_adapter import ConsoleAdapter

    level = logging.getLevelNamesMapping()[settings.log_level]
    return ConsoleAdapter(
        use_json=settings.environment != Environment.DEVELOPMENT, level=level
    )


def get_versioned_store(namespace: str | None = None) -> "VersionedStoreProtocol":
    """Get the versioned store for a namespace (app-scoped, per namespace).

    Args:
        namespace: Explicit namespace, or None for SECRETS_NAMESPACE.

    Returns:
        Store implementing VersionedStoreProtocol.

    Raises:
        MissingNamespaceError: If no namespace can be resolved.
    """
    return versioned_store_for(resolve_namespace(namespace))


@lru_cache()
def versioned_store_for(namespace: str) -> "VersionedStoreProtocol":
    """Build (once) the store bound to a resolved namespace.

    Container owns factory logic - decides which adapter based on
    SECRETS_BACKEND:
        - 'aws': AWSAdapter (AWS Secrets Manager)
        - 'memory': MemoryAdapter (process-local)
    """
    if settings.secrets_backend == SecretsBackend.AWS:
        from secretcache.infrastructure.secrets.aws_adapter import AWSAdapter

        return AWSAdapter(
            namespace=namespace,
            region=settings.aws_region,
            timeout=settings.secrets_timeout,
        )

    from secretcache.infrastructure.secrets.memory_adapter import MemoryAdapter

    return MemoryAdapter(namespace=namespace)


def get_secret_cache(namespace: str | None = None) -> "SecretCacheProtocol":
    """Get the secret cache for a namespace (app-scoped, per namespace).

    Args:
        namespace: Explicit namespace, or None for SECRETS_NAMESPACE.

    Returns:
        SecretCacheProtocol bound to that namespace's shared store.

    Raises:
        MissingNamespaceError: If no namespace can be resolved.

    Usage:
        cache = get_secret_cache("myapp")
        cache.set("api_key", "s3cr3t")
    """
    return secret_cache_for(resolve_namespace(namespace))


@lru_cache()
def secret_cache_for(namespace: str) -> "SecretCacheProtocol":
    """Build (once) the cache bound to a resolved namespace."""
    from secretcache.infrastructure.cache.secret_cache import SecretCache

    return SecretCache(versioned_store_for(namespace), logger=get_logger())
