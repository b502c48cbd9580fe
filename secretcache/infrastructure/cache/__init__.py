"""Cache infrastructure package.

This package serves the key-value cache contract from a versioned store.
All cache dependencies are managed through secretcache.core.container.

Architecture:
- SecretCache: Concrete implementation of SecretCacheProtocol
- SerializationCodec: str-verbatim / JSON payload codec
- Use secretcache.core.container.get_secret_cache() for dependency injection
"""

from secretcache.infrastructure.cache.secret_cache import SecretCache
from secretcache.infrastructure.cache.serialization import SerializationCodec

__all__ = [
    "SecretCache",
    "SerializationCodec",
]
