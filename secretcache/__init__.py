"""secretcache - a key-value cache served from a versioned secret store.

Usage:
    from secretcache import SecretCache, MemoryAdapter

    cache = SecretCache(MemoryAdapter(namespace="myapp"))
    cache.set("api_key", "s3cr3t")
    cache.get("api_key")  # 's3cr3t'
"""

from secretcache.core.errors import MissingNamespaceError
from secretcache.domain.errors import InvalidKeyError, UnserializableValueError
from secretcache.facade import Secrets
from secretcache.infrastructure.cache import SecretCache, SerializationCodec
from secretcache.infrastructure.secrets import AWSAdapter, MemoryAdapter

__all__ = [
    "AWSAdapter",
    "InvalidKeyError",
    "MemoryAdapter",
    "MissingNamespaceError",
    "SecretCache",
    "Secrets",
    "SerializationCodec",
    "UnserializableValueError",
]
