"""Domain protocols (ports).

Usage:
    from secretcache.domain.protocols import VersionedStoreProtocol
"""

from secretcache.domain.protocols.logger_protocol import LoggerProtocol
from secretcache.domain.protocols.secret_cache_protocol import (
    TTL,
    SecretCacheProtocol,
)
from secretcache.domain.protocols.versioned_store_protocol import (
    VersionedStoreProtocol,
)

__all__ = [
    "LoggerProtocol",
    "SecretCacheProtocol",
    "TTL",
    "VersionedStoreProtocol",
]
