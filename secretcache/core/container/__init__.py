"""Container module - Centralized dependency injection.

Re-exports the factory functions so callers can write:

    from secretcache.core.container import get_secret_cache, get_logger
"""

from secretcache.core.container.infrastructure import (
    get_logger,
    get_secret_cache,
    get_versioned_store,
    secret_cache_for,
    versioned_store_for,
)

__all__ = [
    "get_logger",
    "get_secret_cache",
    "get_versioned_store",
    "secret_cache_for",
    "versioned_store_for",
]
