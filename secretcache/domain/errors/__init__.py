"""Domain errors package.

- SecretsError: Result data returned by versioned store adapters
- InvalidKeyError / UnserializableValueError: raised by the cache contract

Usage:
    from secretcache.domain.errors import InvalidKeyError, SecretsError
"""

from secretcache.domain.errors.cache_errors import (
    InvalidKeyError,
    UnserializableValueError,
)
from secretcache.domain.errors.secrets_error import SecretsError

__all__ = [
    "InvalidKeyError",
    "SecretsError",
    "UnserializableValueError",
]
