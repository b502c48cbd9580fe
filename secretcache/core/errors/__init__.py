"""Core errors package.

Exports all core-level error classes for convenient importing.

Usage:
    from secretcache.core.errors import DomainError, ValidationError
"""

from secretcache.core.enums import ErrorCode
from secretcache.core.errors.common_errors import (
    MissingNamespaceError,
    ValidationError,
)
from secretcache.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ErrorCode",
    "MissingNamespaceError",
    "ValidationError",
]
