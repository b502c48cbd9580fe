"""Secrets backend error types.

Returned (never raised) by versioned store adapters when a backend primitive
fails. The cache layer absorbs these into its bool/default vocabulary.

Usage:
    from secretcache.domain.errors import SecretsError
    from secretcache.core.enums import ErrorCode
    from secretcache.core.result import Failure

    return Failure(error=SecretsError(
        code=ErrorCode.SECRET_NOT_FOUND,
        message="Secret not found: myapp/api_key",
        operation="read_version",
    ))
"""

from dataclasses import dataclass

from secretcache.core.enums import ErrorCode
from secretcache.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretsError(DomainError):
    """Secrets backend failure.

    Attributes:
        code: ErrorCode enum (SECRET_NOT_FOUND, SECRET_BACKEND_UNAVAILABLE, etc.).
        message: Human-readable message.
        operation: Store primitive that failed (e.g. 'add_version').
        details: Additional context.
    """

    operation: str | None = None

    @property
    def is_not_found(self) -> bool:
        """True when the container or version does not exist."""
        return self.code is ErrorCode.SECRET_NOT_FOUND
