"""Common error classes used across all layers.

Error Types:
- ValidationError: Input validation failure carried in a Result
- MissingNamespaceError: Raised at construction when no namespace resolves

MissingNamespaceError is an exception rather than Result data because a
missing namespace is a configuration fault: nothing can be deferred or
recovered per call.

Usage:
    from secretcache.core.errors import ValidationError
    from secretcache.core.enums import ErrorCode
    from secretcache.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_KEY,
        message="Key must be a non-empty string",
        field="key",
    ))
"""

from dataclasses import dataclass

from secretcache.core.enums import ErrorCode
from secretcache.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


class MissingNamespaceError(ValueError):
    """Raised when no namespace is given and none is configured."""

    code = ErrorCode.MISSING_NAMESPACE

    def __init__(self, env_var: str = "SECRETS_NAMESPACE") -> None:
        """Initialize missing namespace error.

        Args:
            env_var: Environment variable that was consulted.
        """
        super().__init__(
            f"missing namespace as argument or {env_var} environment variable"
        )
        self.env_var = env_var
