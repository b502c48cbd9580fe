"""Validation helpers for cache keys.

All validation functions return Result types for consistent error handling.
The cache layer turns a Failure into InvalidKeyError before any backend call.

Usage:
    from secretcache.core.validation import validate_key
    from secretcache.core.result import Success, Failure

    match validate_key("api_key"):
        case Success(value=key):
            ...
        case Failure(error=error):
            print(error.message)
"""

import re
from typing import Any

from secretcache.core.enums import ErrorCode
from secretcache.core.errors import ValidationError
from secretcache.core.result import Failure, Result, Success

# Secret id shape accepted by the supported backends.
KEY_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,255}")


def validate_key(key: Any) -> Result[str, ValidationError]:
    """Validate a cache key.

    Args:
        key: Candidate key (any type; only non-empty strings can pass).

    Returns:
        Success with the key if valid, Failure with ValidationError otherwise.
    """
    if not isinstance(key, str):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_KEY,
                message=f"Key must be a string, got {type(key).__name__}",
                field="key",
            )
        )
    if not key:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_KEY,
                message="Key cannot be empty",
                field="key",
            )
        )
    if not KEY_PATTERN.fullmatch(key):
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_KEY,
                message="Key may only contain letters, digits, '_' and '-' "
                "(max 255 characters)",
                field="key",
                details={"key": key[:64]},
            )
        )
    return Success(value=key)
