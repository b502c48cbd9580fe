"""Hard errors raised by the cache contract.

Only programmer errors are raised: a malformed key or a value the codec
cannot represent. Both are raised before any backend call. Environmental
failures never surface as exceptions (see SecretsError).
"""

from typing import Any

from secretcache.core.enums import ErrorCode


class InvalidKeyError(ValueError):
    """Raised when a cache key fails shape validation."""

    code = ErrorCode.INVALID_KEY

    def __init__(self, key: Any, reason: str | None = None) -> None:
        """Initialize invalid key error.

        Args:
            key: The offending key (any type).
            reason: Validation message, if known.
        """
        super().__init__(reason or f"invalid cache key: {key!r}")
        self.key = key


class UnserializableValueError(ValueError):
    """Raised when a value is neither a string nor JSON serializable."""

    code = ErrorCode.UNSERIALIZABLE_VALUE

    def __init__(self, value: Any) -> None:
        """Initialize unserializable value error.

        Args:
            value: The value that could not be encoded (not kept; only its type).
        """
        super().__init__(f"unserializable value of type {type(value).__name__}")
        self.value_type = type(value)
