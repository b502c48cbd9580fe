"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the package while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(key-value context) and safe.

Log Levels:
    - DEBUG: Cache misses, absorbed not-found results
    - INFO: Namespace-wide operations (clear)
    - WARNING: Absorbed backend failures, failed version retirement
    - ERROR / CRITICAL: Reserved for callers

Security:
    - NEVER log cache values (they are secrets)
    - Keys and error codes are safe to log

Usage:
    from secretcache.core.container import get_logger

    logger = get_logger().bind(namespace="myapp")
    logger.debug("Cache miss", key="api_key", error_code="secret_not_found")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message.
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Example:
            cache_logger = logger.bind(namespace="myapp")
            cache_logger.info("Cache cleared", deleted=3)
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
