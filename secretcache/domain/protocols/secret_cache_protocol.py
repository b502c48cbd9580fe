"""Key-value cache contract served on top of a versioned store.

This is the simple-cache interface callers program against. Implementations
absorb backend failures into bool/default results and raise only for
programmer errors (InvalidKeyError, UnserializableValueError).
"""

from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, Protocol

type TTL = int | float | timedelta | None


class SecretCacheProtocol(Protocol):
    """Protocol for the secret-backed cache contract."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the current value of key, or default on miss/failure."""
        ...

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Store value as a new version; non-None ttl retires the prior one."""
        ...

    def create(self, key: str, value: Any = None) -> bool:
        """Create the key's container, optionally with a first value."""
        ...

    def delete(self, key: str) -> bool:
        """Delete the key and all of its versions."""
        ...

    def clear(self) -> bool:
        """Delete every key in the namespace (not only ones this cache wrote)."""
        ...

    def has(self, key: str) -> bool:
        """Hint whether key exists (racy; do not use for correctness)."""
        ...

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Independent get per key, in input order."""
        ...

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Independent set per entry; True only if every entry succeeded."""
        ...

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Independent delete per key; True only if every delete succeeded."""
        ...
