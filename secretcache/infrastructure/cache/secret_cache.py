"""Key-value cache served from a versioned secret store.

SecretCache implements SecretCacheProtocol by composing the primitives of a
VersionedStoreProtocol adapter. The store only ever appends immutable
versions, so "overwrite" means "append a new latest version", and "TTL"
means "also retire the version that was latest just before this write".

Architecture:
- Internally every store primitive returns Result[T, SecretsError]
- Public methods convert Results to the cache vocabulary (bool / default)
- Only InvalidKeyError and UnserializableValueError are raised, always
  before the first backend call (batches validate every entry up front)

Hazards (documented, not fixed):
- set(..., ttl) is read → append → destroy with no atomicity. A concurrent
  writer between the read and the destroy can get the wrong version retired.
- clear() deletes every container in the namespace, including ones this
  cache never wrote, and stops at the first failure without rollback.
- has() is a hint; existence can change before the next call.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from secretcache.core.enums import ErrorCode
from secretcache.core.result import Failure, Result, Success
from secretcache.core.validation import validate_key
from secretcache.domain.errors import InvalidKeyError, SecretsError
from secretcache.domain.protocols import (
    TTL,
    LoggerProtocol,
    VersionedStoreProtocol,
)
from secretcache.domain.value_objects import ContainerRef, VersionRef
from secretcache.infrastructure.cache.serialization import SerializationCodec


def _require_key(key: Any) -> str:
    match validate_key(key):
        case Success(value=valid):
            return valid
        case Failure(error=error):
            raise InvalidKeyError(key, error.message)


def _require_keys(keys: Iterable[str]) -> list[str]:
    if isinstance(keys, (str, bytes)):
        raise InvalidKeyError(keys, "keys must be an iterable of strings, not a string")
    try:
        candidates = list(keys)
    except TypeError as e:
        raise InvalidKeyError(keys, "keys must be an iterable of strings") from e
    return [_require_key(key) for key in candidates]


def _require_pairs(
    values: Mapping[str, Any] | Iterable[tuple[str, Any]],
) -> list[tuple[str, Any]]:
    reason = "values must be a mapping or an iterable of (key, value) pairs"
    if isinstance(values, Mapping):
        pairs = list(values.items())
    elif isinstance(values, (str, bytes)):
        raise InvalidKeyError(values, reason)
    else:
        try:
            pairs = [(key, value) for key, value in values]
        except (TypeError, ValueError) as e:
            raise InvalidKeyError(values, reason) from e
    return [(_require_key(key), value) for key, value in pairs]


class SecretCache:
    """Secret-backed implementation of the cache contract.

    One instance is bound to one store (and therefore one namespace). It
    holds no per-call state and may be shared by concurrent callers; it adds
    no coordination beyond what the store guarantees.

    Attributes:
        _store: Versioned store adapter.
        _codec: Value ↔ bytes codec.
        _logger: Logger bound with the store's namespace.
    """

    def __init__(
        self,
        store: VersionedStoreProtocol,
        *,
        codec: SerializationCodec | None = None,
        logger: LoggerProtocol | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            store: Versioned store adapter (owns the backend connection).
            codec: Payload codec (default: SerializationCodec()).
            logger: Structured logger (default: container logger).
        """
        if logger is None:
            from secretcache.core.container import get_logger

            logger = get_logger()
        self._store = store
        self._codec = codec or SerializationCodec()
        self._logger = logger.bind(namespace=store.namespace)

    @property
    def namespace(self) -> str:
        """Namespace of the underlying store."""
        return self._store.namespace

    # ------------------------------------------------------------------
    # Single-key operations
    # ------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """Fetch the current value of a key.

        Args:
            key: Cache key.
            default: Returned on miss, on any backend failure, or when the
                latest version carries no payload.

        Returns:
            Decoded value of the latest version, or default.

        Raises:
            InvalidKeyError: If key is malformed.
        """
        return self._get(_require_key(key), default)

    def create(self, key: str, value: Any = None) -> bool:
        """Create the key's container, optionally with a first version.

        Args:
            key: Cache key.
            value: Optional initial value (None creates an empty container).

        Returns:
            True if the container was created and, when a value was given,
            its first version appended. False otherwise (e.g. already exists).

        Raises:
            InvalidKeyError: If key is malformed.
            UnserializableValueError: If value cannot be encoded.
        """
        key = _require_key(key)
        payload = self._codec.encode(value) if value is not None else None
        return isinstance(self._create(key, payload), Success)

    def set(self, key: str, value: Any, ttl: TTL = None) -> bool:
        """Store a value as the key's new latest version.

        Args:
            key: Cache key.
            value: String or JSON-serializable value.
            ttl: Any non-None value retires the version that was latest
                before this write. No time-based expiry is performed.

        Returns:
            True on success, False on failure.

        Raises:
            InvalidKeyError: If key is malformed.
            UnserializableValueError: If value cannot be encoded.
        """
        key = _require_key(key)
        payload = self._codec.encode(value)
        return isinstance(self._set(key, payload, ttl), Success)

    def delete(self, key: str) -> bool:
        """Delete a key and all of its versions.

        Returns:
            True if deleted, False if missing or on failure.

        Raises:
            InvalidKeyError: If key is malformed.
        """
        return isinstance(self._delete(_require_key(key)), Success)

    def has(self, key: str) -> bool:
        """Check whether a key's container exists.

        Subject to races: another process can create or delete the key
        right after this returns. Use for cache warming, not correctness.

        Raises:
            InvalidKeyError: If key is malformed.
        """
        key = _require_key(key)
        match self._store.get_container_metadata(key):
            case Success():
                return True
            case Failure(error=error):
                self._log_failure("has", key, error)
                return False

    def clear(self) -> bool:
        """Delete every container in the namespace.

        Not limited to keys written through this cache. The first listing or
        delete failure aborts the remaining work; containers already deleted
        stay deleted.

        Returns:
            True if every container was deleted, False otherwise.
        """
        deleted = 0
        for item in self._store.list_containers():
            match item:
                case Failure(error=error):
                    self._logger.warning(
                        "Cache clear aborted while listing",
                        deleted=deleted,
                        error_code=error.code.value,
                    )
                    return False
                case Success(value=container):
                    result = self._store.delete_container(container)
                    if isinstance(result, Failure):
                        self._logger.warning(
                            "Cache clear aborted while deleting",
                            key=container.key,
                            deleted=deleted,
                            error_code=result.error.code.value,
                        )
                        return False
                    deleted += 1

        self._logger.info("Cache cleared", deleted=deleted)
        return True

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        """Fetch several keys with independent reads.

        Args:
            keys: Iterable of cache keys.
            default: Value for keys that miss or fail.

        Returns:
            Mapping of key → value in input order.

        Raises:
            InvalidKeyError: If keys is not an iterable of valid keys. No
                backend call is made in that case.
        """
        valid_keys = _require_keys(keys)
        return {key: self._get(key, default) for key in valid_keys}

    def set_multiple(
        self,
        values: Mapping[str, Any] | Iterable[tuple[str, Any]],
        ttl: TTL = None,
    ) -> bool:
        """Store several entries with independent writes.

        Every entry is attempted even after a failure. Not atomic: entries
        that succeeded are kept when others fail.

        Args:
            values: Mapping or iterable of (key, value) pairs.
            ttl: Applied to every entry, as in set().

        Returns:
            True only if every entry was stored.

        Raises:
            InvalidKeyError: If any key is malformed, or values is not a
                mapping or an iterable of (key, value) pairs.
            UnserializableValueError: If any value cannot be encoded.
            Both are raised before any backend call.
        """
        payloads = [
            (key, self._codec.encode(value)) for key, value in _require_pairs(values)
        ]

        results = [self._set(key, payload, ttl) for key, payload in payloads]
        return all(isinstance(result, Success) for result in results)

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        """Delete several keys with independent deletes.

        Every key is attempted even after a failure.

        Returns:
            True only if every key was deleted.

        Raises:
            InvalidKeyError: If keys is not an iterable of valid keys. No
                backend call is made in that case.
        """
        valid_keys = _require_keys(keys)
        results = [self._delete(key) for key in valid_keys]
        return all(isinstance(result, Success) for result in results)

    # ------------------------------------------------------------------
    # Result-returning internals
    # ------------------------------------------------------------------

    def _get(self, key: str, default: Any) -> Any:
        match self._store.read_version(key):
            case Success(value=version):
                if version.payload is None:
                    return default
                return self._codec.decode(version.payload)
            case Failure(error=error):
                self._log_failure("get", key, error)
                return default

    def _create(
        self, key: str, payload: bytes | None
    ) -> Result[ContainerRef, SecretsError]:
        created = self._store.create_container(key)
        match created:
            case Failure(error=error):
                self._log_failure("create", key, error)
                return created
            case Success(value=container) if payload is not None:
                appended = self._store.add_version(container, payload)
                if isinstance(appended, Failure):
                    self._log_failure("create", key, appended.error)
                    return Failure(error=appended.error)
        return created

    def _set(
        self, key: str, payload: bytes, ttl: TTL
    ) -> Result[ContainerRef | VersionRef, SecretsError]:
        previous: VersionRef | None = None
        if ttl is not None:
            # Missing container is fine here: the append below will create it
            match self._store.read_version(key):
                case Success(value=version):
                    previous = version.ref
                case Failure(error=error):
                    self._log_failure("set", key, error)

        appended = self._store.add_version(self._store.container_ref(key), payload)
        match appended:
            case Success():
                if previous is not None:
                    self._retire(key, previous)
                return appended
            case Failure(error=error) if error.is_not_found:
                return self._create(key, payload)
            case Failure(error=error):
                self._log_failure("set", key, error)
                return appended

    def _retire(self, key: str, version: VersionRef) -> None:
        result = self._store.destroy_version(version)
        if isinstance(result, Failure):
            self._logger.warning(
                "Failed to retire previous version",
                key=key,
                version=version.version_id,
                error_code=result.error.code.value,
            )

    def _delete(self, key: str) -> Result[None, SecretsError]:
        result = self._store.delete_container(self._store.container_ref(key))
        if isinstance(result, Failure):
            self._log_failure("delete", key, result.error)
        return result

    def _log_failure(self, operation: str, key: str, error: SecretsError) -> None:
        if error.code is ErrorCode.SECRET_NOT_FOUND:
            self._logger.debug(
                "Cache miss", operation=operation, key=key, error_code=error.code.value
            )
        else:
            self._logger.warning(
                "Secrets backend call failed",
                operation=operation,
                key=key,
                error_code=error.code.value,
                error_message=error.message,
            )
