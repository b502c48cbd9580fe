"""In-memory versioned store for tests and local development.

Implements VersionedStoreProtocol with the same observable semantics as the
cloud adapters: containers must be created before versions are appended,
versions are immutable and numbered by ordinal, destroyed versions stay in
the chain but can no longer be read.

File: memory_adapter.py → class MemoryAdapter (PEP 8 naming)
"""

import threading
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import UTC, datetime

from secretcache.core.config import resolve_namespace
from secretcache.core.enums import ErrorCode
from secretcache.core.result import Failure, Result, Success
from secretcache.domain.errors import SecretsError
from secretcache.domain.value_objects import (
    LATEST_VERSION,
    ContainerMetadata,
    ContainerRef,
    SecretVersion,
    VersionRef,
)


@dataclass(slots=True)
class _StoredVersion:
    ordinal: int
    payload: bytes
    created_at: datetime
    destroyed: bool = False


@dataclass(slots=True)
class _StoredContainer:
    created_at: datetime
    versions: list[_StoredVersion] = field(default_factory=list)


class MemoryAdapter:
    """Process-local versioned store.

    A single lock guards the whole state, so each primitive is atomic the way
    a real backend's RPCs are. Nothing coordinates across primitives.
    """

    def __init__(self, namespace: str | None = None) -> None:
        """Initialize an empty store.

        Args:
            namespace: Namespace to bind to; falls back to SECRETS_NAMESPACE.

        Raises:
            MissingNamespaceError: If no namespace can be resolved.
        """
        self._namespace = resolve_namespace(namespace)
        self._containers: dict[str, _StoredContainer] = {}
        self._lock = threading.Lock()

    @property
    def namespace(self) -> str:
        """Namespace every key is resolved under."""
        return self._namespace

    def container_ref(self, key: str) -> ContainerRef:
        """Build the address of a key's container."""
        return ContainerRef(
            namespace=self._namespace,
            key=key,
            name=f"{self._namespace}/{key}",
        )

    def create_container(self, key: str) -> Result[ContainerRef, SecretsError]:
        """Create an empty container."""
        with self._lock:
            if key in self._containers:
                return Failure(
                    error=SecretsError(
                        code=ErrorCode.SECRET_ALREADY_EXISTS,
                        message=f"Secret already exists: {self._namespace}/{key}",
                        operation="create_container",
                    )
                )
            self._containers[key] = _StoredContainer(created_at=datetime.now(UTC))
        return Success(value=self.container_ref(key))

    def add_version(
        self, container: ContainerRef, payload: bytes
    ) -> Result[VersionRef, SecretsError]:
        """Append a version to an existing container."""
        with self._lock:
            stored = self._containers.get(container.key)
            if stored is None:
                return self._not_found(container.key, "add_version")
            version = _StoredVersion(
                ordinal=len(stored.versions) + 1,
                payload=bytes(payload),
                created_at=datetime.now(UTC),
            )
            stored.versions.append(version)
        return Success(value=self._version_ref(container.key, version))

    def read_version(
        self, key: str, version: str = LATEST_VERSION
    ) -> Result[SecretVersion, SecretsError]:
        """Read the latest live version, or a specific ordinal."""
        with self._lock:
            stored = self._containers.get(key)
            if stored is None:
                return self._not_found(key, "read_version")

            found = self._find_version(stored, version)
            if found is None:
                return Failure(
                    error=SecretsError(
                        code=ErrorCode.SECRET_NOT_FOUND,
                        message=f"Secret version not found: "
                        f"{self._namespace}/{key}@{version}",
                        operation="read_version",
                        details={"key": key, "version": version},
                    )
                )
            payload = found.payload
        return Success(
            value=SecretVersion(ref=self._version_ref(key, found), payload=payload)
        )

    def destroy_version(self, version: VersionRef) -> Result[None, SecretsError]:
        """Mark one version destroyed (it stays in the chain, unreadable)."""
        key = version.container.key
        with self._lock:
            stored = self._containers.get(key)
            if stored is None:
                return self._not_found(key, "destroy_version")
            found = self._find_version(stored, version.version_id)
            if found is None:
                return Failure(
                    error=SecretsError(
                        code=ErrorCode.SECRET_NOT_FOUND,
                        message=f"Secret version not found: "
                        f"{self._namespace}/{key}@{version.version_id}",
                        operation="destroy_version",
                        details={"key": key, "version": version.version_id},
                    )
                )
            found.destroyed = True
        return Success(value=None)

    def delete_container(self, container: ContainerRef) -> Result[None, SecretsError]:
        """Remove a container and every version it holds."""
        with self._lock:
            if self._containers.pop(container.key, None) is None:
                return self._not_found(container.key, "delete_container")
        return Success(value=None)

    def list_containers(self) -> Iterator[Result[ContainerRef, SecretsError]]:
        """Enumerate a snapshot of the namespace's containers."""
        with self._lock:
            keys = list(self._containers)
        for key in keys:
            yield Success(value=self.container_ref(key))

    def get_container_metadata(
        self, key: str
    ) -> Result[ContainerMetadata, SecretsError]:
        """Return container metadata."""
        with self._lock:
            stored = self._containers.get(key)
            if stored is None:
                return self._not_found(key, "get_container_metadata")
            live = sum(1 for v in stored.versions if not v.destroyed)
            created_at = stored.created_at
        return Success(
            value=ContainerMetadata(
                ref=self.container_ref(key),
                created_at=created_at,
                version_count=live,
            )
        )

    def list_versions(self, key: str) -> Result[list[VersionRef], SecretsError]:
        """List live versions, oldest first."""
        with self._lock:
            stored = self._containers.get(key)
            if stored is None:
                return self._not_found(key, "list_versions")
            live = [v for v in stored.versions if not v.destroyed]
        return Success(value=[self._version_ref(key, v) for v in live])

    @staticmethod
    def _find_version(
        stored: _StoredContainer, selector: str
    ) -> _StoredVersion | None:
        live = [v for v in stored.versions if not v.destroyed]
        if selector == LATEST_VERSION:
            return live[-1] if live else None
        for version in live:
            if str(version.ordinal) == selector:
                return version
        return None

    def _version_ref(self, key: str, version: _StoredVersion) -> VersionRef:
        return VersionRef(
            container=self.container_ref(key),
            version_id=str(version.ordinal),
            created_at=version.created_at,
        )

    def _not_found(self, key: str, operation: str) -> Failure[SecretsError]:
        return Failure(
            error=SecretsError(
                code=ErrorCode.SECRET_NOT_FOUND,
                message=f"Secret not found: {self._namespace}/{key}",
                operation=operation,
                details={"key": key},
            )
        )
