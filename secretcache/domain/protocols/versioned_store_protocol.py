"""Versioned store protocol (port) for hexagonal architecture.

This protocol defines the backend primitives the cache layer composes. A
versioned store keeps, per key, an append-only chain of immutable versions
that can only be destroyed, never rewritten.

Protocol Pattern:
    - Domain defines the PORT (this protocol)
    - Infrastructure implements ADAPTERS (AWSAdapter, MemoryAdapter)
    - SecretCache uses the protocol (backend-agnostic)

Every primitive returns a Result. Backend exceptions never cross the port.
Timeouts, retries and credentials belong to the adapter's client, configured
at construction.
"""

from collections.abc import Iterator
from typing import Protocol

from secretcache.core.result import Result
from secretcache.domain.errors import SecretsError
from secretcache.domain.value_objects import (
    LATEST_VERSION,
    ContainerMetadata,
    ContainerRef,
    SecretVersion,
    VersionRef,
)


class VersionedStoreProtocol(Protocol):
    """Protocol for append-only, versioned secret stores.

    One adapter instance is bound to one namespace for its lifetime.

    Implementations:
        - AWSAdapter: AWS Secrets Manager
        - MemoryAdapter: In-process store (tests, local development)
    """

    @property
    def namespace(self) -> str:
        """Namespace every key is resolved under."""
        ...

    def container_ref(self, key: str) -> ContainerRef:
        """Build the address of a key's container (no backend call)."""
        ...

    def create_container(self, key: str) -> Result[ContainerRef, SecretsError]:
        """Create an empty container (no versions).

        Returns:
            Success(ContainerRef) if created.
            Failure(SecretsError) with SECRET_ALREADY_EXISTS if it exists.
        """
        ...

    def add_version(
        self, container: ContainerRef, payload: bytes
    ) -> Result[VersionRef, SecretsError]:
        """Append an immutable version to an existing container.

        Returns:
            Success(VersionRef) of the new version.
            Failure(SecretsError) with SECRET_NOT_FOUND if no container.
        """
        ...

    def read_version(
        self, key: str, version: str = LATEST_VERSION
    ) -> Result[SecretVersion, SecretsError]:
        """Read a version (latest by default).

        Returns:
            Success(SecretVersion) if found.
            Failure(SecretsError) with SECRET_NOT_FOUND otherwise.
        """
        ...

    def destroy_version(self, version: VersionRef) -> Result[None, SecretsError]:
        """Destroy (retire) one specific version."""
        ...

    def delete_container(self, container: ContainerRef) -> Result[None, SecretsError]:
        """Delete a container and all of its versions."""
        ...

    def list_containers(self) -> Iterator[Result[ContainerRef, SecretsError]]:
        """Lazily enumerate every container in the namespace.

        The iterator is finite and not restartable. A listing failure is
        yielded as a final Failure, after which iteration stops.
        """
        ...

    def get_container_metadata(
        self, key: str
    ) -> Result[ContainerMetadata, SecretsError]:
        """Fetch container metadata without reading a payload."""
        ...

    def list_versions(self, key: str) -> Result[list[VersionRef], SecretsError]:
        """List live (not destroyed) versions of a container, oldest first."""
        ...
