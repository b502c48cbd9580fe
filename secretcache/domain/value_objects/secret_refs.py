"""Addressing value objects for containers and versions.

A container is the backend's unit of storage for one cache key. A version is
one immutable payload appended to a container. These objects only address
things; they never hold a live backend handle.

Version selectors:
    LATEST_VERSION ("latest") or an explicit version id string.
"""

from dataclasses import dataclass
from datetime import datetime

LATEST_VERSION = "latest"


@dataclass(frozen=True, slots=True, kw_only=True)
class ContainerRef:
    """Address of a container.

    Attributes:
        namespace: Namespace the container lives in.
        key: Cache key (the container id within the namespace).
        name: Backend resource name (e.g. 'myapp/api_key' on AWS).
    """

    namespace: str
    key: str
    name: str


@dataclass(frozen=True, slots=True, kw_only=True)
class VersionRef:
    """Address of one version of a container.

    Attributes:
        container: Container the version belongs to.
        version_id: Backend version identifier.
        created_at: Creation time when the backend reports it.
    """

    container: ContainerRef
    version_id: str
    created_at: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class SecretVersion:
    """A version read back from the store.

    Attributes:
        ref: Address of the version that was read.
        payload: Raw bytes, or None when the version carries no payload.
    """

    ref: VersionRef
    payload: bytes | None


@dataclass(frozen=True, slots=True, kw_only=True)
class ContainerMetadata:
    """Container metadata (no payload).

    Attributes:
        ref: Address of the container.
        created_at: Creation time when the backend reports it.
        version_count: Number of versions the backend still tracks.
    """

    ref: ContainerRef
    created_at: datetime | None = None
    version_count: int = 0
