"""Domain value objects.

Usage:
    from secretcache.domain.value_objects import ContainerRef, LATEST_VERSION
"""

from secretcache.domain.value_objects.secret_refs import (
    LATEST_VERSION,
    ContainerMetadata,
    ContainerRef,
    SecretVersion,
    VersionRef,
)

__all__ = [
    "LATEST_VERSION",
    "ContainerMetadata",
    "ContainerRef",
    "SecretVersion",
    "VersionRef",
]
