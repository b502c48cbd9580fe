"""Static convenience facade over the per-namespace secret caches.

Usage:
    from secretcache import Secrets

    Secrets.create("api_key", "s3cr3t", namespace="myapp")
    Secrets.set("api_key", {"token": "abc"})   # SECRETS_NAMESPACE
    Secrets.get("api_key")                      # {'token': 'abc'}

Each call resolves its cache through get_secret_cache(namespace), so all
calls for one namespace share a single backend client. Code that needs
isolation (tests, multiple accounts) should build SecretCache directly.
"""

from typing import Any

from secretcache.core.container import get_secret_cache


class Secrets:
    """Namespace-keyed static access to SecretCache instances."""

    def __init__(self) -> None:
        raise TypeError("Secrets is a static facade and cannot be instantiated")

    @staticmethod
    def create(secret_id: str, data: Any = None, namespace: str | None = None) -> bool:
        """Create a secret, optionally with an initial value."""
        return get_secret_cache(namespace).create(secret_id, data)

    @staticmethod
    def set(secret_id: str, data: Any, namespace: str | None = None) -> bool:
        """Store a new version of a secret (no retirement of old versions)."""
        return get_secret_cache(namespace).set(secret_id, data)

    @staticmethod
    def get(secret_id: str, namespace: str | None = None) -> Any:
        """Return a secret's current value, or None."""
        return get_secret_cache(namespace).get(secret_id, None)

    @staticmethod
    def delete(secret_id: str, namespace: str | None = None) -> bool:
        """Delete a secret and all of its versions."""
        return get_secret_cache(namespace).delete(secret_id)

    @staticmethod
    def has(secret_id: str, namespace: str | None = None) -> bool:
        """Hint whether a secret exists."""
        return get_secret_cache(namespace).has(secret_id)
