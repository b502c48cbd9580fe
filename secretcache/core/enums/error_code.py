"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, UNSERIALIZABLE_*)
- Configuration errors (MISSING_*)
- Secrets backend errors (SECRET_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    INVALID_KEY = "invalid_key"
    UNSERIALIZABLE_VALUE = "unserializable_value"

    # Configuration errors
    MISSING_NAMESPACE = "missing_namespace"

    # Secrets backend errors
    SECRET_NOT_FOUND = "secret_not_found"
    SECRET_ALREADY_EXISTS = "secret_already_exists"
    SECRET_ACCESS_DENIED = "secret_access_denied"
    SECRET_VERSION_IS_CURRENT = "secret_version_is_current"
    SECRET_BACKEND_UNAVAILABLE = "secret_backend_unavailable"
