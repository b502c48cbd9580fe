"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from secretcache.core.enums import ErrorCode, Environment, SecretsBackend
"""

from secretcache.core.enums.environment import Environment, SecretsBackend
from secretcache.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment", "SecretsBackend"]
