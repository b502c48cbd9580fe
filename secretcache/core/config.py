"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Namespace resolution happens at adapter construction, never per call

Usage:
    from secretcache.core.config import settings

    backend = settings.secrets_backend
    namespace = resolve_namespace(None)  # SECRETS_NAMESPACE or MissingNamespaceError
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from secretcache.core.enums import Environment, SecretsBackend
from secretcache.core.errors import MissingNamespaceError

NAMESPACE_ENV_VAR = "SECRETS_NAMESPACE"


class Settings(BaseSettings):
    """
    Main package settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)

    Returns:
        Settings: Configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Secrets backend
    secrets_backend: SecretsBackend = Field(
        default=SecretsBackend.AWS,
        description="Versioned store implementation (aws, memory). "
        "Defaults to memory in the testing environment, aws otherwise.",
    )
    secrets_namespace: str | None = Field(
        default=None,
        description="Namespace all cache keys are resolved under "
        "(AWS: secret name prefix). Explicit arguments take precedence.",
    )
    secrets_timeout: float | None = Field(
        default=None,
        description="Connect/read timeout in seconds applied to every backend call. "
        "None keeps the backend client's defaults.",
    )
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region for Secrets Manager",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name in any case.

        Returns:
            str: Upper-cased level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("secrets_timeout")
    @classmethod
    def validate_secrets_timeout(cls, v: float | None) -> float | None:
        """
        Reject non-positive timeouts.

        Args:
            v: Timeout in seconds or None.

        Returns:
            float | None: Validated timeout.

        Raises:
            ValueError: If timeout is zero or negative.
        """
        if v is not None and v <= 0:
            raise ValueError("secrets_timeout must be positive")
        return v

    @field_validator("secrets_namespace")
    @classmethod
    def blank_namespace_is_unset(cls, v: str | None) -> str | None:
        """
        Treat an empty or whitespace-only namespace as unset.

        Args:
            v: Raw namespace value.

        Returns:
            str | None: Stripped namespace, or None.
        """
        if v is None or not v.strip():
            return None
        return v.strip()

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @model_validator(mode="after")
    def default_backend_for_environment(self) -> "Settings":
        """
        Use the in-memory backend in testing unless SECRETS_BACKEND is set.

        Returns:
            Settings: Self, with secrets_backend defaulted.
        """
        if "secrets_backend" not in self.model_fields_set and self.is_testing:
            self.secrets_backend = SecretsBackend.MEMORY
        return self


def resolve_namespace(namespace: str | None = None) -> str:
    """
    Resolve the namespace an adapter is bound to.

    An explicit argument wins. Otherwise the environment is read at call time
    (fresh Settings, not the cached instance) so adapters built after the
    environment changes see the new value.

    Args:
        namespace: Explicit namespace, or None to consult the environment.

    Returns:
        str: Resolved namespace.

    Raises:
        MissingNamespaceError: If neither source provides a namespace.
    """
    if namespace is not None and namespace.strip():
        return namespace.strip()

    resolved = Settings().secrets_namespace
    if resolved is None:
        raise MissingNamespaceError(NAMESPACE_ENV_VAR)
    return resolved


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
