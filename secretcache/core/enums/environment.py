"""Runtime environment and backend selection enums.

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution, in-memory secrets backend by default
- CI: Continuous integration environment
- PRODUCTION: Real secrets backend, JSON logs

Backends:
- AWS: AWS Secrets Manager (boto3)
- MEMORY: In-process store (tests, local experiments)
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"


class SecretsBackend(str, Enum):
    """Versioned store implementations selectable via SECRETS_BACKEND."""

    AWS = "aws"
    MEMORY = "memory"
