"""Versioned store adapters implementing VersionedStoreProtocol.

All store dependencies are managed through secretcache.core.container.

Architecture:
- AWSAdapter: Production (AWS Secrets Manager via boto3)
- MemoryAdapter: Tests and local development (process-local, thread-safe)
- Use secretcache.core.container.get_versioned_store() for dependency injection

Backend selection:
- SECRETS_BACKEND=aws (default)
- SECRETS_BACKEND=memory
"""

from secretcache.infrastructure.secrets.aws_adapter import AWSAdapter
from secretcache.infrastructure.secrets.memory_adapter import MemoryAdapter

__all__ = [
    "AWSAdapter",
    "MemoryAdapter",
]
