"""AWS Secrets Manager adapter implementing VersionedStoreProtocol.

Maps the versioned store primitives onto Secrets Manager:
    - container            → secret named '{namespace}/{key}'
    - add_version          → PutSecretValue (new version becomes AWSCURRENT)
    - read_version         → GetSecretValue (AWSCURRENT or explicit VersionId)
    - destroy_version      → strip every staging label (version is deprecated
                             and reclaimed by AWS)
    - delete_container     → DeleteSecret without recovery window
    - list_containers      → ListSecrets paginator, filtered by name prefix

File: aws_adapter.py → class AWSAdapter (PEP 8 naming)
"""

from collections.abc import Iterator
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

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

CURRENT_STAGE = "AWSCURRENT"

_ERROR_CODES = {
    "ResourceNotFoundException": ErrorCode.SECRET_NOT_FOUND,
    "ResourceExistsException": ErrorCode.SECRET_ALREADY_EXISTS,
    "AccessDeniedException": ErrorCode.SECRET_ACCESS_DENIED,
    "AccessDenied": ErrorCode.SECRET_ACCESS_DENIED,
}


class AWSAdapter:
    """Versioned store backed by AWS Secrets Manager.

    Features:
        - Namespace is a secret name prefix: /{namespace}/{key} → '{namespace}/{key}'
        - UTF-8 payloads stored as SecretString, anything else as SecretBinary
        - Timeouts configured once on the boto3 client and applied to every call
        - Automatic retry with exponential backoff (boto3 default)

    Attributes:
        client: boto3 Secrets Manager client.
    """

    def __init__(
        self,
        namespace: str | None = None,
        region: str = "us-east-1",
        timeout: float | None = None,
        client: Any = None,
    ) -> None:
        """Initialize AWS Secrets Manager client.

        Args:
            namespace: Secret name prefix; falls back to SECRETS_NAMESPACE.
            region: AWS region for secrets (default: us-east-1).
            timeout: Connect/read timeout in seconds for every call.
            client: Pre-built boto3 client (shared connection); overrides
                region and timeout.

        Raises:
            MissingNamespaceError: If no namespace can be resolved.
        """
        self._namespace = resolve_namespace(namespace)
        if client is None:
            config = (
                Config(connect_timeout=timeout, read_timeout=timeout)
                if timeout is not None
                else None
            )
            client = boto3.client("secretsmanager", region_name=region, config=config)
        self.client = client

    @property
    def namespace(self) -> str:
        """Namespace every key is resolved under."""
        return self._namespace

    def container_ref(self, key: str) -> ContainerRef:
        """Build the address of a key's secret."""
        return ContainerRef(
            namespace=self._namespace,
            key=key,
            name=f"{self._namespace}/{key}",
        )

    def create_container(self, key: str) -> Result[ContainerRef, SecretsError]:
        """Create a secret with no value (zero versions)."""
        container = self.container_ref(key)
        try:
            self.client.create_secret(Name=container.name)
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "create_container", key))
        return Success(value=container)

    def add_version(
        self, container: ContainerRef, payload: bytes
    ) -> Result[VersionRef, SecretsError]:
        """Append a version; it becomes AWSCURRENT, the old one AWSPREVIOUS."""
        try:
            text = payload.decode("utf-8")
            value: dict[str, Any] = {"SecretString": text}
        except UnicodeDecodeError:
            value = {"SecretBinary": payload}

        try:
            response = self.client.put_secret_value(SecretId=container.name, **value)
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "add_version", container.key))
        return Success(
            value=VersionRef(container=container, version_id=response["VersionId"])
        )

    def read_version(
        self, key: str, version: str = LATEST_VERSION
    ) -> Result[SecretVersion, SecretsError]:
        """Read AWSCURRENT, or a specific VersionId."""
        container = self.container_ref(key)
        params: dict[str, Any] = {"SecretId": container.name}
        if version != LATEST_VERSION:
            params["VersionId"] = version

        try:
            response = self.client.get_secret_value(**params)
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "read_version", key))

        payload: bytes | None
        if response.get("SecretString") is not None:
            payload = response["SecretString"].encode("utf-8")
        elif response.get("SecretBinary") is not None:
            payload = bytes(response["SecretBinary"])
        else:
            payload = None

        ref = VersionRef(
            container=container,
            version_id=response["VersionId"],
            created_at=response.get("CreatedDate"),
        )
        return Success(value=SecretVersion(ref=ref, payload=payload))

    def destroy_version(self, version: VersionRef) -> Result[None, SecretsError]:
        """Strip every staging label from a non-current version.

        Secrets Manager cannot delete a single version directly; a version
        without labels is deprecated and reclaimed by AWS. The AWSCURRENT
        version cannot be retired this way.
        """
        container = version.container
        try:
            described = self.client.describe_secret(SecretId=container.name)
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "destroy_version", container.key))

        stages = described.get("VersionIdsToStages", {}).get(version.version_id)
        # A version without labels is already deprecated
        if not stages:
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_NOT_FOUND,
                    message=f"Secret version not found: "
                    f"{container.name}@{version.version_id}",
                    operation="destroy_version",
                    details={"key": container.key, "version": version.version_id},
                )
            )
        if CURRENT_STAGE in stages:
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_VERSION_IS_CURRENT,
                    message=f"Cannot destroy current version: "
                    f"{container.name}@{version.version_id}",
                    operation="destroy_version",
                    details={"key": container.key, "version": version.version_id},
                )
            )

        try:
            for stage in stages:
                self.client.update_secret_version_stage(
                    SecretId=container.name,
                    VersionStage=stage,
                    RemoveFromVersionId=version.version_id,
                )
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "destroy_version", container.key))
        return Success(value=None)

    def delete_container(self, container: ContainerRef) -> Result[None, SecretsError]:
        """Delete a secret immediately (no recovery window)."""
        try:
            self.client.delete_secret(
                SecretId=container.name, ForceDeleteWithoutRecovery=True
            )
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "delete_container", container.key))
        return Success(value=None)

    def list_containers(self) -> Iterator[Result[ContainerRef, SecretsError]]:
        """Lazily page through every secret under the namespace prefix."""
        prefix = f"{self._namespace}/"
        paginator = self.client.get_paginator("list_secrets")
        pages = paginator.paginate(
            Filters=[{"Key": "name", "Values": [self._namespace]}]
        )
        try:
            for page in pages:
                for entry in page.get("SecretList", []):
                    name = entry["Name"]
                    # Name filter is a loose prefix match on AWS
                    if not name.startswith(prefix) or len(name) == len(prefix):
                        continue
                    yield Success(
                        value=ContainerRef(
                            namespace=self._namespace,
                            key=name[len(prefix) :],
                            name=name,
                        )
                    )
        except (ClientError, BotoCoreError) as e:
            yield Failure(error=self._map_error(e, "list_containers", None))

    def get_container_metadata(
        self, key: str
    ) -> Result[ContainerMetadata, SecretsError]:
        """Describe a secret; one pending deletion counts as missing."""
        container = self.container_ref(key)
        try:
            described = self.client.describe_secret(SecretId=container.name)
        except (ClientError, BotoCoreError) as e:
            return Failure(
                error=self._map_error(e, "get_container_metadata", key)
            )

        if described.get("DeletedDate") is not None:
            return Failure(
                error=SecretsError(
                    code=ErrorCode.SECRET_NOT_FOUND,
                    message=f"Secret scheduled for deletion: {container.name}",
                    operation="get_container_metadata",
                    details={"key": key},
                )
            )
        return Success(
            value=ContainerMetadata(
                ref=container,
                created_at=described.get("CreatedDate"),
                version_count=sum(
                    1
                    for stages in described.get("VersionIdsToStages", {}).values()
                    if stages
                ),
            )
        )

    def list_versions(self, key: str) -> Result[list[VersionRef], SecretsError]:
        """List versions that still carry a staging label, oldest first."""
        container = self.container_ref(key)
        versions: list[VersionRef] = []
        params: dict[str, Any] = {"SecretId": container.name}
        try:
            while True:
                response = self.client.list_secret_version_ids(**params)
                for entry in response.get("Versions", []):
                    if not entry.get("VersionStages"):
                        continue
                    versions.append(
                        VersionRef(
                            container=container,
                            version_id=entry["VersionId"],
                            created_at=entry.get("CreatedDate"),
                        )
                    )
                next_token = response.get("NextToken")
                if not next_token:
                    break
                params["NextToken"] = next_token
        except (ClientError, BotoCoreError) as e:
            return Failure(error=self._map_error(e, "list_versions", key))

        # Stable sort keeps API order for versions created in the same second
        versions.sort(key=lambda v: (v.created_at is None, v.created_at or 0))
        return Success(value=versions)

    def _map_error(
        self, error: ClientError | BotoCoreError, operation: str, key: str | None
    ) -> SecretsError:
        details = {"error": str(error)}
        if key is not None:
            details["key"] = key

        if isinstance(error, ClientError):
            aws_code = error.response.get("Error", {}).get("Code", "")
            details["aws_error_code"] = aws_code
            code = _ERROR_CODES.get(aws_code, ErrorCode.SECRET_BACKEND_UNAVAILABLE)
        else:
            code = ErrorCode.SECRET_BACKEND_UNAVAILABLE

        target = f"{self._namespace}/{key}" if key is not None else self._namespace
        return SecretsError(
            code=code,
            message=f"AWS Secrets Manager {operation} failed: {target}",
            operation=operation,
            details=details,
        )
