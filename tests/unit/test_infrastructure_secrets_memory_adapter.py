"""Unit tests for MemoryAdapter (in-process versioned store).

Tests cover:
- Container lifecycle (create, duplicate create, delete)
- Version chain semantics (append, latest, explicit ordinal, destroy)
- Listing and metadata
- Namespace resolution
"""

import threading

import pytest

from secretcache.core.enums import ErrorCode
from secretcache.core.errors import MissingNamespaceError
from secretcache.core.result import Failure, Success
from secretcache.domain.errors import SecretsError
from secretcache.domain.value_objects import ContainerRef
from secretcache.infrastructure.secrets.memory_adapter import MemoryAdapter


@pytest.mark.unit
class TestMemoryAdapterInitialization:
    """Test MemoryAdapter construction."""

    def test_explicit_namespace(self):
        assert MemoryAdapter(namespace="myapp").namespace == "myapp"

    def test_namespace_from_environment(self, monkeypatch):
        monkeypatch.setenv("SECRETS_NAMESPACE", "from-env")

        assert MemoryAdapter().namespace == "from-env"

    def test_missing_namespace_raises(self):
        with pytest.raises(MissingNamespaceError):
            MemoryAdapter()

    def test_container_ref_is_namespace_qualified(self, memory_store):
        ref = memory_store.container_ref("api_key")

        assert ref == ContainerRef(
            namespace="test-ns", key="api_key", name="test-ns/api_key"
        )


@pytest.mark.unit
class TestMemoryAdapterContainers:
    """Test container create/delete."""

    def test_create_container(self, memory_store):
        result = memory_store.create_container("api_key")

        assert isinstance(result, Success)
        assert result.value.key == "api_key"

    def test_create_existing_container_fails(self, memory_store):
        memory_store.create_container("api_key")

        result = memory_store.create_container("api_key")

        assert isinstance(result, Failure)
        assert isinstance(result.error, SecretsError)
        assert result.error.code == ErrorCode.SECRET_ALREADY_EXISTS
        assert result.error.operation == "create_container"

    def test_delete_container(self, memory_store):
        ref = memory_store.create_container("api_key").value

        assert isinstance(memory_store.delete_container(ref), Success)
        assert isinstance(memory_store.get_container_metadata("api_key"), Failure)

    def test_delete_missing_container_fails(self, memory_store):
        result = memory_store.delete_container(memory_store.container_ref("nope"))

        assert isinstance(result, Failure)
        assert result.error.is_not_found


@pytest.mark.unit
class TestMemoryAdapterVersions:
    """Test version chain semantics."""

    def test_new_container_has_no_readable_version(self, memory_store):
        memory_store.create_container("api_key")

        result = memory_store.read_version("api_key")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.SECRET_NOT_FOUND

    def test_add_version_to_missing_container_fails(self, memory_store):
        result = memory_store.add_version(memory_store.container_ref("nope"), b"x")

        assert isinstance(result, Failure)
        assert result.error.is_not_found
        assert result.error.operation == "add_version"

    def test_latest_is_most_recent_version(self, memory_store):
        ref = memory_store.create_container("api_key").value
        memory_store.add_version(ref, b"one")
        memory_store.add_version(ref, b"two")

        result = memory_store.read_version("api_key")

        assert isinstance(result, Success)
        assert result.value.payload == b"two"
        assert result.value.ref.version_id == "2"

    def test_read_explicit_version(self, memory_store):
        ref = memory_store.create_container("api_key").value
        memory_store.add_version(ref, b"one")
        memory_store.add_version(ref, b"two")

        result = memory_store.read_version("api_key", "1")

        assert result.value.payload == b"one"

    def test_read_unknown_version_fails(self, memory_store):
        ref = memory_store.create_container("api_key").value
        memory_store.add_version(ref, b"one")

        result = memory_store.read_version("api_key", "7")

        assert isinstance(result, Failure)
        assert result.error.details == {"key": "api_key", "version": "7"}

    def test_destroy_version_hides_it(self, memory_store):
        ref = memory_store.create_container("api_key").value
        first = memory_store.add_version(ref, b"one").value
        memory_store.add_version(ref, b"two")

        assert isinstance(memory_store.destroy_version(first), Success)
        assert isinstance(memory_store.read_version("api_key", "1"), Failure)
        assert [v.version_id for v in memory_store.list_versions("api_key").value] == [
            "2"
        ]

    def test_destroying_latest_falls_back_to_previous(self, memory_store):
        ref = memory_store.create_container("api_key").value
        memory_store.add_version(ref, b"one")
        second = memory_store.add_version(ref, b"two").value

        memory_store.destroy_version(second)

        assert memory_store.read_version("api_key").value.payload == b"one"

    def test_ordinals_keep_increasing_after_destroy(self, memory_store):
        ref = memory_store.create_container("api_key").value
        first = memory_store.add_version(ref, b"one").value
        memory_store.destroy_version(first)

        third = memory_store.add_version(ref, b"two").value

        assert third.version_id == "2"

    def test_destroy_twice_fails(self, memory_store):
        ref = memory_store.create_container("api_key").value
        first = memory_store.add_version(ref, b"one").value
        memory_store.destroy_version(first)

        result = memory_store.destroy_version(first)

        assert isinstance(result, Failure)
        assert result.error.operation == "destroy_version"

    def test_list_versions_missing_container_fails(self, memory_store):
        assert isinstance(memory_store.list_versions("nope"), Failure)


@pytest.mark.unit
class TestMemoryAdapterListing:
    """Test list_containers() and metadata."""

    def test_list_containers(self, memory_store):
        for key in ("a", "b", "c"):
            memory_store.create_container(key)

        keys = [item.value.key for item in memory_store.list_containers()]

        assert keys == ["a", "b", "c"]

    def test_list_containers_snapshot_tolerates_deletes(self, memory_store):
        for key in ("a", "b"):
            memory_store.create_container(key)

        for item in memory_store.list_containers():
            assert isinstance(memory_store.delete_container(item.value), Success)

        assert list(memory_store.list_containers()) == []

    def test_namespaces_are_isolated_per_instance(self):
        first = MemoryAdapter(namespace="one")
        second = MemoryAdapter(namespace="two")
        first.create_container("a")

        assert list(second.list_containers()) == []

    def test_metadata_counts_live_versions(self, memory_store):
        ref = memory_store.create_container("api_key").value
        first = memory_store.add_version(ref, b"one").value
        memory_store.add_version(ref, b"two")
        memory_store.destroy_version(first)

        result = memory_store.get_container_metadata("api_key")

        assert isinstance(result, Success)
        assert result.value.version_count == 1
        assert result.value.created_at is not None


@pytest.mark.unit
class TestMemoryAdapterConcurrency:
    """Test primitives stay consistent under concurrent callers."""

    def test_concurrent_appends_get_unique_ordinals(self, memory_store):
        ref = memory_store.create_container("api_key").value

        def append():
            for _ in range(50):
                memory_store.add_version(ref, b"x")

        threads = [threading.Thread(target=append) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [v.version_id for v in memory_store.list_versions("api_key").value]
        assert len(ids) == 200
        assert len(set(ids)) == 200
