"""Key-value provider contract tests."""

import uuid
from abc import ABC, abstractmethod

import pytest


class KeyValueContractTest(ABC):
    """Base class for KeyValue provider contract tests."""

    @pytest.fixture
    @abstractmethod
    def provider(self):
        """Create the provider instance under test (empty store)."""
        pass

    @pytest.fixture
    def test_key(self) -> str:
        return f"record:test-{uuid.uuid4().hex[:8]}"

    def test_get_missing_returns_none(self, provider, test_key):
        """get() must return None for an unknown key."""
        assert provider.get(test_key) is None

    def test_put_then_get(self, provider, test_key):
        """get() must return exactly what put() stored."""
        provider.put(test_key, '{"text": "灵感"}')

        assert provider.get(test_key) == '{"text": "灵感"}'

    def test_put_overwrites(self, provider, test_key):
        provider.put(test_key, "first")
        provider.put(test_key, "second")

        assert provider.get(test_key) == "second"

    def test_delete_returns_bool(self, provider, test_key):
        """delete() must report whether the key existed."""
        provider.put(test_key, "value")

        assert provider.delete(test_key) is True
        assert provider.get(test_key) is None
        assert provider.delete(test_key) is False

    def test_list_keys_filters_by_prefix(self, provider):
        """list_keys() must return only keys under the prefix, sorted."""
        provider.put("record:b", "2")
        provider.put("record:a", "1")
        provider.put("inspirations:index", "[]")

        assert provider.list_keys("record:") == ["record:a", "record:b"]

    def test_list_keys_without_prefix(self, provider):
        provider.put("record:a", "1")
        provider.put("inspirations:index", "[]")

        assert provider.list_keys() == ["inspirations:index", "record:a"]

    def test_ping_returns_bool(self, provider):
        assert isinstance(provider.ping(), bool)

    def test_get_name_returns_string(self, provider):
        name = provider.get_name()

        assert isinstance(name, str)
        assert len(name) > 0
