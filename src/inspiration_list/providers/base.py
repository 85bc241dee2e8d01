"""Base provider interfaces - Abstract base classes for all providers"""

from abc import ABC, abstractmethod


class KeyValueProvider(ABC):
    """Abstract base class for key-value store providers

    Values are opaque strings (the record store writes JSON). Providers are
    assumed eventually consistent and offer no transactions.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Read a value

        Args:
            key: Key to read

        Returns:
            Stored value or None if the key does not exist
        """
        pass

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """
        Create or overwrite a value

        Args:
            key: Key to write
            value: Serialized value
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> bool:
        """
        Delete a key

        Args:
            key: Key to delete

        Returns:
            True if the key existed
        """
        pass

    @abstractmethod
    def list_keys(self, prefix: str = "") -> list[str]:
        """
        List keys, optionally restricted to a prefix

        Args:
            prefix: Only return keys starting with this string

        Returns:
            Sorted list of keys
        """
        pass

    def ping(self) -> bool:
        """Check that the backend is reachable"""
        return True

    def get_name(self) -> str:
        """Get provider name"""
        return self.__class__.__name__
