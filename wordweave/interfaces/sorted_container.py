"""
SortedContainer abstract base class for sorted word-meaning structures.
"""

from abc import abstractmethod

from wordweave.interfaces.range_iterable import RangeIterable
from wordweave.models.entry import DeleteResult


class SortedContainer(RangeIterable):
    """
    Abstract base class for sorted key-value containers.

    Provides O(log N) operations for put, get, and delete.
    Inherits range iteration capabilities from RangeIterable.

    Implementations:
    - BalancedWordTree: AVL tree, height kept within 1.44 * log2(N + 2)
    """

    @abstractmethod
    def put(self, key: str, value: str) -> None:
        """
        Insert or update a key-value pair.

        Args:
            key: The key to insert/update.
            value: The value to associate with the key.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def get(self, key: str) -> str | None:
        """
        Retrieve the value for a given key.

        Args:
            key: The key to look up.

        Returns:
            The value if found, None otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check if a key exists.

        Args:
            key: The key to check.

        Returns:
            True if the key exists, False otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> DeleteResult:
        """
        Remove a key-value pair.

        Args:
            key: The key to remove.

        Returns:
            DeleteResult.DELETED if the key was removed, NOT_FOUND otherwise.

        Time complexity: O(log N)
        """
        pass

    @abstractmethod
    def keys_with_prefix(self, prefix: str, limit: int) -> list[str]:
        """
        Collect keys starting with a prefix, in sorted order.

        Args:
            prefix: Leading characters every returned key must have.
            limit: Maximum number of keys to return.

        Returns:
            At most `limit` matching keys, ascending.
        """
        pass

    @abstractmethod
    def size(self) -> int:
        """
        Return the number of key-value pairs.

        Returns:
            The count of entries in the container.

        Time complexity: O(1)
        """
        pass

    @abstractmethod
    def size_bytes(self) -> int:
        """
        Return the approximate size in bytes.

        Returns:
            Estimated memory usage in bytes.
        """
        pass
