"""
AVL Tree implementation for sorted word-meaning storage.

Keeps every subtree's height difference within one, so lookups, inserts
and deletes stay O(log N) regardless of insertion order.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from wordweave.interfaces.sorted_container import SortedContainer
from wordweave.models.entry import DeleteResult, Entry, UpdateResult
from wordweave.models.exceptions import TreeInvariantError

logger = logging.getLogger(__name__)

# Estimated per-node overhead on top of the encoded word and meaning
NODE_OVERHEAD_BYTES = 64


@dataclass
class Node:
    """Node in the AVL Tree."""

    word: str
    meaning: str
    left: "Node | None" = None
    right: "Node | None" = None
    height: int = 1


def _height(node: Node | None) -> int:
    return node.height if node is not None else 0


def _balance_factor(node: Node | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: Node) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


def _entry_bytes(word: str, meaning: str) -> int:
    return len(word.encode("utf-8")) + len(meaning.encode("utf-8")) + NODE_OVERHEAD_BYTES


class BalancedWordTree(SortedContainer):
    """
    AVL Tree implementation of SortedContainer, keyed by word.

    Properties maintained after every public operation:
    1. Binary search tree order on words (plain str comparison)
    2. Height of left and right subtrees differ by at most one
    3. Every node's height is 1 + the larger child height (absent child = 0)
    4. Words are unique
    """

    def __init__(self, debug: bool = False) -> None:
        """
        Initialize an empty tree.

        Args:
            debug: Run check_invariants() after every mutation.
        """
        self._root: Node | None = None
        self._size: int = 0
        self._size_bytes: int = 0
        self._debug = debug

    # Public word-store operations

    def insert(self, word: str, meaning: str) -> bool:
        """
        Insert a word, or overwrite the meaning of an existing one. O(log N)

        Returns:
            True if a new node was created, False if the word already existed.
        """
        size_before = self._size
        self._root = self._insert(self._root, word, meaning)
        created = self._size > size_before

        if not created:
            logger.info(f"Word already exists, meaning updated: {word!r}")
        self._after_mutation()
        return created

    def search(self, word: str) -> Entry | None:
        """Find a word. O(log N)"""
        node = self._find_node(word)
        if node is None:
            return None
        return Entry(word=node.word, meaning=node.meaning)

    def update(self, word: str, new_meaning: str, confirmed: bool) -> UpdateResult:
        """
        Replace the meaning of an existing word once the caller has confirmed.

        A declined update leaves the stored meaning untouched.
        """
        node = self._find_node(word)
        if node is None:
            return UpdateResult.NOT_FOUND
        if not confirmed:
            logger.debug(f"Update declined for {word!r}")
            return UpdateResult.UNCHANGED

        self._size_bytes += _entry_bytes(word, new_meaning) - _entry_bytes(word, node.meaning)
        node.meaning = new_meaning
        self._after_mutation()
        return UpdateResult.UPDATED

    def delete(self, word: str) -> DeleteResult:
        """Remove a word and rebalance. O(log N)"""
        node = self._find_node(word)
        if node is None:
            return DeleteResult.NOT_FOUND

        self._size_bytes -= _entry_bytes(node.word, node.meaning)
        self._root = self._delete(self._root, word)
        self._size -= 1
        self._after_mutation()
        return DeleteResult.DELETED

    def traverse_in_order(self) -> Iterator[tuple[str, str]]:
        """Yield (word, meaning) pairs in ascending word order."""
        return self.iterator()

    def prefix_suggestions(self, partial: str, limit: int) -> list[str]:
        """
        Collect up to `limit` words starting with `partial`, ascending.

        Words sharing a prefix are contiguous in sorted order, so the scan
        starts at `partial` and stops at the first non-matching word.
        """
        suggestions: list[str] = []
        if limit <= 0:
            return suggestions

        for word, _ in self.iterator(start=partial):
            if not word.startswith(partial):
                break
            suggestions.append(word)
            if len(suggestions) >= limit:
                break
        return suggestions

    def teardown(self) -> None:
        """Release every node. The tree stays usable as an empty tree."""
        self._root = None
        self._size = 0
        self._size_bytes = 0

    # SortedContainer interface

    def put(self, key: str, value: str) -> None:
        self.insert(key, value)

    def get(self, key: str) -> str | None:
        node = self._find_node(key)
        return node.meaning if node else None

    def has(self, key: str) -> bool:
        return self._find_node(key) is not None

    def keys_with_prefix(self, prefix: str, limit: int) -> list[str]:
        return self.prefix_suggestions(prefix, limit)

    def size(self) -> int:
        return self._size

    def size_bytes(self) -> int:
        return self._size_bytes

    def height(self) -> int:
        """Height of the whole tree, 0 when empty."""
        return _height(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def __len__(self) -> int:
        return self._size

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.has(word)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.iterator()

    def iterator(
        self, start: str | None = None, end: str | None = None
    ) -> Iterator[tuple[str, str]]:
        return _RangeIterator(self._root, start, end)

    # Consistency checks

    def check_invariants(self) -> None:
        """
        Walk the whole tree and verify order, balance, heights and size.

        Raises:
            TreeInvariantError: On the first violated property found.
        """
        count = self._check_subtree(self._root, None, None)[1]
        if count != self._size:
            raise TreeInvariantError(
                None, f"size counter is {self._size} but tree holds {count} nodes"
            )

    def _check_subtree(
        self, node: Node | None, low: str | None, high: str | None
    ) -> tuple[int, int]:
        """Return (height, node count) of a verified subtree."""
        if node is None:
            return 0, 0

        if low is not None and not node.word > low:
            raise TreeInvariantError(node.word, f"not greater than ancestor {low!r}")
        if high is not None and not node.word < high:
            raise TreeInvariantError(node.word, f"not less than ancestor {high!r}")

        left_height, left_count = self._check_subtree(node.left, low, node.word)
        right_height, right_count = self._check_subtree(node.right, node.word, high)

        if abs(left_height - right_height) > 1:
            raise TreeInvariantError(
                node.word,
                f"unbalanced: left height {left_height}, right height {right_height}",
            )
        expected = 1 + max(left_height, right_height)
        if node.height != expected:
            raise TreeInvariantError(
                node.word, f"stored height {node.height}, actual {expected}"
            )

        return expected, left_count + right_count + 1

    def _after_mutation(self) -> None:
        if self._debug:
            self.check_invariants()

    # Internals

    def _find_node(self, word: str) -> Node | None:
        """Find node by word."""
        current = self._root
        while current is not None:
            if word < current.word:
                current = current.left
            elif word > current.word:
                current = current.right
            else:
                return current
        return None

    def _insert(self, node: Node | None, word: str, meaning: str) -> Node:
        """Insert below `node` and return the new subtree root."""
        if node is None:
            self._size += 1
            self._size_bytes += _entry_bytes(word, meaning)
            return Node(word=word, meaning=meaning)

        if word < node.word:
            node.left = self._insert(node.left, word, meaning)
        elif word > node.word:
            node.right = self._insert(node.right, word, meaning)
        else:
            self._size_bytes += _entry_bytes(word, meaning) - _entry_bytes(word, node.meaning)
            node.meaning = meaning
            return node

        return self._rebalance(node)

    def _delete(self, node: Node | None, word: str) -> Node | None:
        """Delete `word` below `node` and return the new subtree root."""
        if node is None:
            return None

        if word < node.word:
            node.left = self._delete(node.left, word)
        elif word > node.word:
            node.right = self._delete(node.right, word)
        else:
            # Zero or one child: splice out
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            # Two children: take over the in-order successor's entry
            successor = node.right
            while successor.left is not None:
                successor = successor.left

            node.word = successor.word
            node.meaning = successor.meaning
            node.right = self._delete(node.right, successor.word)

        return self._rebalance(node)

    def _rebalance(self, node: Node) -> Node:
        """Restore the AVL property at `node` and return the subtree root."""
        _update_height(node)
        balance = _balance_factor(node)

        if balance > 1:
            # Left-right case
            if _balance_factor(node.left) < 0:
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            # Right-left case
            if _balance_factor(node.right) > 0:
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def _rotate_left(self, node: Node) -> Node:
        """Left rotation."""
        right_child = node.right

        node.right = right_child.left
        right_child.left = node

        _update_height(node)
        _update_height(right_child)
        return right_child

    def _rotate_right(self, node: Node) -> Node:
        """Right rotation."""
        left_child = node.left

        node.left = left_child.right
        left_child.right = node

        _update_height(node)
        _update_height(left_child)
        return left_child


class _RangeIterator(Iterator[tuple[str, str]]):
    """Iterator for range queries on the AVL Tree."""

    def __init__(self, root: Node | None, start: str | None, end: str | None) -> None:
        self._stack: list[Node] = []
        self._end = end

        # Initialize stack with nodes >= start
        self._push_left_path(root, start)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self

    def __next__(self) -> tuple[str, str]:
        if not self._stack:
            raise StopIteration

        node = self._stack.pop()

        # Check end bound
        if self._end is not None and node.word >= self._end:
            self._stack.clear()
            raise StopIteration

        result = (node.word, node.meaning)

        # Push right subtree's left path
        self._push_left_path(node.right, None)

        return result

    def _push_left_path(self, node: Node | None, start: str | None) -> None:
        """Push leftmost path to stack, respecting start bound."""
        while node:
            if start is not None and node.word < start:
                node = node.right
            else:
                self._stack.append(node)
                node = node.left
