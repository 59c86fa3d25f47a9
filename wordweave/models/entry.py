"""
Entry and operation outcomes for the word store.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum


class UpdateResult(IntEnum):
    """Outcome of an update request."""

    UPDATED = 0  # Meaning replaced
    UNCHANGED = 1  # Word exists, caller declined
    NOT_FOUND = 2


class DeleteResult(IntEnum):
    """Outcome of a delete request."""

    DELETED = 0
    NOT_FOUND = 1


@dataclass(frozen=True)
class Entry:
    """
    Snapshot of one dictionary entry.

    Attributes:
        word: The unique key.
        meaning: The meaning stored for the word at lookup time.
    """

    word: str
    meaning: str

    def __iter__(self) -> Iterator[str]:
        """Allow `word, meaning = entry` unpacking."""
        yield self.word
        yield self.meaning

    def size_bytes(self) -> int:
        """Encoded size of word and meaning."""
        return len(self.word.encode("utf-8")) + len(self.meaning.encode("utf-8"))
