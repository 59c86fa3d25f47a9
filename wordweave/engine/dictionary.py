"""
Dictionary - Main word dictionary API.
"""

import logging
import os
from collections.abc import Iterator

from wordweave.engine.storage import DictionaryFileReader, DictionaryFileWriter
from wordweave.models.entry import DeleteResult, Entry, UpdateResult
from wordweave.models.sortedcontainers import BalancedWordTree

logger = logging.getLogger(__name__)


class Dictionary:
    """
    Word dictionary backed by a BalancedWordTree.

    Provides:
    - add_word(word, meaning): Insert a word or overwrite its meaning
    - search(word): Look up a word
    - update_word(word, meaning, confirmed): Replace a meaning once confirmed
    - delete_word(word): Remove a word
    - suggest(partial): Sorted prefix completions
    - load() / save(): Flat-file persistence
    """

    # Capacity of the suggestion list
    MAX_SUGGESTIONS = 10

    # Upper bound accepted for suggestion_limit
    SUGGESTION_LIMIT_CEILING = 1000

    def __init__(
        self,
        file_path: str | None = None,
        suggestion_limit: int = MAX_SUGGESTIONS,
        debug: bool = False,
    ) -> None:
        """
        Initialize the dictionary.

        Args:
            file_path: Dictionary file used by load() and save(). None keeps
                       the dictionary purely in memory.
            suggestion_limit: Maximum number of suggestions returned.
            debug: Verify tree invariants after every mutation.
        """
        if isinstance(suggestion_limit, bool) or not isinstance(suggestion_limit, int):
            raise ValueError(f"suggestion_limit must be an int, got {suggestion_limit!r}")
        if suggestion_limit <= 0:
            raise ValueError(f"suggestion_limit must be positive, got {suggestion_limit}")
        if suggestion_limit > self.SUGGESTION_LIMIT_CEILING:
            raise ValueError(
                f"suggestion_limit cannot exceed {self.SUGGESTION_LIMIT_CEILING}, "
                f"got {suggestion_limit}"
            )

        if file_path is not None:
            if not file_path.strip():
                raise ValueError("file_path cannot be empty")
            file_path = os.path.abspath(file_path)

        self._file_path = file_path
        self._suggestion_limit = suggestion_limit
        self._tree = BalancedWordTree(debug=debug)

    @classmethod
    def open(cls, file_path: str, **kwargs) -> "Dictionary":
        """Create a dictionary and load it from file_path."""
        dictionary = cls(file_path, **kwargs)
        dictionary.load()
        return dictionary

    @property
    def file_path(self) -> str | None:
        return self._file_path

    @property
    def suggestion_limit(self) -> int:
        return self._suggestion_limit

    def add_word(self, word: str, meaning: str) -> bool:
        """
        Insert a word or overwrite its meaning.

        Returns:
            True if the word is new, False if an existing meaning was replaced.
        """
        self._validate_word(word)
        meaning = self._validate_meaning(meaning)
        created = self._tree.insert(word, meaning)
        logger.debug(f"add_word {word!r} created={created}")
        return created

    def search(self, word: str) -> Entry | None:
        return self._tree.search(word)

    def update_word(self, word: str, meaning: str, confirmed: bool) -> UpdateResult:
        """
        Replace the meaning of an existing word.

        The meaning changes only when `confirmed` is true; a declined
        update is not validated.
        """
        if confirmed:
            meaning = self._validate_meaning(meaning)
        result = self._tree.update(word, meaning, confirmed)
        logger.debug(f"update_word {word!r} -> {result.name}")
        return result

    def delete_word(self, word: str) -> DeleteResult:
        result = self._tree.delete(word)
        logger.debug(f"delete_word {word!r} -> {result.name}")
        return result

    def suggest(self, partial: str) -> list[str]:
        """Return up to suggestion_limit words starting with `partial`, sorted."""
        return self._tree.prefix_suggestions(partial, self._suggestion_limit)

    def entries(self) -> Iterator[tuple[str, str]]:
        return self._tree.traverse_in_order()

    def __len__(self) -> int:
        return len(self._tree)

    def __contains__(self, word: object) -> bool:
        return word in self._tree

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return self.entries()

    def load(self) -> int:
        """
        Insert every pair from the dictionary file.

        A missing file leaves the dictionary as it is.

        Returns:
            Number of pairs read.

        Raises:
            DictionaryFileError: If the file exists but cannot be read.
        """
        path = self._require_file_path()
        reader = DictionaryFileReader(path)
        count = 0
        for word, meaning in reader:
            self._tree.insert(word, meaning)
            count += 1

        logger.info(
            f"Loaded {count} entries from {path} "
            f"({len(self._tree)} unique, {reader.skipped_lines} skipped)"
        )
        return count

    def save(self) -> int:
        """
        Write all entries to the dictionary file in sorted order.

        Returns:
            Number of entries written.
        """
        path = self._require_file_path()
        count = DictionaryFileWriter(path).write(self._tree.traverse_in_order())
        logger.info(f"Saved {count} entries to {path}")
        return count

    def close(self) -> None:
        """Release all entries."""
        self._tree.teardown()

    def __enter__(self) -> "Dictionary":
        if self._file_path is not None:
            self.load()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is None and self._file_path is not None:
                self.save()
        finally:
            self.close()

    def _require_file_path(self) -> str:
        if self._file_path is None:
            raise ValueError("Dictionary has no file_path configured")
        return self._file_path

    @staticmethod
    def _validate_word(word: str) -> None:
        if not isinstance(word, str) or not word:
            raise ValueError("word cannot be empty")
        if any(ch.isspace() for ch in word):
            raise ValueError(f"word cannot contain whitespace: {word!r}")

    @staticmethod
    def _validate_meaning(meaning: str) -> str:
        if not isinstance(meaning, str) or not meaning.strip():
            raise ValueError("meaning cannot be empty")
        if "\n" in meaning or "\r" in meaning:
            raise ValueError("meaning must be a single line")
        return meaning.strip()
