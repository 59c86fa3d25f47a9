"""
Flat-file storage for dictionaries.

One entry per line: the word is the first whitespace-delimited token and
the meaning is the rest of the line.
"""

import logging
import os
import tempfile
from collections.abc import Iterable, Iterator

from wordweave.models.exceptions import DictionaryFileError

logger = logging.getLogger(__name__)


class DictionaryFileReader:
    """
    Reads (word, meaning) pairs from a dictionary file.

    Blank lines are skipped. A line holding a word without a meaning is
    skipped with a warning, or raises in strict mode.
    """

    def __init__(self, file_path: str, missing_ok: bool = True, strict: bool = False) -> None:
        """
        Initialize reader.

        Args:
            file_path: Path to the dictionary file.
            missing_ok: Yield nothing instead of failing when the file is absent.
            strict: Raise DictionaryFileError on malformed lines.
        """
        self.file_path = file_path
        self.missing_ok = missing_ok
        self.strict = strict
        self.skipped_lines: int = 0

    def __iter__(self) -> Iterator[tuple[str, str]]:
        self.skipped_lines = 0

        if not os.path.exists(self.file_path):
            if self.missing_ok:
                logger.warning(f"Dictionary file not found, starting empty: {self.file_path}")
                return
            raise DictionaryFileError(self.file_path, "file does not exist")

        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                for line_number, line in enumerate(f, start=1):
                    pair = self._parse_line(line, line_number)
                    if pair is not None:
                        yield pair
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryFileError(self.file_path, str(e)) from e

    def read_all(self) -> list[tuple[str, str]]:
        return list(self)

    def _parse_line(self, line: str, line_number: int) -> tuple[str, str] | None:
        parts = line.split(maxsplit=1)
        if not parts:
            return None

        if len(parts) == 1:
            if self.strict:
                raise DictionaryFileError(
                    self.file_path, f"word {parts[0]!r} has no meaning", line_number
                )
            logger.warning(
                f"Skipping line {line_number} of {self.file_path}: "
                f"word {parts[0]!r} has no meaning"
            )
            self.skipped_lines += 1
            return None

        return parts[0], parts[1].strip()


class DictionaryFileWriter:
    """
    Writes (word, meaning) pairs to a dictionary file.

    The file is written to a temporary sibling, fsynced, then renamed over
    the target so a failed save never leaves a truncated dictionary.
    """

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path

    def write(self, pairs: Iterable[tuple[str, str]]) -> int:
        """
        Write all pairs, one per line.

        Args:
            pairs: (word, meaning) tuples, normally in sorted order.

        Returns:
            Number of pairs written.

        Raises:
            DictionaryFileError: If the file cannot be written.
        """
        directory = os.path.dirname(os.path.abspath(self.file_path))
        count = 0
        temp_path = None

        try:
            fd, temp_path = tempfile.mkstemp(
                prefix=".dictionary_", suffix=".tmp", dir=directory
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                for word, meaning in pairs:
                    f.write(f"{word} {meaning}\n")
                    count += 1
                f.flush()
                os.fsync(f.fileno())

            os.replace(temp_path, self.file_path)
            temp_path = None
        except OSError as e:
            raise DictionaryFileError(self.file_path, str(e)) from e
        finally:
            if temp_path is not None and os.path.exists(temp_path):
                os.remove(temp_path)

        logger.debug(f"Wrote {count} entries to {self.file_path}")
        return count
