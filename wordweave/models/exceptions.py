"""
Custom exceptions for the word store.
"""


class TreeInvariantError(AssertionError):
    """
    Raised when a consistency check finds a broken tree invariant.

    This is a programming defect in the balancing code, never a
    recoverable runtime condition.
    """

    def __init__(self, word: str | None, reason: str):
        """
        Initialize invariant error.

        Args:
            word: Word of the node where the violation was detected.
            reason: Which property is broken and how.
        """
        self.word = word
        self.reason = reason
        super().__init__(f"Tree invariant violated at {word!r}: {reason}")


class DictionaryFileError(Exception):
    """Raised when a dictionary file cannot be read, parsed or written."""

    def __init__(self, path: str, reason: str, line_number: int | None = None):
        """
        Initialize file error.

        Args:
            path: Dictionary file path.
            reason: What went wrong.
            line_number: 1-based line where parsing failed, if any.
        """
        self.path = path
        self.reason = reason
        self.line_number = line_number
        location = f"{path}:{line_number}" if line_number is not None else path
        super().__init__(f"Dictionary file error at {location}: {reason}")
