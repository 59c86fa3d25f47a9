"""
Data models for the word store.
"""

from wordweave.models.entry import DeleteResult, Entry, UpdateResult
from wordweave.models.exceptions import DictionaryFileError, TreeInvariantError
from wordweave.models.sortedcontainers import BalancedWordTree

__all__ = [
    "Entry",
    "UpdateResult",
    "DeleteResult",
    "DictionaryFileError",
    "TreeInvariantError",
    "BalancedWordTree",
]
