"""
AVL-tree backed word dictionary.

This package provides an in-memory ordered word store with:
- insert(word, meaning) - O(log N), re-insert updates the meaning
- search(word) - O(log N) point lookup
- update(word, meaning, confirmed) - confirm-before-mutate update
- delete(word) - O(log N) with bottom-up rebalancing
- prefix_suggestions(partial, limit) - sorted prefix completion
"""

from wordweave.engine.dictionary import Dictionary
from wordweave.models.sortedcontainers import BalancedWordTree

__all__ = ["Dictionary", "BalancedWordTree"]
