"""
Sorted container implementations for the word store.
"""

from wordweave.models.sortedcontainers.avl_tree import BalancedWordTree, Node

__all__ = ["BalancedWordTree", "Node"]
