"""
Abstract base classes for the word store.
"""

from wordweave.interfaces.range_iterable import RangeIterable
from wordweave.interfaces.sorted_container import SortedContainer

__all__ = ["RangeIterable", "SortedContainer"]
