"""
Dictionary facade and flat-file storage.
"""

from wordweave.engine.dictionary import Dictionary

__all__ = ["Dictionary"]
