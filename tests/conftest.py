"""
Shared pytest fixtures for word store tests.
"""

import os
import tempfile

import pytest

from wordweave.engine import Dictionary
from wordweave.models.sortedcontainers import BalancedWordTree


@pytest.fixture
def temp_dir():
    """Provide a temporary directory that is cleaned up after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def dictionary_path(temp_dir):
    """Provide a path for a dictionary file."""
    return os.path.join(temp_dir, "Dictionary.txt")


@pytest.fixture
def tree():
    """Provide a fresh tree that checks its invariants after every mutation."""
    return BalancedWordTree(debug=True)


@pytest.fixture
def sample_entries():
    """Provide the five-animal sample in insertion order."""
    return [
        ("cat", "feline"),
        ("ant", "insect"),
        ("bee", "insect"),
        ("dog", "canine"),
        ("emu", "bird"),
    ]


@pytest.fixture
def populated_tree(tree, sample_entries):
    """Provide a tree holding the sample entries."""
    for word, meaning in sample_entries:
        tree.insert(word, meaning)
    return tree


@pytest.fixture
def dictionary():
    """Provide an in-memory Dictionary."""
    return Dictionary(debug=True)


@pytest.fixture
def large_sample_entries():
    """Provide larger sample for stress testing."""
    return [(f"word{i:04d}", f"meaning{i}") for i in range(1000)]
