"""Shared pytest configuration for BinTreeLib tests."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from bintreelib import Tree
from bintreelib.testing import TreeTestHelper


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running scale tests")


@pytest.fixture
def tree():
    """An empty tree with the default configuration."""
    return Tree()


@pytest.fixture
def phonetic_tree():
    """The five-word tree used throughout the examples."""
    tree = Tree()
    for word in ["delta", "bravo", "charlie", "echo", "alpha"]:
        tree.insert(word)
    return tree


@pytest.fixture
def three_node_helper():
    """Root "b" with leaf children "a" and "c"."""
    return TreeTestHelper.from_shape(("b", ("a", None, None), ("c", None, None)))
