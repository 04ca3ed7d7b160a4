"""Shared pytest configuration and tree fixtures."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import BinarySearchTree, AVLTree, RedBlackTree


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long randomized stress runs")


@pytest.fixture(params=[BinarySearchTree, AVLTree, RedBlackTree],
                ids=["bst", "avl", "red_black"])
def engine(request):
    """Each tree engine class in turn."""
    return request.param
