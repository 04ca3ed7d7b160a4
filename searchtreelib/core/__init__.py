"""Core abstractions for SearchTreeLib.

This package contains the building blocks shared by all tree engines:
the node abstraction, the capability interface every engine implements,
and the adapter/traverser/collector trio that walks a tree.
"""

from .node import TreeNode
from .adapter import BinaryTreeAdapter
from .traverser import (
    TreeTraverser,
    PreOrderTraverser,
    InOrderTraverser,
    PostOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    ValueCollector,
    MetadataCollector,
    DepthCollector,
    FullNodeCollector,
    CustomCollector,
)
from .tree import SearchTree

__all__ = [
    "TreeNode",
    "BinaryTreeAdapter",
    "TreeTraverser",
    "PreOrderTraverser",
    "InOrderTraverser",
    "PostOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "DataCollector",
    "ValueCollector",
    "MetadataCollector",
    "DepthCollector",
    "FullNodeCollector",
    "CustomCollector",
    "SearchTree",
]
