"""Data collection strategies for SearchTreeLib.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce plain values, metadata records
or (value, depth) pairs.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Tuple
from .node import TreeNode
from .adapter import BinaryTreeAdapter


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: BinaryTreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: BinaryTreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class ValueCollector(DataCollector):
    """Collects only node values.

    The default for TraversalConfig and the high-level API.
    """

    def collect(self, node: TreeNode, depth: int) -> Any:
        return node.identifier()


class MetadataCollector(DataCollector):
    """Collects each node's metadata plus its depth and child count."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        info = dict(node.metadata())
        info['depth'] = depth
        info['child_count'] = sum(1 for _ in self.adapter.get_children(node))
        return info


class DepthCollector(DataCollector):
    """Collects (value, depth) pairs, handy for level-by-level layouts."""

    def collect(self, node: TreeNode, depth: int) -> Tuple[Any, int]:
        return (node.identifier(), depth)


class FullNodeCollector(DataCollector):
    """Collects the node objects themselves.

    The nodes still belong to their tree; mutate them only through the
    owning engine.
    """

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function."""

    def __init__(self, adapter: BinaryTreeAdapter,
                 collect_func: Callable[[TreeNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: BinaryTreeAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.collect_func(node, depth)
