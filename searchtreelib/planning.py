"""Execution planning for SearchTreeLib.

The ExecutionPlan validates a TraversalConfig and coordinates the
traverser and collector that carry it out over one tree.
"""

import logging
from typing import Any, Dict, Iterator, Optional, Tuple

from .core.node import TreeNode
from .core.adapter import BinaryTreeAdapter
from .core.traverser import TreeTraverser, create_traverser
from .core.collector import (
    DataCollector,
    ValueCollector,
    MetadataCollector,
    DepthCollector,
    FullNodeCollector,
    CustomCollector,
)
from .config import TraversalConfig, DataRequirement
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ExecutionPlan:
    """Validated execution plan for a tree traversal.

    The ExecutionPlan is the bridge between user intent (TraversalConfig)
    and execution. Configuration problems are reported before any node
    is visited.
    """

    def __init__(self, config: TraversalConfig, adapter: BinaryTreeAdapter):
        """Create and validate an execution plan.

        Args:
            config: User's traversal configuration
            adapter: Adapter over the tree to walk

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.config = config
        self.adapter = adapter

        config_errors = config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.traverser = self._select_traverser()
        self.collector = self._select_collector()

        self.nodes_processed = 0

    def _select_traverser(self) -> TreeTraverser:
        return create_traverser(self.config.order, self.adapter)

    def _select_collector(self) -> DataCollector:
        """Select the data collector matching the configured requirement."""
        if self.config.data_requirements == DataRequirement.CUSTOM:
            collector = self.config.custom_collector
            if isinstance(collector, DataCollector):
                return collector
            # Plain callables are wrapped as fn(node, depth)
            return CustomCollector(self.adapter, collector)

        collector_map = {
            DataRequirement.VALUE: ValueCollector,
            DataRequirement.METADATA: MetadataCollector,
            DataRequirement.DEPTH: DepthCollector,
            DataRequirement.FULL_NODE: FullNodeCollector,
        }
        return collector_map[self.config.data_requirements](self.adapter)

    def execute(self, root: Optional[TreeNode]) -> Iterator[Tuple[TreeNode, Any]]:
        """Execute the traversal plan.

        Args:
            root: Root node to start from (None = empty tree)

        Yields:
            Tuples of (node, collected_data)
        """
        self.nodes_processed = 0

        for node, depth in self.traverser.traverse(
            root,
            max_depth=self.config.depth.max_depth,
            min_depth=self.config.depth.min_depth
        ):
            if self.config.include_filter is not None and not self.config.include_filter(node):
                continue

            if not self.config.depth.should_yield(depth):
                continue

            data = self.collector.collect(node, depth)
            self.nodes_processed += 1
            yield (node, data)

            if self.config.max_nodes is not None and self.nodes_processed >= self.config.max_nodes:
                logger.debug("Stopping after max_nodes=%d", self.config.max_nodes)
                break

    def get_summary(self) -> Dict[str, Any]:
        """Get summary of execution plan.

        Returns:
            Dictionary with plan details
        """
        return {
            'order': self.config.order.value,
            'data_requirements': self.config.data_requirements.value,
            'max_depth': self.config.depth.max_depth,
            'min_depth': self.config.depth.min_depth,
            'max_nodes': self.config.max_nodes,
            'traverser': self.traverser.__class__.__name__,
            'collector': self.collector.__class__.__name__,
        }
