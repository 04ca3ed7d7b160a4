"""Configuration system for SearchTreeLib.

This module defines how callers pick a tree engine, how they ask for a
traversal (order, depth window, data to collect), and how snapshots are
encoded.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Callable, Any, List, Union


class TreeKind(Enum):
    """Explicit tag naming a tree engine.

    Callers dispatch on this tag instead of checking engine types.
    """
    BST = "bst"                 # Unbalanced binary search tree
    AVL = "avl"                 # Height-balanced
    RED_BLACK = "red_black"     # Color-balanced, with parent links


class TraversalOrder(Enum):
    """Order in which a traversal visits nodes."""
    PREORDER = "preorder"         # Node, left, right
    INORDER = "inorder"           # Left, node, right (sorted for a valid BST)
    POSTORDER = "postorder"       # Left, right, node
    LEVEL_ORDER = "level_order"   # Level by level, left to right


class DataRequirement(Enum):
    """Specifies what data is collected from each visited node."""
    VALUE = "value"          # Just the stored value
    METADATA = "metadata"    # value plus height/color
    DEPTH = "depth"          # (value, depth) pairs
    FULL_NODE = "full"       # The node objects themselves
    CUSTOM = "custom"        # User-defined collector


class ColorEncoding(Enum):
    """How red-black colors are written into snapshot records."""
    NAME = "name"    # "RED" / "BLACK"
    INT = "int"      # 0 = RED, 1 = BLACK


_TREE_KIND_ALIASES = {
    'bst': TreeKind.BST,
    'binary_search_tree': TreeKind.BST,
    'avl': TreeKind.AVL,
    'avl_tree': TreeKind.AVL,
    'rbt': TreeKind.RED_BLACK,
    'rb': TreeKind.RED_BLACK,
    'red_black': TreeKind.RED_BLACK,
    'red-black': TreeKind.RED_BLACK,
    'redblack': TreeKind.RED_BLACK,
}

_ORDER_ALIASES = {
    'pre': TraversalOrder.PREORDER,
    'preorder': TraversalOrder.PREORDER,
    'pre_order': TraversalOrder.PREORDER,
    'dfs_pre': TraversalOrder.PREORDER,
    'in': TraversalOrder.INORDER,
    'inorder': TraversalOrder.INORDER,
    'in_order': TraversalOrder.INORDER,
    'post': TraversalOrder.POSTORDER,
    'postorder': TraversalOrder.POSTORDER,
    'post_order': TraversalOrder.POSTORDER,
    'dfs_post': TraversalOrder.POSTORDER,
    'level': TraversalOrder.LEVEL_ORDER,
    'levelorder': TraversalOrder.LEVEL_ORDER,
    'level_order': TraversalOrder.LEVEL_ORDER,
    'bfs': TraversalOrder.LEVEL_ORDER,
    'breadth_first': TraversalOrder.LEVEL_ORDER,
}


def parse_tree_kind(kind: Union[TreeKind, str]) -> TreeKind:
    """Parse a tree kind from an enum member or a name.

    Args:
        kind: TreeKind or one of its string aliases

    Returns:
        TreeKind enum value

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(kind, TreeKind):
        return kind
    if isinstance(kind, str) and kind.lower() in _TREE_KIND_ALIASES:
        return _TREE_KIND_ALIASES[kind.lower()]
    raise ValueError(
        f"Unknown tree kind: {kind}. "
        f"Choose from: {', '.join(_TREE_KIND_ALIASES.keys())}"
    )


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from an enum member or a name.

    Accepts camelCase ``levelOrder`` as well as snake_case names.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order
    if isinstance(order, str) and order.lower() in _ORDER_ALIASES:
        return _ORDER_ALIASES[order.lower()]
    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(_ORDER_ALIASES.keys())}"
    )


@dataclass
class DepthConfig:
    """Configuration for depth-based filtering (root depth = 0)."""

    min_depth: int = 0                 # Minimum depth to yield
    max_depth: Optional[int] = None    # Maximum depth to traverse

    def should_yield(self, depth: int) -> bool:
        """Check if nodes at this depth should be yielded."""
        if depth < self.min_depth:
            return False
        if self.max_depth is not None and depth > self.max_depth:
            return False
        return True

    def should_explore(self, depth: int) -> bool:
        """Check if children below this depth should be explored."""
        if self.max_depth is not None:
            return depth < self.max_depth
        return True


@dataclass
class SnapshotConfig:
    """Configuration for snapshot records produced by ``to_dict``."""

    color_encoding: ColorEncoding = ColorEncoding.NAME
    include_height: bool = True   # AVL records carry the stored height

    def encode_color(self, color: Any) -> Any:
        """Encode a Color member according to ``color_encoding``."""
        if self.color_encoding == ColorEncoding.INT:
            return int(color.value)
        return color.name


@dataclass
class TraversalConfig:
    """Complete configuration for a traversal over a tree engine.

    The ExecutionPlan validates this configuration before walking
    any nodes.
    """

    order: TraversalOrder = TraversalOrder.INORDER

    # Depth control
    depth: DepthConfig = field(default_factory=DepthConfig)

    # Node filtering
    include_filter: Optional[Callable[[Any], bool]] = None

    # Data collection
    data_requirements: DataRequirement = DataRequirement.VALUE
    custom_collector: Optional[Any] = None

    # Stop after this many collected nodes
    max_nodes: Optional[int] = None

    @classmethod
    def sorted_values(cls) -> 'TraversalConfig':
        """Config yielding every value in ascending order."""
        return cls(order=TraversalOrder.INORDER,
                   data_requirements=DataRequirement.VALUE)

    @classmethod
    def shallow(cls, max_depth: int = 1) -> 'TraversalConfig':
        """Config for the top levels of a tree, level by level.

        Args:
            max_depth: How deep to go (default 1 = root and its children)
        """
        return cls(
            order=TraversalOrder.LEVEL_ORDER,
            depth=DepthConfig(max_depth=max_depth),
            data_requirements=DataRequirement.DEPTH,
        )

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.order, TraversalOrder):
            errors.append(f"order must be a TraversalOrder, got {self.order!r}")

        if self.depth.min_depth < 0:
            errors.append("min_depth cannot be negative")

        if self.depth.max_depth is not None:
            if self.depth.max_depth < 0:
                errors.append("max_depth cannot be negative")
            if self.depth.max_depth < self.depth.min_depth:
                errors.append("max_depth cannot be less than min_depth")

        if self.max_nodes is not None and self.max_nodes <= 0:
            errors.append("max_nodes must be positive")

        if self.data_requirements == DataRequirement.CUSTOM and self.custom_collector is None:
            errors.append("custom_collector required when data_requirements is CUSTOM")

        return errors
