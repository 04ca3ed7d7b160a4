"""High-level API for SearchTreeLib.

This module provides simple, functional interfaces for the common cases:
building a tree of a given kind, walking it, and summarizing it. These
functions wrap the engines and the ExecutionPlan machinery.
"""

from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Type, Union

from .core.node import TreeNode
from .core.tree import SearchTree
from .config import (
    TreeKind,
    TraversalOrder,
    TraversalConfig,
    DataRequirement,
    DepthConfig,
    parse_tree_kind,
    parse_order,
)
from .engines import BinarySearchTree, AVLTree, RedBlackTree
from .planning import ExecutionPlan

_ENGINES: Dict[TreeKind, Type[SearchTree]] = {
    TreeKind.BST: BinarySearchTree,
    TreeKind.AVL: AVLTree,
    TreeKind.RED_BLACK: RedBlackTree,
}


def engine_class(kind: Union[TreeKind, str]) -> Type[SearchTree]:
    """Return the engine class registered for ``kind``.

    Raises:
        ValueError: If the kind is not recognized
    """
    return _ENGINES[parse_tree_kind(kind)]


def create_tree(kind: Union[TreeKind, str],
                values: Iterable[Any] = (),
                root: Optional[TreeNode] = None) -> SearchTree:
    """Create a tree engine by kind and insert ``values`` in order.

    Args:
        kind: TreeKind or a name such as "bst", "avl", "rbt"
        values: Values to insert, in insertion order
        root: Optional node subtree to copy as the starting tree

    Returns:
        The new engine instance

    Example:
        >>> tree = create_tree("avl", [1, 2, 3, 4, 5])
        >>> tree.preorder()
        [2, 1, 4, 3, 5]
    """
    tree = engine_class(kind)(root)
    for value in values:
        tree.insert(value)
    return tree


def build_tree(kind: Union[TreeKind, str], values: Iterable[Any]) -> SearchTree:
    """Shorthand for ``create_tree(kind, values)``."""
    return create_tree(kind, values)


def tree_kind_of(tree: SearchTree) -> TreeKind:
    """Return the kind tag a tree engine declares."""
    return tree.kind


def tree_from_dict(kind: Union[TreeKind, str], record: Optional[Dict[str, Any]]) -> SearchTree:
    """Rebuild a tree of ``kind`` from a snapshot record."""
    return engine_class(kind).from_dict(record)


def tree_from_json(kind: Union[TreeKind, str], text: str) -> SearchTree:
    """Rebuild a tree of ``kind`` from snapshot JSON text."""
    return engine_class(kind).from_json(text)


def traverse_tree(
    tree: SearchTree,
    order: Union[TraversalOrder, str] = TraversalOrder.INORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[TreeNode], bool]] = None,
    max_nodes: Optional[int] = None,
) -> Iterator[TreeNode]:
    """Simple interface for walking a tree's nodes.

    Args:
        tree: Any tree engine
        order: Visit order (pre, in, post, level or their aliases)
        max_depth: Maximum depth to traverse (root = 0)
        min_depth: Minimum depth before yielding nodes
        include_filter: Function deciding whether a node is yielded
        max_nodes: Stop after this many yielded nodes

    Yields:
        TreeNode instances that match the criteria

    Example:
        >>> tree = create_tree("bst", [5, 3, 8, 1, 4])
        >>> [node.value for node in traverse_tree(tree, "level", max_depth=1)]
        [5, 3, 8]
    """
    config = TraversalConfig(
        order=parse_order(order),
        depth=DepthConfig(min_depth=min_depth, max_depth=max_depth),
        include_filter=include_filter,
        max_nodes=max_nodes,
    )
    for node, _ in collect_tree_data(tree, config):
        yield node


def collect_tree_data(tree: SearchTree,
                      config: Optional[TraversalConfig] = None) -> Iterator[Tuple[TreeNode, Any]]:
    """Walk a tree with a full TraversalConfig.

    Yields:
        Tuples of (node, collected_data)

    Raises:
        ConfigurationError: If the configuration is invalid
    """
    plan = ExecutionPlan(config or TraversalConfig(), tree.adapter())
    yield from plan.execute(tree.root)


def collect_values(tree: SearchTree,
                   order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> List[Any]:
    """Return the tree's values in the requested order."""
    return tree.traverse(order)


def get_tree_stats(tree: SearchTree) -> Dict[str, Any]:
    """Get statistics about a tree.

    Returns:
        Dictionary with ``kind``, ``size``, ``height``, ``min``, ``max``,
        ``leaf_nodes``, ``nodes_per_depth``, plus ``black_height`` for
        red-black trees

    Example:
        >>> stats = get_tree_stats(create_tree("rbt", [10, 20, 30]))
        >>> stats['black_height']
        1
    """
    stats = {
        'kind': tree.kind.value,
        'size': 0,
        'height': 0,
        'min': tree.minimum(),
        'max': tree.maximum(),
        'leaf_nodes': 0,
        'nodes_per_depth': {},
    }

    config = TraversalConfig(order=TraversalOrder.LEVEL_ORDER,
                             data_requirements=DataRequirement.DEPTH)
    for node, (_, depth) in collect_tree_data(tree, config):
        stats['size'] += 1
        if node.is_leaf():
            stats['leaf_nodes'] += 1
        stats['height'] = max(stats['height'], depth + 1)
        stats['nodes_per_depth'][depth] = stats['nodes_per_depth'].get(depth, 0) + 1

    if tree.kind == TreeKind.RED_BLACK:
        stats['black_height'] = tree.black_height()

    return stats
