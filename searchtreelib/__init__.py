"""SearchTreeLib - binary search tree engines with a shared traversal toolkit.

Three engines share one capability interface (``SearchTree``):

    BinarySearchTree   unbalanced, with manual parent/child rotation
    AVLTree            height-balanced
    RedBlackTree       color-balanced, JSON snapshots, manual recoloring

Quick start:

    from searchtreelib import create_tree
    tree = create_tree("rbt", [10, 20, 30])
    tree.level_order()      # [20, 10, 30]
    tree.to_json()
"""

__version__ = "0.1.0"

from .core import (
    TreeNode,
    SearchTree,
    BinaryTreeAdapter,
    create_traverser,
)
from .config import (
    TreeKind,
    TraversalOrder,
    DataRequirement,
    ColorEncoding,
    DepthConfig,
    SnapshotConfig,
    TraversalConfig,
)
from .exceptions import SearchTreeError, ConfigurationError, SnapshotError
from .engines import (
    BSTNode,
    BinarySearchTree,
    AVLNode,
    AVLTree,
    Color,
    RBNode,
    RedBlackTree,
)
from .planning import ExecutionPlan
from .api import (
    engine_class,
    create_tree,
    build_tree,
    tree_kind_of,
    tree_from_dict,
    tree_from_json,
    traverse_tree,
    collect_tree_data,
    collect_values,
    get_tree_stats,
)
from .validation import (
    validate_bst,
    validate_avl,
    validate_red_black,
    validate_tree,
    is_valid,
)

__all__ = [
    "__version__",
    "TreeNode",
    "SearchTree",
    "BinaryTreeAdapter",
    "create_traverser",
    "TreeKind",
    "TraversalOrder",
    "DataRequirement",
    "ColorEncoding",
    "DepthConfig",
    "SnapshotConfig",
    "TraversalConfig",
    "SearchTreeError",
    "ConfigurationError",
    "SnapshotError",
    "BSTNode",
    "BinarySearchTree",
    "AVLNode",
    "AVLTree",
    "Color",
    "RBNode",
    "RedBlackTree",
    "ExecutionPlan",
    "engine_class",
    "create_tree",
    "build_tree",
    "tree_kind_of",
    "tree_from_dict",
    "tree_from_json",
    "traverse_tree",
    "collect_tree_data",
    "collect_values",
    "get_tree_stats",
    "validate_bst",
    "validate_avl",
    "validate_red_black",
    "validate_tree",
    "is_valid",
]
