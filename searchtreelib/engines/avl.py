"""Height-balanced (AVL) binary search tree engine.

Every node stores the height of its subtree (leaf = 1). After each
structural change heights are recomputed bottom-up on the unwind path,
and any node whose balance factor leaves [-1, 1] is fixed with one of
the four rotation cases:

    Left-Left    rotate right at the node
    Right-Right  rotate left at the node
    Left-Right   rotate left at the left child, then right at the node
    Right-Left   rotate right at the right child, then left at the node

Recursion depth is bounded by the tree height, which AVL keeps
logarithmic.
"""

import logging
from typing import Any, Dict, Optional

from ..core.node import TreeNode
from ..core.tree import SearchTree
from ..core.traverser import PostOrderTraverser
from .._common.config import TreeKind, SnapshotConfig
from .. import serialization

logger = logging.getLogger(__name__)


class AVLNode(TreeNode):
    """AVL node: value, child links and the height of its subtree."""

    __slots__ = ('value', 'left', 'right', 'height')

    def __init__(self, value: Any):
        self.value = value
        self.left: Optional['AVLNode'] = None
        self.right: Optional['AVLNode'] = None
        self.height = 1

    def metadata(self) -> Dict[str, Any]:
        return {'value': self.value, 'height': self.height}

    def copy_fields(self) -> 'AVLNode':
        node = AVLNode(self.value)
        node.height = self.height
        return node


def _height(node: Optional[AVLNode]) -> int:
    return node.height if node is not None else 0


def _balance(node: Optional[AVLNode]) -> int:
    """Balance factor: left height minus right height (0 for None)."""
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _update_height(node: AVLNode) -> None:
    node.height = 1 + max(_height(node.left), _height(node.right))


class AVLTree(SearchTree):
    """Self-balancing BST keeping |height(left) - height(right)| <= 1."""

    kind = TreeKind.AVL

    def __init__(self, root: Optional[AVLNode] = None):
        """Create a tree, deep-copying ``root`` if one is given."""
        if root is not None and not isinstance(root, AVLNode):
            raise TypeError(f"AVLTree root must be an AVLNode, got {type(root).__name__}")
        self.root: Optional[AVLNode] = root.clone() if root is not None else None
        self._size = self.adapter().estimated_size(self.root)

    def insert(self, value: Any) -> 'AVLTree':
        """Insert ``value`` and rebalance the first unbalanced ancestor.

        Inserting a value already present leaves the tree unchanged.
        """
        if self.search(value) is not None:
            logger.debug("insert(%r): value already present", value)
            return self
        self.root = self._insert(self.root, value)
        self._size += 1
        return self

    def delete(self, value: Any) -> bool:
        """Remove ``value`` and rebalance every ancestor that needs it.

        Returns:
            True if removed, False if the value was absent
        """
        if self.search(value) is None:
            logger.debug("delete(%r): value not present", value)
            return False
        self.root = self._delete(self.root, value)
        self._size -= 1
        return True

    def balance_factor(self, value: Any) -> Optional[int]:
        """Balance factor of the node holding ``value``, or None if absent."""
        node = self.search(value)
        if node is None:
            return None
        return _balance(node)

    def to_dict(self, config: Optional[SnapshotConfig] = None) -> Optional[Dict[str, Any]]:
        """Export as nested ``{value, height, left, right}`` records."""
        config = config or SnapshotConfig()

        def encode(node: AVLNode) -> Dict[str, Any]:
            if config.include_height:
                return {'value': node.value, 'height': node.height}
            return {'value': node.value}

        return serialization.to_record(self.root, encode)

    @classmethod
    def from_dict(cls, record: Optional[Dict[str, Any]]) -> 'AVLTree':
        """Rebuild a tree from a record; heights are recomputed, not trusted."""
        tree = cls()
        tree.root, tree._size = serialization.from_record(
            record, lambda fields: AVLNode(fields['value']))
        for node, _ in PostOrderTraverser(tree.adapter()).traverse(tree.root):
            _update_height(node)
        return tree

    # Recursive workers; each returns the new root of the subtree

    def _insert(self, node: Optional[AVLNode], value: Any) -> AVLNode:
        if node is None:
            return AVLNode(value)

        if value < node.value:
            node.left = self._insert(node.left, value)
        else:
            node.right = self._insert(node.right, value)

        _update_height(node)
        balance = _balance(node)

        if balance > 1 and value < node.left.value:
            logger.debug("insert(%r): left-left case at %r", value, node.value)
            return self._rotate_right(node)

        if balance < -1 and value > node.right.value:
            logger.debug("insert(%r): right-right case at %r", value, node.value)
            return self._rotate_left(node)

        if balance > 1 and value > node.left.value:
            logger.debug("insert(%r): left-right case at %r", value, node.value)
            node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1 and value < node.right.value:
            logger.debug("insert(%r): right-left case at %r", value, node.value)
            node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    def _delete(self, node: Optional[AVLNode], value: Any) -> Optional[AVLNode]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._delete(node.left, value)
        elif value > node.value:
            node.right = self._delete(node.right, value)
        else:
            if node.left is None:
                return node.right
            if node.right is None:
                return node.left

            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.value = successor.value
            node.right = self._delete(node.right, successor.value)

        _update_height(node)
        balance = _balance(node)

        # Deletion picks the case from the child's own balance
        if balance > 1:
            if _balance(node.left) >= 0:
                logger.debug("delete(%r): left-left case at %r", value, node.value)
            else:
                logger.debug("delete(%r): left-right case at %r", value, node.value)
                node.left = self._rotate_left(node.left)
            return self._rotate_right(node)

        if balance < -1:
            if _balance(node.right) <= 0:
                logger.debug("delete(%r): right-right case at %r", value, node.value)
            else:
                logger.debug("delete(%r): right-left case at %r", value, node.value)
                node.right = self._rotate_right(node.right)
            return self._rotate_left(node)

        return node

    @staticmethod
    def _rotate_right(node: AVLNode) -> AVLNode:
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        _update_height(node)
        _update_height(pivot)
        return pivot

    @staticmethod
    def _rotate_left(node: AVLNode) -> AVLNode:
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        _update_height(node)
        _update_height(pivot)
        return pivot
