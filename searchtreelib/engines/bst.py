"""Unbalanced binary search tree engine.

Plain BST insert/delete/search with no rebalancing, plus an explicit
rotation of a parent/child pair so callers can demonstrate rebalancing
by hand.
"""

import logging
from typing import Any, Dict, Optional, Tuple

from ..core.node import TreeNode
from ..core.tree import SearchTree
from .._common.config import TreeKind, SnapshotConfig
from .. import serialization

logger = logging.getLogger(__name__)


class BSTNode(TreeNode):
    """Node of an unbalanced BST: a value and two owning child links."""

    __slots__ = ('value', 'left', 'right')

    def __init__(self, value: Any):
        self.value = value
        self.left: Optional['BSTNode'] = None
        self.right: Optional['BSTNode'] = None

    def metadata(self) -> Dict[str, Any]:
        return {'value': self.value}

    def copy_fields(self) -> 'BSTNode':
        return BSTNode(self.value)


class BinarySearchTree(SearchTree):
    """Unbalanced binary search tree over unique comparable values."""

    kind = TreeKind.BST

    def __init__(self, root: Optional[BSTNode] = None):
        """Create a tree, deep-copying ``root`` if one is given.

        Args:
            root: Existing BSTNode subtree to copy (the tree never shares
                nodes with its caller)
        """
        if root is not None and not isinstance(root, BSTNode):
            raise TypeError(f"BinarySearchTree root must be a BSTNode, got {type(root).__name__}")
        self.root: Optional[BSTNode] = root.clone() if root is not None else None
        self._size = self.adapter().estimated_size(self.root)

    def insert(self, value: Any) -> 'BinarySearchTree':
        """Attach ``value`` as a new leaf at the first empty slot.

        Inserting a value already present leaves the tree unchanged.
        """
        if self.root is None:
            self.root = BSTNode(value)
            self._size = 1
            return self

        node = self.root
        while True:
            if value == node.value:
                logger.debug("insert(%r): value already present", value)
                return self
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = BSTNode(value)
                    break
                node = node.right

        self._size += 1
        return self

    def delete(self, value: Any) -> bool:
        """Remove ``value``.

        A node with two children takes its in-order successor's value,
        and the successor's original node (which has no left child) is
        spliced out instead.

        Returns:
            True if removed, False if the value was absent
        """
        parent, node = self._find_with_parent(value)
        if node is None:
            logger.debug("delete(%r): value not present", value)
            return False

        if node.left is not None and node.right is not None:
            successor_parent, successor = node, node.right
            while successor.left is not None:
                successor_parent, successor = successor, successor.left
            node.value = successor.value
            parent, node = successor_parent, successor

        replacement = node.left if node.left is not None else node.right
        self._replace_child(parent, node, replacement)
        self._size -= 1
        return True

    def rotate(self, parent_value: Any, child_value: Any) -> bool:
        """Rotate a parent/child pair so the child takes the parent's place.

        A left child triggers a right rotation and a right child a left
        rotation. The child's inner subtree moves across to the parent.

        Args:
            parent_value: Value held by the current parent
            child_value: Value held by one of its direct children

        Returns:
            True if rotated, False if the values are not a direct
            parent/child pair (the tree is left unchanged)
        """
        grandparent, parent = self._find_with_parent(parent_value)
        if parent is None:
            logger.debug("rotate(%r, %r): parent not present", parent_value, child_value)
            return False

        if parent.left is not None and parent.left.value == child_value:
            pivot = self._rotate_right(parent)
        elif parent.right is not None and parent.right.value == child_value:
            pivot = self._rotate_left(parent)
        else:
            logger.debug("rotate(%r, %r): not a parent/child pair", parent_value, child_value)
            return False

        self._replace_child(grandparent, parent, pivot)
        return True

    def to_dict(self, config: Optional[SnapshotConfig] = None) -> Optional[Dict[str, Any]]:
        """Export as nested ``{value, left, right}`` records."""
        return serialization.to_record(self.root, lambda node: {'value': node.value})

    @classmethod
    def from_dict(cls, record: Optional[Dict[str, Any]]) -> 'BinarySearchTree':
        """Rebuild a tree from a ``to_dict`` record, shape preserved."""
        tree = cls()
        tree.root, tree._size = serialization.from_record(
            record, lambda fields: BSTNode(fields['value']))
        return tree

    # Internal helpers

    def _find_with_parent(self, value: Any) -> Tuple[Optional[BSTNode], Optional[BSTNode]]:
        """Return (parent, node) for ``value``; node is None when absent."""
        parent = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        return parent, node

    def _replace_child(self, parent: Optional[BSTNode], old: BSTNode,
                       new: Optional[BSTNode]) -> None:
        """Put ``new`` wherever ``parent`` held ``old`` (root if no parent)."""
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    @staticmethod
    def _rotate_left(node: BSTNode) -> BSTNode:
        pivot = node.right
        node.right = pivot.left
        pivot.left = node
        return pivot

    @staticmethod
    def _rotate_right(node: BSTNode) -> BSTNode:
        pivot = node.left
        node.left = pivot.right
        pivot.right = node
        return pivot
