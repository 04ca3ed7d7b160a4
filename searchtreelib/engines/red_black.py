"""Red-black binary search tree engine.

Nodes carry a color and a ``parent`` back-reference. The parent link is
a non-owning relation: the tree root owns every node through left/right
links, and parent links are rewritten explicitly by every rotation and
transplant.

Invariants maintained by insert/delete:

1. The root is BLACK.
2. A RED node has no RED child.
3. Every path from a node to a descendant null leaf passes through the
   same number of BLACK nodes (the black-height).

Empty children are plain ``None`` and count as BLACK.
"""

import logging
import weakref
from enum import Enum
from typing import Any, Dict, Optional

from ..core.node import TreeNode
from ..core.tree import SearchTree
from .._common.config import TreeKind, SnapshotConfig
from ..exceptions import SnapshotError
from .. import serialization

logger = logging.getLogger(__name__)


class Color(Enum):
    """Node color. Integer values match the 0/1 snapshot encoding."""
    RED = 0
    BLACK = 1

    @classmethod
    def parse(cls, raw: Any) -> 'Color':
        """Read a color from a snapshot field.

        Accepts a Color member, "RED"/"BLACK" in any case, or 0/1.

        Raises:
            SnapshotError: For anything else (including booleans)
        """
        if isinstance(raw, Color):
            return raw
        if isinstance(raw, str) and raw.upper() in cls.__members__:
            return cls[raw.upper()]
        if isinstance(raw, int) and not isinstance(raw, bool) and raw in (0, 1):
            return cls(raw)
        raise SnapshotError(f"Invalid node color: {raw!r}")


RED = Color.RED
BLACK = Color.BLACK


class RBNode(TreeNode):
    """Red-black node. New nodes start RED with no parent.

    ``parent`` is held through a weak reference: the tree owns its nodes
    through left/right links only.
    """

    __slots__ = ('value', 'left', 'right', '_parent_ref', 'color', '__weakref__')

    def __init__(self, value: Any, color: Color = RED):
        self.value = value
        self.left: Optional['RBNode'] = None
        self.right: Optional['RBNode'] = None
        self._parent_ref: Optional[weakref.ref] = None
        self.color = color

    @property
    def parent(self) -> Optional['RBNode']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @parent.setter
    def parent(self, node: Optional['RBNode']) -> None:
        self._parent_ref = weakref.ref(node) if node is not None else None

    def metadata(self) -> Dict[str, Any]:
        return {'value': self.value, 'color': self.color.name}

    def copy_fields(self) -> 'RBNode':
        return RBNode(self.value, self.color)

    def attach(self, side: str, child: 'RBNode') -> None:
        """Link ``child`` on ``side`` and point its parent link here."""
        setattr(self, side, child)
        child.parent = self


def _color(node: Optional[RBNode]) -> Color:
    return node.color if node is not None else BLACK


class RedBlackTree(SearchTree):
    """Color-balanced BST with explicit parent links."""

    kind = TreeKind.RED_BLACK

    def __init__(self, root: Optional[RBNode] = None):
        """Create a tree, deep-copying ``root`` if one is given.

        The copy's parent links are rebuilt from its own structure; the
        root's parent is always None.
        """
        if root is not None and not isinstance(root, RBNode):
            raise TypeError(f"RedBlackTree root must be an RBNode, got {type(root).__name__}")
        self.root: Optional[RBNode] = root.clone() if root is not None else None
        self._size = self.adapter().estimated_size(self.root)

    def insert(self, value: Any) -> 'RedBlackTree':
        """Insert ``value`` as a RED leaf and repair RED-over-RED violations.

        Inserting a value already present leaves the tree unchanged.
        """
        parent = None
        node = self.root
        while node is not None:
            if value == node.value:
                logger.debug("insert(%r): value already present", value)
                return self
            parent = node
            node = node.left if value < node.value else node.right

        new_node = RBNode(value)
        if parent is None:
            self.root = new_node
        elif value < parent.value:
            parent.attach('left', new_node)
        else:
            parent.attach('right', new_node)
        self._size += 1

        self._fix_insert(new_node)
        return self

    def delete(self, value: Any) -> bool:
        """Remove ``value`` and repair the black-height if needed.

        A node with two children is replaced by its in-order successor,
        which takes over the removed node's color. If the node actually
        spliced out of the structure was BLACK, the double-black fix-up
        runs from the position that lost it.

        Returns:
            True if removed, False if the value was absent
        """
        target = self.search(value)
        if target is None:
            logger.debug("delete(%r): value not present", value)
            return False

        removed_color = target.color
        if target.left is None:
            child, child_parent = target.right, target.parent
            self._transplant(target, target.right)
        elif target.right is None:
            child, child_parent = target.left, target.parent
            self._transplant(target, target.left)
        else:
            successor = target.right
            while successor.left is not None:
                successor = successor.left
            removed_color = successor.color
            child = successor.right

            if successor.parent is target:
                child_parent = successor
            else:
                child_parent = successor.parent
                self._transplant(successor, successor.right)
                successor.attach('right', target.right)

            self._transplant(target, successor)
            successor.attach('left', target.left)
            successor.color = target.color

        target.left = target.right = target.parent = None
        self._size -= 1

        if removed_color is BLACK:
            self._fix_delete(child, child_parent)
        return True

    def flip_node_color(self, value: Any) -> bool:
        """Invert one node's color, bypassing all invariant maintenance.

        This is a manual override for interactive exploration; the tree
        may no longer satisfy the red-black invariants afterwards.

        Returns:
            True if a node was recolored, False if the value was absent
        """
        node = self.search(value)
        if node is None:
            logger.debug("flip_node_color(%r): value not present", value)
            return False
        node.color = BLACK if node.color is RED else RED
        return True

    def black_height(self) -> int:
        """BLACK nodes on the leftmost root-to-leaf path (0 when empty)."""
        count = 0
        node = self.root
        while node is not None:
            if node.color is BLACK:
                count += 1
            node = node.left
        return count

    def to_dict(self, config: Optional[SnapshotConfig] = None) -> Optional[Dict[str, Any]]:
        """Export as nested ``{value, color, left, right}`` records.

        Parent links are not exported; ``from_dict`` re-derives them.
        """
        config = config or SnapshotConfig()
        return serialization.to_record(
            self.root,
            lambda node: {'value': node.value, 'color': config.encode_color(node.color)})

    @classmethod
    def from_dict(cls, record: Optional[Dict[str, Any]]) -> 'RedBlackTree':
        """Rebuild a tree top-down from a ``to_dict`` record.

        Colors are taken as given; a record that breaks the red-black
        invariants produces a tree that breaks them too.
        """
        def decode(fields: Dict[str, Any]) -> RBNode:
            if 'color' not in fields:
                raise SnapshotError(f"Snapshot node is missing 'color': {dict(fields)!r}")
            return RBNode(fields['value'], Color.parse(fields['color']))

        tree = cls()
        tree.root, tree._size = serialization.from_record(record, decode)
        return tree

    # Rebalancing

    def _fix_insert(self, node: RBNode) -> None:
        while node.parent is not None and node.parent.color is RED:
            parent = node.parent
            grandparent = parent.parent
            if grandparent is None:
                # RED root, only reachable after flip_node_color
                break

            if parent is grandparent.left:
                uncle = grandparent.right
                if _color(uncle) is RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue
                if node is parent.right:
                    # Inner child: rotate it to the outer position first
                    node = parent
                    self._rotate_left(node)
                    parent = node.parent
                parent.color = BLACK
                grandparent.color = RED
                self._rotate_right(grandparent)
            else:
                uncle = grandparent.left
                if _color(uncle) is RED:
                    parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    node = grandparent
                    continue
                if node is parent.left:
                    node = parent
                    self._rotate_right(node)
                    parent = node.parent
                parent.color = BLACK
                grandparent.color = RED
                self._rotate_left(grandparent)

        self.root.color = BLACK

    def _fix_delete(self, node: Optional[RBNode], parent: Optional[RBNode]) -> None:
        """Double-black fix-up.

        ``node`` may be None (a removed BLACK leaf leaves an empty slot),
        so the walk tracks the slot's parent alongside it.
        """
        while node is not self.root and _color(node) is BLACK:
            if parent is None:
                break

            if node is parent.left:
                sibling = parent.right
                if _color(sibling) is RED:
                    sibling.color = BLACK
                    parent.color = RED
                    self._rotate_left(parent)
                    sibling = parent.right
                if sibling is None:
                    node, parent = parent, parent.parent
                    continue

                if _color(sibling.left) is BLACK and _color(sibling.right) is BLACK:
                    sibling.color = RED
                    node, parent = parent, parent.parent
                else:
                    if _color(sibling.right) is BLACK:
                        sibling.left.color = BLACK
                        sibling.color = RED
                        self._rotate_right(sibling)
                        sibling = parent.right
                    sibling.color = parent.color
                    parent.color = BLACK
                    if sibling.right is not None:
                        sibling.right.color = BLACK
                    self._rotate_left(parent)
                    node, parent = self.root, None
            else:
                sibling = parent.left
                if _color(sibling) is RED:
                    sibling.color = BLACK
                    parent.color = RED
                    self._rotate_right(parent)
                    sibling = parent.left
                if sibling is None:
                    node, parent = parent, parent.parent
                    continue

                if _color(sibling.left) is BLACK and _color(sibling.right) is BLACK:
                    sibling.color = RED
                    node, parent = parent, parent.parent
                else:
                    if _color(sibling.left) is BLACK:
                        sibling.right.color = BLACK
                        sibling.color = RED
                        self._rotate_left(sibling)
                        sibling = parent.left
                    sibling.color = parent.color
                    parent.color = BLACK
                    if sibling.left is not None:
                        sibling.left.color = BLACK
                    self._rotate_right(parent)
                    node, parent = self.root, None

        if node is not None:
            node.color = BLACK

    # Structural helpers; all of them keep parent links in step

    def _transplant(self, old: RBNode, new: Optional[RBNode]) -> None:
        """Hang ``new`` where ``old`` was attached."""
        if old.parent is None:
            self.root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        if new is not None:
            new.parent = old.parent

    def _rotate_left(self, node: RBNode) -> None:
        pivot = node.right
        if pivot is None:
            return
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._transplant(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: RBNode) -> None:
        pivot = node.left
        if pivot is None:
            return
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._transplant(node, pivot)
        pivot.right = node
        node.parent = pivot
