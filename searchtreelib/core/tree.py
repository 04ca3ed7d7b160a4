"""SearchTree capability interface.

Every tree engine (BST, AVL, red-black) implements this interface on its
own; the engines do not inherit from one another. The interface supplies
the operations that only need left/right links (search, traversals,
min/max, height), and leaves the structure-changing operations to each
engine.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Union

from .node import TreeNode
from .adapter import BinaryTreeAdapter
from .traverser import create_traverser
from .._common.config import TreeKind, TraversalOrder, SnapshotConfig
from .. import serialization


class SearchTree(ABC):
    """Ordered set of unique comparable values over a binary node graph.

    Engines set the class attribute ``kind`` to their TreeKind tag and
    keep ``root`` and ``_size`` current through every mutation.
    """

    kind: TreeKind

    root: Optional[TreeNode]
    _size: int

    # Structure-changing operations - engine specific

    @abstractmethod
    def insert(self, value: Any) -> 'SearchTree':
        """Insert ``value``; duplicates are ignored.

        Returns:
            self, so inserts can be chained
        """
        pass

    @abstractmethod
    def delete(self, value: Any) -> bool:
        """Remove ``value`` if present.

        Returns:
            True if a node was removed, False if the value was absent
        """
        pass

    @abstractmethod
    def to_dict(self, config: Optional[SnapshotConfig] = None) -> Optional[Dict[str, Any]]:
        """Export the tree as a nested snapshot record (None when empty)."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, record: Optional[Dict[str, Any]]) -> 'SearchTree':
        """Rebuild a tree from a record produced by ``to_dict``."""
        pass

    def to_json(self, config: Optional[SnapshotConfig] = None, **kwargs) -> str:
        """Export the ``to_dict`` record as JSON text."""
        return serialization.dumps(self.to_dict(config), **kwargs)

    @classmethod
    def from_json(cls, text: str) -> 'SearchTree':
        """Rebuild a tree from ``to_json`` output."""
        return cls.from_dict(serialization.loads(text))

    def clone(self) -> 'SearchTree':
        """Return an independent deep copy of this tree."""
        return self.__class__(self.root)

    def clear(self) -> None:
        """Drop every node."""
        self.root = None
        self._size = 0

    # Read-only operations shared by all engines

    def search(self, value: Any) -> Optional[TreeNode]:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def contains(self, value: Any) -> bool:
        return self.search(value) is not None

    def minimum(self) -> Optional[Any]:
        """Smallest value in the tree, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.left is not None:
            node = node.left
        return node.value

    def maximum(self) -> Optional[Any]:
        """Largest value in the tree, or None if empty."""
        node = self.root
        if node is None:
            return None
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        """Number of levels in the tree (empty tree = 0)."""
        deepest = -1
        for _, depth in create_traverser(TraversalOrder.LEVEL_ORDER, self.adapter()).traverse(self.root):
            deepest = depth
        return deepest + 1

    def adapter(self) -> BinaryTreeAdapter:
        """Adapter navigating this tree's current node graph."""
        return BinaryTreeAdapter(self.root)

    # Traversals

    def traverse(self, order: Union[TraversalOrder, str] = TraversalOrder.INORDER) -> List[Any]:
        """Return the values visited in ``order``.

        Args:
            order: TraversalOrder or a name such as "preorder" or "levelOrder"
        """
        traverser = create_traverser(order, self.adapter())
        return [node.value for node, _ in traverser.traverse(self.root)]

    def preorder(self) -> List[Any]:
        return self.traverse(TraversalOrder.PREORDER)

    def inorder(self) -> List[Any]:
        return self.traverse(TraversalOrder.INORDER)

    def postorder(self) -> List[Any]:
        return self.traverse(TraversalOrder.POSTORDER)

    def level_order(self) -> List[Any]:
        return self.traverse(TraversalOrder.LEVEL_ORDER)

    # Python protocols

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate values in ascending order."""
        return iter(self.inorder())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.inorder()!r})"
