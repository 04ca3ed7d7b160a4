"""TreeNode abstraction for SearchTreeLib.

The TreeNode is intentionally kept simple - it's primarily a data container
holding a value and two owning child links. Navigation logic is delegated
to the BinaryTreeAdapter, and structural invariants are the business of
the tree engine that owns the node.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator


class TreeNode(ABC):
    """Abstract base class for binary search tree nodes.

    Concrete nodes define ``value``, ``left`` and ``right`` slots. Values
    are unique within one tree, so the value doubles as the identifier.

    Nodes compare by identity: a node's value changes in place when a
    deletion copies its successor's value into it.
    """

    __slots__ = ()

    def identifier(self) -> Any:
        """Return the value identifying this node within its tree."""
        return self.value

    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        return self.left is None and self.right is None

    def children(self) -> Iterator['TreeNode']:
        """Yield the non-empty children, left before right."""
        if self.left is not None:
            yield self.left
        if self.right is not None:
            yield self.right

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return the node's value and its engine-specific fields.

        Common metadata fields:
        - value: The stored value
        - height: Subtree height (AVL)
        - color: "RED" or "BLACK" (red-black)

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    @abstractmethod
    def copy_fields(self) -> 'TreeNode':
        """Return a detached copy of this node alone (no child links)."""
        pass

    def attach(self, side: str, child: 'TreeNode') -> None:
        """Link ``child`` under this node on ``side`` ('left' or 'right')."""
        setattr(self, side, child)

    def clone(self) -> 'TreeNode':
        """Return a deep structural copy of the subtree rooted here.

        Walks with an explicit stack so degenerate (list-shaped) trees
        copy without recursion.
        """
        root_copy = self.copy_fields()
        stack = [(self, root_copy)]
        while stack:
            source, target = stack.pop()
            for side in ('left', 'right'):
                child = getattr(source, side)
                if child is not None:
                    child_copy = child.copy_fields()
                    target.attach(side, child_copy)
                    stack.append((child, child_copy))
        return root_copy

    def __str__(self) -> str:
        """String representation defaults to the value."""
        return str(self.identifier())

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(value={self.identifier()!r})"
