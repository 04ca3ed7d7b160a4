"""BinaryTreeAdapter for SearchTreeLib.

The adapter provides the navigation logic over engine nodes, decoupling
the node representation from the traversal mechanism. Traversers and
collectors only ever walk a tree through an adapter.
"""

from typing import Iterator, Optional
from .node import TreeNode


class BinaryTreeAdapter:
    """Navigates the left/right links of any engine's node graph.

    Nodes with a ``parent`` back-reference (red-black) answer parent
    queries directly. For engines without parent links the adapter
    finds the parent by descending from the root it was created with.
    """

    def __init__(self, root: Optional[TreeNode] = None):
        """Initialize adapter.

        Args:
            root: Root of the tree, needed for parent lookups on nodes
                without a parent link
        """
        self.root = root

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of the non-empty children of ``node``."""
        return node.children()

    def get_left(self, node: TreeNode) -> Optional[TreeNode]:
        return node.left

    def get_right(self, node: TreeNode) -> Optional[TreeNode]:
        return node.right

    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is root (or not in the tree)
        """
        if hasattr(node, 'parent'):
            return node.parent

        value = node.identifier()
        parent = None
        current = self.root
        while current is not None and current is not node:
            parent = current
            current = current.left if value < current.value else current.right
        if current is None:
            return None
        return parent

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node (root = 0) by walking up."""
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get the sibling of the given node, if any."""
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings
        return (child for child in self.get_children(parent) if child is not node)

    def estimated_size(self, node: Optional[TreeNode]) -> int:
        """Count the nodes in the subtree rooted at ``node``."""
        if node is None:
            return 0
        count = 0
        stack = [node]
        while stack:
            current = stack.pop()
            count += 1
            stack.extend(self.get_children(current))
        return count
