"""Tree traversal strategies for SearchTreeLib.

Traversers implement the four classic visit orders over a binary tree.
They work through a BinaryTreeAdapter, so the same traverser walks BST,
AVL and red-black nodes alike.

All traversers are iterative (explicit stack or queue): an unbalanced
BST built from sorted input is a linked list, and a recursive walk would
run into the interpreter's recursion limit.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Deque, List, Tuple, Union
from collections import deque
from .node import TreeNode
from .adapter import BinaryTreeAdapter
from .._common.config import TraversalOrder, parse_order


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    order: TraversalOrder

    def __init__(self, adapter: BinaryTreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: BinaryTreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal (None = empty tree)
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class PreOrderTraverser(TreeTraverser):
    """Depth-first pre-order: node, then left subtree, then right subtree.

    Good for copying trees: replaying the visited values as inserts into
    an empty BST rebuilds the same shape.
    """

    order = TraversalOrder.PREORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        stack: List[Tuple[TreeNode, int]] = [(root, 0)]
        while stack:
            node, depth = stack.pop()
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)
            if self._should_explore(depth, max_depth):
                # Right pushed first so left pops first
                right = self.adapter.get_right(node)
                left = self.adapter.get_left(node)
                if right is not None:
                    stack.append((right, depth + 1))
                if left is not None:
                    stack.append((left, depth + 1))


class InOrderTraverser(TreeTraverser):
    """Depth-first in-order: left subtree, node, right subtree.

    On a valid search tree this yields values in ascending order.
    """

    order = TraversalOrder.INORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        stack: List[Tuple[TreeNode, int]] = []
        current = root
        depth = 0
        while stack or current is not None:
            # Slide down the left spine
            while current is not None:
                stack.append((current, depth))
                if self._should_explore(depth, max_depth):
                    current = self.adapter.get_left(current)
                    depth += 1
                else:
                    current = None

            node, node_depth = stack.pop()
            if self._should_yield(node_depth, min_depth, max_depth):
                yield (node, node_depth)

            if self._should_explore(node_depth, max_depth):
                current = self.adapter.get_right(node)
                depth = node_depth + 1


class PostOrderTraverser(TreeTraverser):
    """Depth-first post-order: left subtree, right subtree, node.

    Processes nodes after their entire subtree. Good for releasing a
    tree bottom-up or for computing subtree aggregates such as heights.
    """

    order = TraversalOrder.POSTORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        # Third element flags whether children were already pushed
        stack: List[Tuple[TreeNode, int, bool]] = [(root, 0, False)]
        while stack:
            node, depth, expanded = stack.pop()
            if expanded:
                if self._should_yield(depth, min_depth, max_depth):
                    yield (node, depth)
                continue

            stack.append((node, depth, True))
            if self._should_explore(depth, max_depth):
                right = self.adapter.get_right(node)
                left = self.adapter.get_left(node)
                if right is not None:
                    stack.append((right, depth + 1, False))
                if left is not None:
                    stack.append((left, depth + 1, False))


class LevelOrderTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal.

    Visits all nodes at depth N, left to right, before any node at
    depth N+1.
    """

    order = TraversalOrder.LEVEL_ORDER

    def traverse(self,
                 root: Optional[TreeNode],
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if root is None:
            return
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])
        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


_TRAVERSERS = {
    TraversalOrder.PREORDER: PreOrderTraverser,
    TraversalOrder.INORDER: InOrderTraverser,
    TraversalOrder.POSTORDER: PostOrderTraverser,
    TraversalOrder.LEVEL_ORDER: LevelOrderTraverser,
}


def create_traverser(strategy: Union[TraversalOrder, str],
                     adapter: BinaryTreeAdapter) -> TreeTraverser:
    """Create a traverser instance by order or order name.

    Args:
        strategy: TraversalOrder, or a name such as "preorder", "in",
            "post", "levelOrder", "bfs"
        adapter: BinaryTreeAdapter for the tree

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    return _TRAVERSERS[parse_order(strategy)](adapter)
