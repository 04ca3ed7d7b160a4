"""Invariant checks for every tree engine.

Each checker walks a node graph and returns a list of human-readable
violations; an empty list means the invariant holds. The checks read
only node fields, so they also work on trees rebuilt from snapshots or
modified with ``flip_node_color``.

All walks are iterative so list-shaped BSTs of any size can be checked.
"""

from typing import Any, Dict, List, Optional

from .core.node import TreeNode
from .core.tree import SearchTree
from .core.adapter import BinaryTreeAdapter
from .core.traverser import PostOrderTraverser
from ._common.config import TreeKind
from .engines.red_black import Color

_NEG_INF = float('-inf')
_POS_INF = float('inf')


def _within(value: Any, low: Any, high: Any) -> bool:
    # Bounds start at +/-inf, which compare with ints and floats
    return (low is _NEG_INF or low < value) and (high is _POS_INF or value < high)


def validate_bst(root: Optional[TreeNode]) -> List[str]:
    """Check the ordering invariant: left < node < right, no duplicates.

    Args:
        root: Root node of the tree (None = empty tree)

    Returns:
        List of violations (empty if valid)
    """
    errors = []
    if root is None:
        return errors

    stack = [(root, _NEG_INF, _POS_INF)]
    while stack:
        node, low, high = stack.pop()
        if not _within(node.value, low, high):
            errors.append(
                f"BST violation: node {node.value!r} outside ({low!r}, {high!r})")
        if node.left is not None:
            stack.append((node.left, low, node.value))
        if node.right is not None:
            stack.append((node.right, node.value, high))
    return errors


def validate_avl(root: Optional[TreeNode]) -> List[str]:
    """Check ordering plus stored heights and balance at every AVL node."""
    errors = validate_bst(root)

    heights: Dict[int, int] = {}
    for node, _ in PostOrderTraverser(BinaryTreeAdapter(root)).traverse(root):
        left = heights.get(id(node.left), 0) if node.left is not None else 0
        right = heights.get(id(node.right), 0) if node.right is not None else 0
        actual = 1 + max(left, right)
        heights[id(node)] = actual

        if node.height != actual:
            errors.append(
                f"Height violation at node {node.value!r}: stored={node.height}, actual={actual}")
        if abs(left - right) > 1:
            errors.append(
                f"Balance violation at node {node.value!r}: left={left}, right={right}")
    return errors


def validate_red_black(root: Optional[TreeNode]) -> List[str]:
    """Check ordering, coloring, black-height and parent links.

    Checks:
      1. Root is BLACK and has no parent
      2. No RED node has a RED child
      3. Equal black-height on all paths to null leaves
      4. Every child's parent link points at its structural parent
    """
    errors = validate_bst(root)
    if root is None:
        return errors

    if root.color is not Color.BLACK:
        errors.append(f"Root violation: root {root.value!r} is RED")
    if root.parent is not None:
        errors.append(f"Parent violation: root {root.value!r} has a parent link")

    # Null leaves count as one BLACK node
    black_heights: Dict[int, int] = {}
    for node, _ in PostOrderTraverser(BinaryTreeAdapter(root)).traverse(root):
        for child in (node.left, node.right):
            if child is None:
                continue
            if child.parent is not node:
                errors.append(
                    f"Parent violation: node {child.value!r} does not point at {node.value!r}")
            if node.color is Color.RED and child.color is Color.RED:
                errors.append(
                    f"Red violation: node {child.value!r} and its parent {node.value!r} are both RED")

        left_bh = black_heights[id(node.left)] if node.left is not None else 1
        right_bh = black_heights[id(node.right)] if node.right is not None else 1
        if left_bh != right_bh:
            errors.append(
                f"Black-height violation at node {node.value!r}: left={left_bh}, right={right_bh}")
        black_heights[id(node)] = max(left_bh, right_bh) + (1 if node.color is Color.BLACK else 0)
    return errors


_VALIDATORS = {
    TreeKind.BST: validate_bst,
    TreeKind.AVL: validate_avl,
    TreeKind.RED_BLACK: validate_red_black,
}


def validate_tree(tree: SearchTree) -> List[str]:
    """Run the checker matching ``tree.kind``; also checks the size counter."""
    errors = _VALIDATORS[tree.kind](tree.root)
    actual = tree.adapter().estimated_size(tree.root)
    if len(tree) != actual:
        errors.append(f"Size violation: len()={len(tree)}, nodes={actual}")
    return errors


def is_valid(tree: SearchTree) -> bool:
    return not validate_tree(tree)
