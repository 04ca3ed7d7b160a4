"""Tree engines.

Each engine implements the SearchTree interface on its own node type:

- BinarySearchTree / BSTNode: unbalanced, with manual rotation
- AVLTree / AVLNode: height-balanced
- RedBlackTree / RBNode: color-balanced, with parent links
"""

from .bst import BSTNode, BinarySearchTree
from .avl import AVLNode, AVLTree
from .red_black import Color, RBNode, RedBlackTree

__all__ = [
    "BSTNode",
    "BinarySearchTree",
    "AVLNode",
    "AVLTree",
    "Color",
    "RBNode",
    "RedBlackTree",
]
