#!/usr/bin/env python3
"""
Basic example showing the three tree engines side by side.

This example demonstrates:
- Building each engine from the same insertion sequence
- Comparing shapes and heights
- Manual BST rotation and red-black recoloring
- Exporting a red-black snapshot as JSON
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from searchtreelib import create_tree, get_tree_stats, validate_tree


def main():
    """Insert the same values into every engine and compare the results."""
    values = [int(v) for v in sys.argv[1:]] or list(range(1, 16))

    print(f"Inserting: {values}")
    print("-" * 50)

    for kind in ("bst", "avl", "rbt"):
        tree = create_tree(kind, values)
        stats = get_tree_stats(tree)
        print(f"\n{kind.upper()}")
        print(f"  level order: {tree.level_order()}")
        print(f"  height: {stats['height']}  leaves: {stats['leaf_nodes']}")
        if 'black_height' in stats:
            print(f"  black height: {stats['black_height']}")

    # Rotating the BST root by hand
    bst = create_tree("bst", values)
    if bst.root is not None and bst.root.right is not None:
        bst.rotate(bst.root.value, bst.root.right.value)
        print(f"\nBST after rotating the root left: {bst.level_order()}")

    # Recoloring breaks the red-black invariants until flipped back
    rbt = create_tree("rbt", values)
    rbt.flip_node_color(rbt.root.value)
    print("\nRed-black tree after flipping the root:")
    for error in validate_tree(rbt):
        print(f"  {error}")
    rbt.flip_node_color(rbt.root.value)

    print(f"\nSnapshot:\n{rbt.to_json(indent=2)}")


if __name__ == "__main__":
    main()
