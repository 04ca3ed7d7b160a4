"""Snapshot serialization for SearchTreeLib.

A snapshot is a nested plain record::

    {"value": 20, "color": "BLACK",
     "left": {"value": 10, "color": "RED", "left": None, "right": None},
     "right": {"value": 30, "color": "RED", "left": None, "right": None}}

Each engine decides which extra fields a node record carries (``color``
for red-black, ``height`` for AVL); this module only handles the nesting.
Both directions walk with an explicit stack, so list-shaped trees of any
size round-trip.

Parent back-references are never serialized. They are re-derived while
rebuilding, because children are linked through ``TreeNode.attach``.
"""

import json
from collections.abc import Mapping
from typing import Any, Callable, Dict, Optional, Tuple

from .core.node import TreeNode
from .exceptions import SnapshotError

NodeEncoder = Callable[[TreeNode], Dict[str, Any]]
NodeDecoder = Callable[[Mapping], TreeNode]


def to_record(root: Optional[TreeNode], encode: NodeEncoder) -> Optional[Dict[str, Any]]:
    """Convert the subtree at ``root`` into a nested record.

    Args:
        root: Subtree root (None = empty tree)
        encode: Function returning the node's own fields (without links)

    Returns:
        Nested record, or None for an empty tree
    """
    if root is None:
        return None

    def _encode(node: TreeNode) -> Dict[str, Any]:
        record = encode(node)
        record['left'] = None
        record['right'] = None
        return record

    top = _encode(root)
    stack = [(root, top)]
    while stack:
        node, record = stack.pop()
        for side in ('left', 'right'):
            child = getattr(node, side)
            if child is not None:
                child_record = _encode(child)
                record[side] = child_record
                stack.append((child, child_record))
    return top


def from_record(record: Optional[Mapping], decode: NodeDecoder) -> Tuple[Optional[TreeNode], int]:
    """Rebuild a node graph top-down from a nested record.

    Args:
        record: Nested record (None = empty tree)
        decode: Function creating one detached node from its record

    Returns:
        Tuple of (root node or None, number of nodes built)

    Raises:
        SnapshotError: If a record is not a mapping or lacks ``value``
    """
    if record is None:
        return None, 0

    root = _decode_one(record, decode)
    count = 1
    stack = [(record, root)]
    while stack:
        node_record, node = stack.pop()
        for side in ('left', 'right'):
            child_record = node_record.get(side)
            if child_record is None:
                continue
            child = _decode_one(child_record, decode)
            node.attach(side, child)
            count += 1
            stack.append((child_record, child))
    return root, count


def _decode_one(record: Any, decode: NodeDecoder) -> TreeNode:
    if not isinstance(record, Mapping):
        raise SnapshotError(f"Snapshot node must be a mapping, got {type(record).__name__}")
    if 'value' not in record:
        raise SnapshotError(f"Snapshot node is missing 'value': {record!r}")
    return decode(record)


def dumps(record: Optional[Dict[str, Any]], **kwargs) -> str:
    """Encode a snapshot record as JSON text (``null`` for an empty tree)."""
    return json.dumps(record, **kwargs)


def loads(text: str) -> Optional[Dict[str, Any]]:
    """Decode JSON text into a snapshot record.

    Raises:
        SnapshotError: If the text is not valid JSON or not an object/null
    """
    try:
        record = json.loads(text)
    except json.JSONDecodeError as e:
        raise SnapshotError(f"Invalid snapshot JSON: {e}") from e
    if record is not None and not isinstance(record, dict):
        raise SnapshotError(f"Snapshot JSON must be an object or null, got {type(record).__name__}")
    return record
