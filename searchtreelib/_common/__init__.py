"""Common components shared by every tree engine.

This internal package holds pure configuration code. It should NOT be
imported directly by users; use ``searchtreelib.config`` instead.

Important: This package must NEVER import from the engines to avoid
circular dependencies.
"""

from .config import (
    TreeKind,
    TraversalOrder,
    DataRequirement,
    ColorEncoding,
    DepthConfig,
    SnapshotConfig,
    TraversalConfig,
    parse_tree_kind,
    parse_order,
)

__all__ = [
    'TreeKind',
    'TraversalOrder',
    'DataRequirement',
    'ColorEncoding',
    'DepthConfig',
    'SnapshotConfig',
    'TraversalConfig',
    'parse_tree_kind',
    'parse_order',
]
