"""Configuration re-export.

Public home of the configuration components defined in the
``_common`` package.
"""

from ._common.config import (
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
