"""Exceptions raised by SearchTreeLib.

Tree mutations never raise for caller misuse (duplicate inserts, missing
values, unrelated rotation pairs); they degrade to no-ops. These
exceptions cover programming errors at the library's boundaries.
"""


class SearchTreeError(Exception):
    """Base class for all SearchTreeLib errors."""
    pass


class ConfigurationError(SearchTreeError):
    """Raised when a TraversalConfig fails validation."""
    pass


class SnapshotError(SearchTreeError, ValueError):
    """Raised when a snapshot record cannot be turned back into a tree."""
    pass
