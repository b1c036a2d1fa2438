"""Per-invocation working structures used by the diff strategies."""

from .indexed_set import IndexedSet
from .operation_index import EditOperationIndex

__all__ = [
    "EditOperationIndex",
    "IndexedSet",
]
