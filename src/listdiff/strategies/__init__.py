"""Diff strategies and the shared move-reduction pass.

Exports
-------
DiffStrategy
    Protocol every strategy satisfies.
IndexSetDiff
    Single-pass positional diff for unique elements (moves, no substitutions).
WagnerFischerDiff
    Dynamic-programming edit distance (substitutions, tolerates repeats).
reduce_edits
    Fold deletion/insertion pairs of one value into moves.
preprocess
    Answer empty-input cases without running a strategy.
"""

from .base import DiffStrategy, preprocess
from .index_set import IndexSetDiff
from .reducer import reduce_edits
from .wagner_fischer import WagnerFischerDiff

__all__ = [
    "DiffStrategy",
    "IndexSetDiff",
    "WagnerFischerDiff",
    "preprocess",
    "reduce_edits",
]
