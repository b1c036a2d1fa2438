"""listdiff -- move-aware diffs of ordered collections.

Public re-exports
-----------------

* **Entry points:** :func:`diff`, :class:`ChangeSet`, :func:`apply_edits`
* **Strategies:** :class:`IndexSetDiff`, :class:`WagnerFischerDiff`,
  the :class:`DiffStrategy` protocol and :func:`reduce_edits`
* **Configuration:** :class:`DiffConfig`
* **Errors:** Every :class:`ListDiffError` subclass and :class:`ErrorCode`
* **Models and structures:** :class:`Edit`, :class:`EditOperation`,
  :class:`IndexedSet`, :class:`EditOperationIndex`

Usage::

    from listdiff import diff, apply_edits

    old = ["a", "b", "c"]
    new = ["c", "a", "b"]
    edits = diff(old, new)          # [Edit.move("c", 2, 0)]
    assert apply_edits(old, edits) == new
"""

from __future__ import annotations

__version__ = "0.1.0"

# ── Entry points ────────────────────────────────────────────────────────
from listdiff.apply import apply_edits
from listdiff.changeset import ChangeSet, diff, strategy_for

# ── Configuration ───────────────────────────────────────────────────────
from listdiff.config import STRATEGIES, DiffConfig

# ── Strategies ──────────────────────────────────────────────────────────
from listdiff.strategies import (
    DiffStrategy,
    IndexSetDiff,
    WagnerFischerDiff,
    preprocess,
    reduce_edits,
)

# ── Errors ──────────────────────────────────────────────────────────────
from listdiff.errors import (
    ErrorCode,
    ListDiffApplyError,
    ListDiffError,
    ListDiffSizeError,
    ListDiffValidationError,
)

# ── Models ──────────────────────────────────────────────────────────────
from listdiff.models import Edit, EditOperation
from listdiff.structures import EditOperationIndex, IndexedSet

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    "__version__",
    # Entry points
    "diff",
    "ChangeSet",
    "apply_edits",
    "strategy_for",
    # Configuration
    "DiffConfig",
    "STRATEGIES",
    # Strategies
    "DiffStrategy",
    "IndexSetDiff",
    "WagnerFischerDiff",
    "preprocess",
    "reduce_edits",
    # Errors
    "ListDiffError",
    "ErrorCode",
    "ListDiffValidationError",
    "ListDiffSizeError",
    "ListDiffApplyError",
    # Models
    "Edit",
    "EditOperation",
    "IndexedSet",
    "EditOperationIndex",
]
