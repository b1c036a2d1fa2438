"""Entry point: diff two ordered collections.

:func:`diff` handles the empty-input shortcuts, runs the configured
strategy, reports forced updates, and emits logs and metrics.
:class:`ChangeSet` wraps one such result together with its inputs and a
lazily built :class:`~listdiff.structures.EditOperationIndex` for lookups.
"""

from __future__ import annotations

import json
import sys
import time
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, Generic, TypeVar

from listdiff.apply import apply_edits
from listdiff.config import STRATEGIES, DiffConfig
from listdiff.errors import ListDiffValidationError
from listdiff.models import Edit, EditOperation
from listdiff.observability import NoopMetricsHook, get_logger
from listdiff.strategies import DiffStrategy, IndexSetDiff, WagnerFischerDiff, preprocess
from listdiff.structures import EditOperationIndex

T = TypeVar("T", bound=Hashable)

log = get_logger("listdiff.diff")


def strategy_for(config: DiffConfig, name: str | None = None) -> DiffStrategy:
    """Build the strategy called *name*, or ``config.strategy`` when omitted.

    The remaining options come from *config*.

    Raises
    ------
    ListDiffValidationError
        The name matches no known strategy.
    """
    name = name if name is not None else config.strategy
    if name == "index_set":
        return IndexSetDiff(reduce_moves=config.reduce_moves)
    if name == "wagner_fischer":
        return WagnerFischerDiff(
            reduce_moves=config.reduce_moves,
            max_cells=config.max_matrix_cells,
        )
    raise ListDiffValidationError(
        message=f"Unknown diff strategy {name!r}",
        context={"field": "strategy", "value": name, "allowed": list(STRATEGIES)},
    )


def diff(
    old: Sequence[T],
    new: Sequence[T],
    *,
    strategy: DiffStrategy | str | None = None,
    config: DiffConfig | None = None,
    force_updates: Iterable[T] | None = None,
) -> list[Edit[T]]:
    """Compute the edits that transform *old* into *new*.

    Parameters
    ----------
    old, new:
        Ordered collections of hashable elements.
    strategy:
        A strategy instance, a strategy name (``"index_set"`` or
        ``"wagner_fischer"``), or ``None`` to use ``config.strategy``.
    config:
        Options; defaults to :class:`DiffConfig()`.
    force_updates:
        Values to report as a substitution at their destination index
        when they are present on both sides and received no edit of their
        own (for elements whose content changed while their identity did
        not).

    Returns
    -------
    list[Edit]
        The edit list.  Order carries no meaning beyond determinism.

    Raises
    ------
    ListDiffValidationError
        *strategy* is a string naming no known strategy.
    ListDiffSizeError
        The dynamic-programming strategy exceeded ``max_matrix_cells``.
    """
    config = config or DiffConfig()
    resolved = _resolve_strategy(strategy, config)
    metrics = config.metrics if config.metrics is not None else NoopMetricsHook()
    name = getattr(resolved, "name", type(resolved).__name__)
    tags = {"strategy": name}

    t0 = time.monotonic()
    edits = preprocess(old, new)
    if edits is None:
        edits = resolved.diff(old, new)
    if force_updates is not None:
        edits.extend(_forced_substitutions(old, new, edits, force_updates))
    elapsed_ms = (time.monotonic() - t0) * 1000

    metrics.increment("listdiff.diffs_total", tags=tags)
    metrics.timing("listdiff.diff_duration_ms", elapsed_ms, tags=tags)
    _emit_edit_metrics(metrics, edits)

    log.debug(
        "diff complete",
        extra={
            "extra_fields": {
                "op": "diff",
                "strategy": name,
                "old_length": len(old),
                "new_length": len(new),
                "edits": len(edits),
                "duration_ms": round(elapsed_ms, 3),
            }
        },
    )
    if config.debug_dump_diff:
        _dump_edits(name, edits)

    return edits


def _resolve_strategy(strategy: DiffStrategy | str | None, config: DiffConfig) -> DiffStrategy:
    if strategy is None:
        return strategy_for(config)
    if isinstance(strategy, str):
        return strategy_for(config, strategy)
    return strategy


def _forced_substitutions(
    old: Sequence[T],
    new: Sequence[T],
    edits: list[Edit[T]],
    force_updates: Iterable[T],
) -> list[Edit[T]]:
    forced = set(force_updates)
    touched = {edit.value for edit in edits}
    shared = set(old)
    return [
        Edit.replace(value, index)
        for index, value in enumerate(new)
        if value in forced and value in shared and value not in touched
    ]


def _emit_edit_metrics(metrics: Any, edits: list[Edit]) -> None:
    """Emit ``edits_total`` counters grouped by operation."""
    counts: Counter[str] = Counter(edit.operation.value for edit in edits)
    for operation, count in counts.items():
        metrics.increment("listdiff.edits_total", count, tags={"operation": operation})


def _dump_edits(strategy: str, edits: list[Edit]) -> None:
    """Write the edit list to stderr as JSON."""
    dump = {
        "strategy": strategy,
        "edits": [
            {
                "operation": edit.operation.value,
                "value": edit.value,
                "index": edit.index,
                **({"origin": edit.origin} if edit.origin is not None else {}),
            }
            for edit in edits
        ],
    }
    print(json.dumps(dump, indent=2, default=str), file=sys.stderr)


class ChangeSet(Generic[T]):
    """The edits between two collections, plus lookups over them.

    Parameters
    ----------
    origin:
        The starting-point collection.
    destination:
        The ending-point collection.
    strategy, config, force_updates:
        Forwarded to :func:`diff`.
    """

    def __init__(
        self,
        origin: Sequence[T],
        destination: Sequence[T],
        *,
        strategy: DiffStrategy | str | None = None,
        config: DiffConfig | None = None,
        force_updates: Iterable[T] | None = None,
    ) -> None:
        self.origin = origin
        self.destination = destination
        self.edits: list[Edit[T]] = diff(
            origin,
            destination,
            strategy=strategy,
            config=config,
            force_updates=force_updates,
        )
        self._operation_index: EditOperationIndex[T] | None = None

    @property
    def operation_index(self) -> EditOperationIndex[T]:
        if self._operation_index is None:
            self._operation_index = EditOperationIndex(self.edits)
        return self._operation_index

    def edits_for(self, value: T) -> list[Edit[T]]:
        return self.operation_index.edits_for(value)

    def edit_with_source(self, index: int) -> Edit[T] | None:
        return self.operation_index.edit_with_source(index)

    def remove(self, edit: Edit[T]) -> None:
        """Drop the edit for ``edit.value`` of kind ``edit.operation``.

        With repeated elements a bucket holds one edit per value; only that
        edit is removed from :attr:`edits`.
        """
        bucket = self.operation_index.bucket(edit.operation)
        index = bucket.index_of(edit)
        if index is None:
            return
        removed = bucket.value_for(index).as_tuple()  # type: ignore[union-attr]
        self.operation_index.remove(edit)
        position = next(i for i, e in enumerate(self.edits) if e.as_tuple() == removed)
        del self.edits[position]

    def counts(self) -> dict[EditOperation, int]:
        counts = Counter(edit.operation for edit in self.edits)
        return {operation: counts.get(operation, 0) for operation in EditOperation}

    def apply(self) -> list[T]:
        """Replay the edits against :attr:`origin`."""
        return apply_edits(self.origin, self.edits)

    def __len__(self) -> int:
        return len(self.edits)

    def __bool__(self) -> bool:
        return bool(self.edits)

    def __str__(self) -> str:
        lines = [f"ChangeSet ({len(self.edits)} edits) ["]
        lines.extend(f"  {edit}" for edit in self.edits)
        lines.append("]")
        return "\n".join(lines)
