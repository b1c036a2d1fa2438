"""Index-set diff: positional bookkeeping over the union of values.

Both collections are indexed (value -> position) and every distinct value
is classified once:

* only in ``old``  -> deletion at its origin index;
* only in ``new``  -> insertion at its destination index;
* in both          -> kept, or a deletion plus an insertion.

Shared values are listed in destination order and the kept ones are a
longest strictly increasing subsequence of their origin indexes.  Kept
values therefore appear in the same relative order on both sides, which is
what lets a consumer replay the result as a batch update, and no smaller
set of relocations produces ``new``.

Runs in O((n + m) log(n + m)).  Elements must be unique within each
collection.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Hashable, Sequence
from typing import TypeVar

from listdiff.models import Edit
from listdiff.observability import get_logger
from listdiff.structures import EditOperationIndex, IndexedSet

from .base import has_duplicates
from .reducer import reduce_edits

T = TypeVar("T", bound=Hashable)

log = get_logger("listdiff.diff")


class IndexSetDiff:
    """Positional-bookkeeping diff for collections of unique elements.

    Parameters
    ----------
    reduce_moves:
        Fold matching deletion/insertion pairs into moves.  Without it a
        relocated value is reported as a deletion and an insertion.
    """

    name = "index_set"

    def __init__(self, reduce_moves: bool = True) -> None:
        self.reduce_moves = reduce_moves

    def diff(self, old: Sequence[T], new: Sequence[T]) -> list[Edit[T]]:
        if has_duplicates(old) or has_duplicates(new):
            log.warning(
                "index_set diff given repeated elements; result is unspecified",
                extra={"extra_fields": {"op": "diff", "strategy": self.name}},
            )

        edits = self.raw_edits(old, new)
        if self.reduce_moves:
            return reduce_edits(edits)
        return edits.all_edits()

    def raw_edits(self, old: Sequence[T], new: Sequence[T]) -> EditOperationIndex[T]:
        """Classify every value without folding moves."""
        source: IndexedSet[int, T] = IndexedSet.from_sequence(old)
        target: IndexedSet[int, T] = IndexedSet.from_sequence(new)

        edits: EditOperationIndex[T] = EditOperationIndex()

        for s, value in source.sorted_items():
            if not target.contains_value(value):
                edits.delete(value, s)

        shared: list[tuple[int, int, T]] = []
        for t, value in target.sorted_items():
            s = source.index_of(value)
            if s is None:
                edits.insert(value, t)
            else:
                shared.append((s, t, value))

        kept = _longest_increasing_run([s for s, _, _ in shared])
        for position, (s, t, value) in enumerate(shared):
            if position not in kept:
                edits.delete(value, s)
                edits.insert(value, t)

        return edits


def _longest_increasing_run(origins: list[int]) -> set[int]:
    """Return positions of a longest strictly increasing subsequence of *origins*.

    Patience sorting: ``tails[k]`` holds the smallest origin that ends an
    increasing run of length ``k + 1``.
    """
    tails: list[int] = []
    tail_positions: list[int] = []
    predecessor: list[int] = [-1] * len(origins)

    for position, origin in enumerate(origins):
        length = bisect_left(tails, origin)
        if length:
            predecessor[position] = tail_positions[length - 1]
        if length == len(tails):
            tails.append(origin)
            tail_positions.append(position)
        else:
            tails[length] = origin
            tail_positions[length] = position

    run: set[int] = set()
    position = tail_positions[-1] if tail_positions else -1
    while position != -1:
        run.add(position)
        position = predecessor[position]
    return run
