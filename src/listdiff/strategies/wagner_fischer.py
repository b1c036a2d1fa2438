"""Wagner-Fischer edit distance with an explicit edit script.

Classic unit-cost edit distance, computed row by row so only two rows of
the ``(len(old) + 1) x (len(new) + 1)`` matrix are alive at once.  Each
slot stores the edit list of the cheapest path to that cell instead of a
bare count, so the last slot of the last row *is* the answer.

Time is O(n * m) cell visits, but every non-matching cell copies a list of
up to ``n + m`` edits, so this is meant for short UI-sized collections.
Use :attr:`max_cells` to refuse anything larger.

See https://en.wikipedia.org/wiki/Wagner%E2%80%93Fischer_algorithm
"""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import TypeVar

from listdiff.errors import ListDiffSizeError
from listdiff.models import Edit
from listdiff.observability import get_logger
from listdiff.structures import EditOperationIndex

from .base import has_duplicates
from .reducer import reduce_edits

T = TypeVar("T", bound=Hashable)

log = get_logger("listdiff.diff")


class WagnerFischerDiff:
    """Dynamic-programming diff producing insertions, deletions and substitutions.

    Tolerates repeated elements.  Deletion indexes refer to ``old``;
    insertion and substitution indexes refer to ``new``.

    Parameters
    ----------
    reduce_moves:
        Run the shared move-reduction pass on the script.  Skipped (with a
        warning) when either collection has repeated elements, because the
        reduction buckets edits by value.
    max_cells:
        Refuse inputs where ``len(old) * len(new)`` exceeds this value by
        raising :class:`~listdiff.errors.ListDiffSizeError`.  ``None``
        disables the check.
    """

    name = "wagner_fischer"

    def __init__(self, reduce_moves: bool = False, max_cells: int | None = None) -> None:
        self.reduce_moves = reduce_moves
        self.max_cells = max_cells

    def diff(self, old: Sequence[T], new: Sequence[T]) -> list[Edit[T]]:
        self._check_size(old, new)
        edits = self._edit_script(old, new)

        if not self.reduce_moves:
            return edits
        if has_duplicates(old) or has_duplicates(new):
            log.warning(
                "skipping move reduction for repeated elements",
                extra={"extra_fields": {"op": "diff", "strategy": self.name}},
            )
            return edits
        return reduce_edits(EditOperationIndex(edits))

    def _check_size(self, old: Sequence[T], new: Sequence[T]) -> None:
        if self.max_cells is None:
            return
        cells = len(old) * len(new)
        if cells > self.max_cells:
            raise ListDiffSizeError(
                message=(
                    f"wagner_fischer diff of {len(old)}x{len(new)} elements exceeds "
                    f"max_cells={self.max_cells}"
                ),
                context={
                    "old_length": len(old),
                    "new_length": len(new),
                    "max_cells": self.max_cells,
                },
            )

    def _edit_script(self, old: Sequence[T], new: Sequence[T]) -> list[Edit[T]]:
        # Row for an empty origin prefix: slot k inserts new[:k].
        previous: list[list[Edit[T]]] = [[]]
        for index_in_new, new_item in enumerate(new):
            previous.append(_combine(previous[index_in_new], Edit.insert(new_item, index_in_new)))

        current = previous
        for index_in_old, old_item in enumerate(old):
            current = [_combine(previous[0], Edit.delete(old_item, index_in_old))]

            for index_in_new, new_item in enumerate(new):
                slot = index_in_new + 1
                if old_item == new_item:
                    current.append(previous[slot - 1])
                    continue

                top = previous[slot]
                left = current[slot - 1]
                top_left = previous[slot - 1]
                cheapest = min(len(top), len(left), len(top_left))

                if len(top) == cheapest:
                    current.append(_combine(top, Edit.delete(old_item, index_in_old)))
                elif len(left) == cheapest:
                    current.append(_combine(left, Edit.insert(new_item, index_in_new)))
                else:
                    current.append(_combine(top_left, Edit.replace(new_item, index_in_new)))

            assert len(current) == len(previous), "row width changed mid-diff"
            previous = current

        return list(current[-1])


def _combine(slot: list[Edit[T]], edit: Edit[T]) -> list[Edit[T]]:
    return [*slot, edit]
