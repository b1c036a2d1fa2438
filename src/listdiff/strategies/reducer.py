"""Move reduction: fold delete/insert pairs of one value into a single move.

Both strategies describe a relocated element as a deletion at its origin
index plus an insertion at its destination index.  :func:`reduce_edits`
walks the insertion bucket in destination order and, whenever the deletion
bucket holds the same value, replaces the pair with one
:attr:`~listdiff.models.EditOperation.MOVE`.  The result never has more
edits than the input.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import TypeVar

from listdiff.models import Edit
from listdiff.observability import get_logger
from listdiff.structures import EditOperationIndex

T = TypeVar("T", bound=Hashable)

log = get_logger("listdiff.reducer")


def reduce_edits(operation_index: EditOperationIndex[T]) -> list[Edit[T]]:
    """Return the edits of *operation_index* with moves folded in.

    The caller's index is left untouched; the pass works on a copy.

    Parameters
    ----------
    operation_index:
        Raw edits bucketed by operation.

    Returns
    -------
    list[Edit]
        Insertions and moves in destination order, followed by the
        remaining deletions, pre-existing moves, and substitutions.
    """
    work = operation_index.copy()
    before = len(work)
    log.debug(
        "reducing edits",
        extra={
            "extra_fields": {
                "op": "reduce_edits",
                "inserts": len(work.inserts),
                "deletes": len(work.deletes),
            }
        },
    )

    reduced: list[Edit[T]] = []
    folded = 0
    for index, insertion in work.inserts.sorted_items():
        origin = work.deletes.remove(insertion)
        if origin is None:
            reduced.append(insertion)
            continue
        reduced.append(Edit.move(insertion.value, origin, index))
        folded += 1

    for bucket in (work.deletes, work.moves, work.substitutions):
        reduced.extend(edit for _, edit in bucket.sorted_items())

    assert len(reduced) == before - folded, "move reduction dropped an edit"
    return reduced
