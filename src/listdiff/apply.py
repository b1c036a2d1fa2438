"""Replay an edit list against its origin collection.

This is the batch-update contract a UI list view follows:

1. Remove every origin index named by a deletion or a move.
2. Place insertions and move destinations at their destination indexes.
3. Fill the remaining destination slots with the surviving origin
   elements, in order.
4. Overwrite substitution indexes with their values.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

from listdiff.errors import ListDiffApplyError
from listdiff.models import Edit, EditOperation

T = TypeVar("T", bound=Hashable)


def apply_edits(old: Sequence[T], edits: Iterable[Edit[T]]) -> list[T]:
    """Return the destination collection described by *edits*.

    Raises
    ------
    ListDiffApplyError
        When an edit points outside the collection, names an origin index
        holding a different value, or claims an origin or destination that
        another edit already claimed.
    """
    removed: set[int] = set()
    placed: dict[int, T] = {}
    substituted: dict[int, T] = {}

    for edit in edits:
        if edit.operation is EditOperation.DELETION:
            _claim_origin(old, edit, edit.index, removed)
        elif edit.operation is EditOperation.MOVE:
            assert edit.origin is not None
            _claim_origin(old, edit, edit.origin, removed)
            _claim_slot(edit, placed)
        elif edit.operation is EditOperation.INSERTION:
            _claim_slot(edit, placed)
        else:
            _claim_slot(edit, substituted)

    survivors = iter([value for index, value in enumerate(old) if index not in removed])
    length = len(old) - len(removed) + len(placed)

    if placed and max(placed) >= length:
        index = max(placed)
        raise _apply_error(
            f"destination index {index} is past the end of a {length}-element result",
            operation=EditOperation.INSERTION,
            index=index,
            reason="out_of_range",
        )

    result = [placed[position] if position in placed else next(survivors) for position in range(length)]

    for index, value in substituted.items():
        if index >= length:
            raise _apply_error(
                f"substitution index {index} is past the end of a {length}-element result",
                operation=EditOperation.SUBSTITUTION,
                index=index,
                reason="out_of_range",
            )
        result[index] = value

    return result


def _claim_origin(old: Sequence[T], edit: Edit[T], index: int, removed: set[int]) -> None:
    if not 0 <= index < len(old):
        raise _apply_error(
            f"{edit} refers to origin index {index} of a {len(old)}-element collection",
            operation=edit.operation,
            index=index,
            reason="out_of_range",
        )
    if old[index] != edit.value:
        raise _apply_error(
            f"{edit} does not match origin value {old[index]!r}",
            operation=edit.operation,
            index=index,
            reason="value_mismatch",
        )
    if index in removed:
        raise _apply_error(
            f"origin index {index} is removed twice",
            operation=edit.operation,
            index=index,
            reason="duplicate_origin",
        )
    removed.add(index)


def _claim_slot(edit: Edit[T], slots: dict[int, T]) -> None:
    if edit.index < 0:
        raise _apply_error(
            f"{edit} has a negative index",
            operation=edit.operation,
            index=edit.index,
            reason="out_of_range",
        )
    if edit.index in slots:
        raise _apply_error(
            f"destination index {edit.index} is claimed twice",
            operation=edit.operation,
            index=edit.index,
            reason="duplicate_destination",
        )
    slots[edit.index] = edit.value


def _apply_error(
    message: str,
    *,
    operation: EditOperation,
    index: int,
    reason: str,
) -> ListDiffApplyError:
    return ListDiffApplyError(
        message=message,
        context={"operation": operation.value, "index": index, "reason": reason},
    )
