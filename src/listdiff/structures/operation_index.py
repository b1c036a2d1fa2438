"""Edits bucketed by operation, addressable by index and by value.

Each bucket is an :class:`IndexedSet` mapping an edit's ``index`` to the
edit itself.  Because edits hash by value, ``bucket.index_of(edit)`` finds
the bucketed edit for *any* edit carrying the same value, which gives the
move-reduction pass O(1) "is this value also deleted?" lookups.

A value can occupy at most one slot per bucket.  Collections with
repeated elements therefore lose edits when bucketed; callers that may
see duplicates should keep the flat edit list instead.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic, TypeVar

from listdiff.models import Edit, EditOperation

from .indexed_set import IndexedSet

T = TypeVar("T", bound=Hashable)


class EditOperationIndex(Generic[T]):
    """Four parallel buckets: inserts, deletes, substitutions, and moves."""

    __slots__ = ("deletes", "inserts", "moves", "substitutions")

    def __init__(self, edits: Iterable[Edit[T]] = ()) -> None:
        self.inserts: IndexedSet[int, Edit[T]] = IndexedSet()
        self.deletes: IndexedSet[int, Edit[T]] = IndexedSet()
        self.substitutions: IndexedSet[int, Edit[T]] = IndexedSet()
        self.moves: IndexedSet[int, Edit[T]] = IndexedSet()
        for edit in edits:
            self.add(edit)

    def bucket(self, operation: EditOperation) -> IndexedSet[int, Edit[T]]:
        if operation is EditOperation.INSERTION:
            return self.inserts
        if operation is EditOperation.DELETION:
            return self.deletes
        if operation is EditOperation.SUBSTITUTION:
            return self.substitutions
        return self.moves

    def add(self, edit: Edit[T]) -> None:
        self.bucket(edit.operation).insert(edit, edit.index)

    def insert(self, value: T, index: int) -> None:
        self.inserts.insert(Edit.insert(value, index), index)

    def delete(self, value: T, index: int) -> None:
        self.deletes.insert(Edit.delete(value, index), index)

    def replace(self, value: T, index: int) -> None:
        self.substitutions.insert(Edit.replace(value, index), index)

    def remove(self, edit: Edit[T]) -> int | None:
        """Drop the edit for ``edit.value`` from the bucket of ``edit.operation``.

        Returns the index the removed edit was stored under.
        """
        return self.bucket(edit.operation).remove(edit)

    def edits_for(self, value: T) -> list[Edit[T]]:
        """Return every bucketed edit that refers to *value*."""
        probe = Edit.insert(value, 0)
        found: list[Edit[T]] = []
        for bucket in (self.inserts, self.deletes, self.substitutions, self.moves):
            index = bucket.index_of(probe)
            if index is not None:
                found.append(bucket.value_for(index))  # type: ignore[arg-type]
        return found

    def edit_with_source(self, index: int) -> Edit[T] | None:
        """Return the deletion or move leaving origin *index*.

        Falls back to a substitution stored at *index*.  Substitutions are
        keyed by destination index, so the fallback matches a substitution
        whose destination slot has the same number as the origin slot.  For
        the dynamic-programming strategy that is the common case of an
        in-place replacement; after earlier insertions or deletions the two
        numbers differ and the substitution is not found.
        """
        edit = self.deletes.value_for(index)
        if edit is not None:
            return edit
        for _, move in self.moves:
            if move.origin == index:
                return move
        return self.substitutions.value_for(index)

    def all_edits(self) -> list[Edit[T]]:
        """Flatten the buckets: inserts, deletes, moves, then substitutions."""
        edits: list[Edit[T]] = []
        for bucket in (self.inserts, self.deletes, self.moves, self.substitutions):
            edits.extend(edit for _, edit in bucket.sorted_items())
        return edits

    def copy(self) -> EditOperationIndex[T]:
        clone: EditOperationIndex[T] = EditOperationIndex()
        clone.inserts = self.inserts.copy()
        clone.deletes = self.deletes.copy()
        clone.substitutions = self.substitutions.copy()
        clone.moves = self.moves.copy()
        return clone

    def __len__(self) -> int:
        return len(self.inserts) + len(self.deletes) + len(self.substitutions) + len(self.moves)

    def __repr__(self) -> str:
        return (
            f"EditOperationIndex(inserts={len(self.inserts)}, deletes={len(self.deletes)}, "
            f"substitutions={len(self.substitutions)}, moves={len(self.moves)})"
        )
