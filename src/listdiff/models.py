"""Public data models for listdiff.

An :class:`Edit` is one atomic change needed to turn an origin sequence
into a destination sequence.  Edits compare and hash by *value only*: a
deletion and an insertion of the same element are "equal", which is what
lets the move-reduction pass find delete/insert pairs with plain set and
dict lookups.  Use :meth:`Edit.as_tuple` when every field matters.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class EditOperation(str, Enum):
    """Kinds of edit emitted by the diff strategies."""

    INSERTION = "insertion"
    """Value present in the destination at ``index``, absent from the origin."""

    DELETION = "deletion"
    """Value present in the origin at ``index``, absent from the destination."""

    SUBSTITUTION = "substitution"
    """Value at destination ``index`` replaces whatever the origin had there."""

    MOVE = "move"
    """Value present in both, relocated from ``origin`` to ``index``."""


@dataclass(frozen=True, eq=False)
class Edit(Generic[T]):
    """A single edit operation.

    Attributes
    ----------
    operation:
        The kind of edit.
    value:
        The element the edit refers to.  For substitutions this is the
        destination element.
    index:
        Origin index for deletions, destination index for everything else.
    origin:
        Origin index of a move; ``None`` for every other operation.
    """

    operation: EditOperation
    value: T
    index: int
    origin: int | None = None

    def __post_init__(self) -> None:
        assert (self.operation is EditOperation.MOVE) == (self.origin is not None), (
            f"{self.operation.value} edit with origin={self.origin!r}"
        )

    # ── Constructors ───────────────────────────────────────────────────

    @classmethod
    def insert(cls, value: T, index: int) -> Edit[T]:
        return cls(EditOperation.INSERTION, value, index)

    @classmethod
    def delete(cls, value: T, index: int) -> Edit[T]:
        return cls(EditOperation.DELETION, value, index)

    @classmethod
    def replace(cls, value: T, index: int) -> Edit[T]:
        return cls(EditOperation.SUBSTITUTION, value, index)

    @classmethod
    def move(cls, value: T, from_index: int, to_index: int) -> Edit[T]:
        return cls(EditOperation.MOVE, value, to_index, origin=from_index)

    # ── Identity ───────────────────────────────────────────────────────

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Edit):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def as_tuple(self) -> tuple[EditOperation, T, int, int | None]:
        """Return every field, for comparisons that must not ignore the kind."""
        return (self.operation, self.value, self.index, self.origin)

    def __str__(self) -> str:
        if self.operation is EditOperation.MOVE:
            return f"Move {self.value!r} from {self.origin} to {self.index}"
        if self.operation is EditOperation.SUBSTITUTION:
            return f"Replace {self.value!r} at {self.index}"
        if self.operation is EditOperation.INSERTION:
            return f"Insert {self.value!r} at {self.index}"
        return f"Delete {self.value!r} at {self.index}"
