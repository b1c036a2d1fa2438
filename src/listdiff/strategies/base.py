"""The capability shared by every diff strategy, plus degenerate-case helpers."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from typing import Protocol, TypeVar, runtime_checkable

from listdiff.models import Edit

T = TypeVar("T", bound=Hashable)


@runtime_checkable
class DiffStrategy(Protocol):
    """Anything that turns ``(old, new)`` into a list of edits.

    Implementations must be pure: the result depends only on the two
    collections and the strategy's own constructor options.
    """

    name: str

    def diff(self, old: Sequence[T], new: Sequence[T]) -> list[Edit[T]]:
        """Return edits that transform *old* into *new*."""
        ...


def preprocess(old: Sequence[T], new: Sequence[T]) -> list[Edit[T]] | None:
    """Answer the empty-input cases without running a strategy.

    Returns ``[]`` when both sides are empty, one insertion per element when
    only *old* is empty, one deletion per element when only *new* is empty,
    and ``None`` when a real diff is needed.
    """
    if not old and not new:
        return []
    if not old:
        return [Edit.insert(value, index) for index, value in enumerate(new)]
    if not new:
        return [Edit.delete(value, index) for index, value in enumerate(old)]
    return None


def has_duplicates(items: Sequence[Hashable]) -> bool:
    return len(set(items)) != len(items)
