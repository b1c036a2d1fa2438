"""A one-to-one map between positional indexes and values.

:class:`IndexedSet` answers "which value sits at this index?" and "at which
index is this value?" in O(1).  Inserting a pair evicts any existing pair
that shares either the index or the value, so the two internal dicts always
describe the same bijection.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Iterator, Sequence
from typing import Generic, TypeVar

I = TypeVar("I", bound=Hashable)  # noqa: E741
V = TypeVar("V", bound=Hashable)

_MISSING = object()


class IndexedSet(Generic[I, V]):
    """Bidirectional ``index <-> value`` map with unique keys on both sides.

    Iteration yields ``(index, value)`` pairs in insertion order; use
    :meth:`sorted_items` when the indexes are orderable and a positional
    walk is needed.

    Parameters
    ----------
    pairs:
        Optional initial ``(index, value)`` pairs, inserted in order.
    """

    __slots__ = ("_by_index", "_by_value")

    def __init__(self, pairs: Iterable[tuple[I, V]] | None = None) -> None:
        self._by_index: dict[I, V] = {}
        self._by_value: dict[V, I] = {}
        for index, value in pairs or ():
            self.insert(value, index)

    @classmethod
    def from_sequence(cls, items: Sequence[V]) -> IndexedSet[int, V]:
        """Index *items* by position.

        A value that occurs more than once ends up mapped to its last
        position only.
        """
        return cls(enumerate(items))  # type: ignore[arg-type]

    # ── Lookups ────────────────────────────────────────────────────────

    def value_for(self, index: I) -> V | None:
        return self._by_index.get(index)

    def index_of(self, value: V) -> I | None:
        return self._by_value.get(value)

    def contains_value(self, value: V) -> bool:
        return value in self._by_value

    def contains_index(self, index: I) -> bool:
        return index in self._by_index

    def __len__(self) -> int:
        return len(self._by_index)

    def __bool__(self) -> bool:
        return bool(self._by_index)

    # ── Mutation ───────────────────────────────────────────────────────

    def insert(self, value: V, index: I) -> None:
        """Map *value* to *index*, evicting any pair holding either key."""
        previous_index = self._by_value.pop(value, _MISSING)
        if previous_index is not _MISSING:
            del self._by_index[previous_index]
        previous_value = self._by_index.pop(index, _MISSING)
        if previous_value is not _MISSING:
            del self._by_value[previous_value]

        self._by_index[index] = value
        self._by_value[value] = index
        self._check()

    def remove(self, value: V) -> I | None:
        """Evict *value* and return the index it was stored under."""
        index = self._by_value.pop(value, _MISSING)
        if index is _MISSING:
            return None
        del self._by_index[index]
        self._check()
        return index

    def remove_index(self, index: I) -> V | None:
        """Evict the pair at *index* and return its value."""
        value = self._by_index.pop(index, _MISSING)
        if value is _MISSING:
            return None
        del self._by_value[value]
        self._check()
        return value

    def clear(self) -> None:
        self._by_index.clear()
        self._by_value.clear()

    def copy(self) -> IndexedSet[I, V]:
        clone: IndexedSet[I, V] = IndexedSet()
        clone._by_index = dict(self._by_index)
        clone._by_value = dict(self._by_value)
        return clone

    # ── Iteration ──────────────────────────────────────────────────────

    def __iter__(self) -> Iterator[tuple[I, V]]:
        return iter(list(self._by_index.items()))

    def sorted_items(self) -> list[tuple[I, V]]:
        """Return ``(index, value)`` pairs ordered by index."""
        return sorted(self._by_index.items(), key=lambda item: item[0])  # type: ignore[arg-type,return-value]

    def indexes(self) -> list[I]:
        return list(self._by_index)

    def values(self) -> list[V]:
        return list(self._by_index.values())

    def __repr__(self) -> str:
        pairs = ", ".join(f"{i!r}: {v!r}" for i, v in self._by_index.items())
        return f"IndexedSet({{{pairs}}})"

    def _check(self) -> None:
        assert len(self._by_index) == len(self._by_value), (
            f"IndexedSet lost its bijection: {len(self._by_index)} indexes, "
            f"{len(self._by_value)} values"
        )
