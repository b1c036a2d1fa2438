"""Tests for the indexed bidirectional map."""

import pytest

from listdiff.structures.indexed_set import IndexedSet


class TestLookups:
    def test_from_sequence_maps_positions(self):
        s = IndexedSet.from_sequence(["a", "b", "c"])
        assert len(s) == 3
        assert s.value_for(1) == "b"
        assert s.index_of("c") == 2

    def test_missing_lookups_return_none(self):
        s = IndexedSet.from_sequence(["a"])
        assert s.value_for(5) is None
        assert s.index_of("z") is None

    def test_contains(self):
        s = IndexedSet.from_sequence(["a", "b"])
        assert s.contains_value("a")
        assert not s.contains_value("z")
        assert s.contains_index(1)
        assert not s.contains_index(2)

    def test_empty_is_falsy(self):
        assert not IndexedSet()
        assert IndexedSet([(0, "a")])

    def test_repeated_value_keeps_last_position(self):
        s = IndexedSet.from_sequence(["a", "b", "a"])
        assert s.index_of("a") == 2
        assert s.value_for(0) is None
        assert len(s) == 2


class TestInsertEviction:
    def test_insert_evicts_previous_index_of_value(self):
        s = IndexedSet.from_sequence(["a", "b"])
        s.insert("a", 5)
        assert s.index_of("a") == 5
        assert s.value_for(0) is None
        assert len(s) == 2

    def test_insert_evicts_previous_value_at_index(self):
        s = IndexedSet.from_sequence(["a", "b"])
        s.insert("z", 1)
        assert s.value_for(1) == "z"
        assert s.index_of("b") is None
        assert len(s) == 2

    def test_insert_evicts_both_sides(self):
        s = IndexedSet.from_sequence(["a", "b"])
        s.insert("a", 1)
        assert s.index_of("a") == 1
        assert s.index_of("b") is None
        assert s.value_for(0) is None
        assert len(s) == 1

    def test_reinsert_same_pair_is_noop(self):
        s = IndexedSet.from_sequence(["a"])
        s.insert("a", 0)
        assert list(s) == [(0, "a")]

    def test_none_value_is_storable(self):
        s = IndexedSet()
        s.insert(None, 3)
        assert s.contains_value(None)
        assert s.remove(None) == 3
        assert len(s) == 0


class TestRemoval:
    def test_remove_by_value_returns_index(self):
        s = IndexedSet.from_sequence(["a", "b"])
        assert s.remove("b") == 1
        assert not s.contains_index(1)

    def test_remove_index_returns_value(self):
        s = IndexedSet.from_sequence(["a", "b"])
        assert s.remove_index(0) == "a"
        assert not s.contains_value("a")

    def test_remove_zero_index(self):
        s = IndexedSet.from_sequence(["a"])
        assert s.remove("a") == 0

    def test_remove_missing(self):
        s = IndexedSet.from_sequence(["a"])
        assert s.remove("z") is None
        assert s.remove_index(9) is None
        assert len(s) == 1

    def test_clear(self):
        s = IndexedSet.from_sequence(["a", "b"])
        s.clear()
        assert len(s) == 0
        assert s.index_of("a") is None


class TestIteration:
    def test_iterates_index_value_pairs(self):
        s = IndexedSet.from_sequence(["a", "b"])
        assert sorted(s) == [(0, "a"), (1, "b")]

    def test_sorted_items_orders_by_index(self):
        s = IndexedSet()
        s.insert("c", 2)
        s.insert("a", 0)
        s.insert("b", 1)
        assert s.sorted_items() == [(0, "a"), (1, "b"), (2, "c")]

    def test_indexes_and_values(self):
        s = IndexedSet.from_sequence(["a", "b"])
        assert sorted(s.indexes()) == [0, 1]
        assert sorted(s.values()) == ["a", "b"]

    def test_iteration_tolerates_mutation(self):
        s = IndexedSet.from_sequence(["a", "b", "c"])
        for index, _ in s:
            s.remove_index(index)
        assert len(s) == 0


class TestCopy:
    def test_copy_is_independent(self):
        s = IndexedSet.from_sequence(["a", "b"])
        clone = s.copy()
        clone.remove("a")
        clone.insert("z", 7)
        assert s.index_of("a") == 0
        assert not s.contains_value("z")
        assert len(clone) == 2

    def test_repr_lists_pairs(self):
        assert repr(IndexedSet([(0, "a")])) == "IndexedSet({0: 'a'})"


class TestInvariant:
    def test_broken_bijection_is_an_assertion(self):
        s = IndexedSet.from_sequence(["a", "b"])
        s._by_value.pop("a")
        with pytest.raises(AssertionError):
            s.insert("c", 9)
