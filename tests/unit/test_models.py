"""Tests for the Edit model."""

import dataclasses

import pytest

from listdiff.models import Edit, EditOperation


class TestEditOperation:
    def test_values(self):
        assert [op.value for op in EditOperation] == [
            "insertion", "deletion", "substitution", "move",
        ]

    def test_is_a_string(self):
        assert EditOperation.MOVE == "move"


class TestConstructors:
    def test_insert(self):
        assert Edit.insert("a", 3).as_tuple() == (EditOperation.INSERTION, "a", 3, None)

    def test_delete(self):
        assert Edit.delete("a", 3).as_tuple() == (EditOperation.DELETION, "a", 3, None)

    def test_replace(self):
        assert Edit.replace("a", 3).as_tuple() == (EditOperation.SUBSTITUTION, "a", 3, None)

    def test_move_stores_destination_as_index(self):
        edit = Edit.move("a", 1, 4)
        assert edit.index == 4
        assert edit.origin == 1

    def test_move_without_origin_is_rejected(self):
        with pytest.raises(AssertionError):
            Edit(EditOperation.MOVE, "a", 1)

    def test_origin_on_non_move_is_rejected(self):
        with pytest.raises(AssertionError):
            Edit(EditOperation.INSERTION, "a", 1, origin=0)

    def test_frozen(self):
        edit = Edit.insert("a", 0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            edit.index = 1  # type: ignore[misc]


class TestIdentity:
    def test_equality_ignores_operation_and_index(self):
        assert Edit.insert("a", 0) == Edit.delete("a", 7)
        assert Edit.insert("a", 0) != Edit.insert("b", 0)

    def test_hash_follows_value(self):
        assert hash(Edit.insert("a", 0)) == hash(Edit.move("a", 2, 5))
        assert len({Edit.insert("a", 0), Edit.delete("a", 1)}) == 1

    def test_not_equal_to_bare_value(self):
        assert Edit.insert("a", 0) != "a"

    def test_as_tuple_distinguishes_kinds(self):
        assert Edit.insert("a", 0).as_tuple() != Edit.delete("a", 0).as_tuple()


class TestStr:
    @pytest.mark.parametrize(
        ("edit", "expected"),
        [
            (Edit.insert("x", 1), "Insert 'x' at 1"),
            (Edit.delete("x", 1), "Delete 'x' at 1"),
            (Edit.replace("x", 1), "Replace 'x' at 1"),
            (Edit.move("x", 0, 2), "Move 'x' from 0 to 2"),
            (Edit.insert(7, 0), "Insert 7 at 0"),
        ],
    )
    def test_render(self, edit, expected):
        assert str(edit) == expected
