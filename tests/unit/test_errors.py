"""Tests for the error hierarchy."""

import pickle

import pytest

from listdiff.errors import (
    ErrorCode,
    ListDiffApplyError,
    ListDiffError,
    ListDiffSizeError,
    ListDiffValidationError,
)


class TestErrorCodes:
    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (ListDiffValidationError, ErrorCode.VALIDATION_ERROR),
            (ListDiffSizeError, ErrorCode.DIFF_TOO_LARGE),
            (ListDiffApplyError, ErrorCode.APPLY_ERROR),
        ],
    )
    def test_subclass_sets_code(self, cls, code):
        err = cls(message="boom")
        assert isinstance(err, ListDiffError)
        assert err.code == code
        assert err.code == code.value
        assert str(err) == "boom"

    def test_context_defaults_to_empty(self):
        assert ListDiffApplyError(message="x").context == {}


class TestCauseAndRepr:
    def test_cause_is_chained(self):
        cause = KeyError("k")
        err = ListDiffValidationError(message="bad", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_repr_includes_context(self):
        err = ListDiffApplyError(message="m", context={"index": 1})
        text = repr(err)
        assert text.startswith("ListDiffApplyError(code=")
        assert "message='m'" in text
        assert "context={'index': 1}" in text

    def test_repr_omits_empty_context(self):
        assert "context" not in repr(ListDiffSizeError(message="m"))

    def test_base_accepts_any_code(self):
        err = ListDiffError(code="CUSTOM", message="m")
        assert err.code == "CUSTOM"


class TestPickle:
    def test_round_trip_keeps_type_and_fields(self):
        err = ListDiffSizeError(message="too big", context={"max_cells": 4})
        restored = pickle.loads(pickle.dumps(err))
        assert type(restored) is ListDiffSizeError
        assert restored.code == ErrorCode.DIFF_TOO_LARGE
        assert restored.message == "too big"
        assert restored.context == {"max_cells": 4}
