"""Error hierarchy for listdiff.

Every public error class inherits from ListDiffError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

The diff algorithms themselves define no recoverable errors: any two
collections of hashable values produce a result.  The errors below guard
the edges of the package (configuration lookups, size limits, and applying
an edit script that was not produced for the given collection).  Broken
internal invariants are signalled with ``AssertionError`` instead.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    DIFF_TOO_LARGE = "DIFF_TOO_LARGE"
    APPLY_ERROR = "APPLY_ERROR"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class ListDiffError(Exception):
    """Base exception for all listdiff errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------

class ListDiffValidationError(ListDiffError):
    """An argument could not be resolved, e.g. an unknown strategy name.

    Context keys: ``field``, ``value``, ``allowed``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message=message,
            context=context,
            cause=cause,
        )


class ListDiffSizeError(ListDiffError):
    """The dynamic-programming strategy refused an input above its cell cap.

    Context keys: ``old_length``, ``new_length``, ``max_cells``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.DIFF_TOO_LARGE,
            message=message,
            context=context,
            cause=cause,
        )


class ListDiffApplyError(ListDiffError):
    """An edit script does not fit the collection it is applied to.

    Context keys: ``operation``, ``index``, ``reason``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.APPLY_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
