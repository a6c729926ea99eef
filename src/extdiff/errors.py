"""Error hierarchy for extdiff.

Every public error class inherits from ExtDiffError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Every error here is a caller bug: a base script that does not fit the two
sequences it was supplied with.  Nothing is clamped, wrapped, or retried.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error extdiff can raise."""

    OUT_OF_BOUNDS = "OUT_OF_BOUNDS"
    INVALID_SCRIPT = "INVALID_SCRIPT"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class ExtDiffError(Exception):
    """Base exception for all extdiff errors.

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

    def __reduce__(self) -> tuple[Any, ...]:
        return _restore_error, (type(self), dict(self.__dict__))


def _restore_error(cls: type[ExtDiffError], state: dict[str, Any]) -> ExtDiffError:
    """Rebuild a pickled error without calling the subclass constructor."""
    err = cls.__new__(cls)
    Exception.__init__(err, state.get("message", ""))
    err.__dict__.update(state)
    if state.get("cause") is not None:
        err.__cause__ = state["cause"]
    return err


# ---------------------------------------------------------------------------
# Precondition violations
# ---------------------------------------------------------------------------

class ExtDiffOutOfBoundsError(ExtDiffError):
    """A base-script position does not address an element of its sequence.

    Context keys: ``script_index``, ``op_type``, ``position``,
    ``sequence`` (``"original"`` or ``"other"``), ``length``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.OUT_OF_BOUNDS,
            message=message,
            context=context,
            cause=cause,
        )


class ExtDiffInvalidScriptError(ExtDiffError):
    """The base script is not a sequence of insert/delete operations.

    Context keys: ``script_index``, ``entry`` (repr of the bad entry), or
    ``length`` and ``limit`` when the script exceeds
    :attr:`ExtDiffConfig.max_script_length`.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SCRIPT,
            message=message,
            context=context,
            cause=cause,
        )
