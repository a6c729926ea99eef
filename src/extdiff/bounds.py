"""Position validation for base-script entries.

Every ``at`` of the base script must address an element of the sequence it
refers to: *original* for deletes, *other* for inserts.  Positions are
checked against ``len()`` before any element is read, so negative positions
are rejected instead of wrapping around to the end of the sequence.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from typing import Any

from extdiff.errors import ExtDiffInvalidScriptError, ExtDiffOutOfBoundsError
from extdiff.models import DiffOp, DiffOpType
from extdiff.observability import get_logger

log = get_logger("extdiff.bounds")


def sequence_for(op: DiffOp, original: Sequence[Any], other: Sequence[Any]) -> tuple[str, Sequence[Any]]:
    """Return the name and sequence that *op*'s position refers to."""
    if op.op_type == DiffOpType.DELETE:
        return "original", original
    return "other", other


def check_entry(script_index: int, entry: Any) -> DiffOp:
    """Return *entry* if it is a well-formed :class:`DiffOp`.

    Integer-like positions (anything implementing ``__index__``, such as
    NumPy integers) are accepted and normalised to ``int``.

    Raises
    ------
    ExtDiffInvalidScriptError
        If *entry* is not a ``DiffOp``, has an unknown operation type, or
        carries a position that is not an integer.
    """
    if not isinstance(entry, DiffOp) or not isinstance(entry.op_type, DiffOpType):
        raise ExtDiffInvalidScriptError(
            message=f"Script entry {script_index} is not an insert/delete operation: {entry!r}",
            context={"script_index": script_index, "entry": repr(entry)},
        )
    try:
        # bool is an int subclass but never a position.
        if isinstance(entry.at, bool):
            raise TypeError("bool is not a position")
        position = operator.index(entry.at)
    except TypeError as exc:
        raise ExtDiffInvalidScriptError(
            message=f"Script entry {script_index} has a non-integer position: {entry.at!r}",
            context={"script_index": script_index, "entry": repr(entry)},
            cause=exc,
        ) from exc
    if type(entry.at) is not int:
        return DiffOp(entry.op_type, position)
    return entry


def check_position(
    script_index: int,
    op: DiffOp,
    original: Sequence[Any],
    other: Sequence[Any],
) -> None:
    """Raise :class:`ExtDiffOutOfBoundsError` unless *op* fits its sequence."""
    name, seq = sequence_for(op, original, other)
    length = len(seq)
    if 0 <= op.at < length:
        return
    context = {
        "script_index": script_index,
        "op_type": op.op_type.value,
        "position": op.at,
        "sequence": name,
        "length": length,
    }
    log.warning(
        "Base script position out of bounds",
        extra={"extra_fields": {"op": "check_position", **context}},
    )
    raise ExtDiffOutOfBoundsError(
        message=(
            f"{op.op_type.value} at position {op.at} (script index {script_index}) "
            f"is outside {name} of length {length}"
        ),
        context=context,
    )


def validate_script(
    script: Sequence[Any],
    original: Sequence[Any],
    other: Sequence[Any],
) -> tuple[DiffOp, ...]:
    """Validate every entry of *script* and return it as a tuple.

    All entries are checked up front, including those that will never be
    compared against another entry during move matching.
    """
    checked: list[DiffOp] = []
    for script_index, entry in enumerate(script):
        op = check_entry(script_index, entry)
        check_position(script_index, op, original, other)
        checked.append(op)
    return tuple(checked)


def element_at(seq: Sequence[Any], position: int, name: str) -> Any:
    """Return ``seq[position]``, refusing negative or too-large positions."""
    if not 0 <= position < len(seq):
        raise ExtDiffOutOfBoundsError(
            message=f"Position {position} is outside {name} of length {len(seq)}",
            context={"position": position, "sequence": name, "length": len(seq)},
        )
    return seq[position]
