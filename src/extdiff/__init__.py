"""extdiff: move detection over insert/delete edit scripts.

Public re-exports
-----------------

* **Entry points:** :func:`compute_extended_diff`, :class:`ExtendedDiffBuilder`
* **Configuration:** :class:`ExtDiffConfig`
* **Errors:** Every :class:`ExtDiffError` subclass and :class:`ErrorCode`
* **Models:** Operation types and the :class:`ExtendedDiff` result

Usage::

    from extdiff import DiffOp, compute_extended_diff

    result = compute_extended_diff(
        ["a", "b", "c"],
        ["b", "a", "c"],
        [DiffOp.delete(0), DiffOp.insert(1)],
    )
    result.moves  # one move: from_index=0, to_index=1
"""

from __future__ import annotations

# ── Entry points ───────────────────────────────────────────────────────
from extdiff.builder import ExtendedDiffBuilder, compute_extended_diff

# ── Configuration ───────────────────────────────────────────────────────
from extdiff.config import ExtDiffConfig

# ── Errors ──────────────────────────────────────────────────────────────
from extdiff.errors import (
    ErrorCode,
    ExtDiffError,
    ExtDiffInvalidScriptError,
    ExtDiffOutOfBoundsError,
)

# ── Models ──────────────────────────────────────────────────────────────
from extdiff.models import (
    DiffOp,
    DiffOpType,
    ExtendedDiff,
    ExtendedOp,
    ExtendedOpType,
)

__all__ = [
    # Entry points
    "compute_extended_diff",
    "ExtendedDiffBuilder",
    # Configuration
    "ExtDiffConfig",
    # Error base + code enum
    "ExtDiffError",
    "ErrorCode",
    # Precondition violations
    "ExtDiffOutOfBoundsError",
    "ExtDiffInvalidScriptError",
    # Models: enums
    "DiffOpType",
    "ExtendedOpType",
    # Models: operations and result
    "DiffOp",
    "ExtendedOp",
    "ExtendedDiff",
]
