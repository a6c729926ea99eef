"""Public data models for extdiff.

This module contains the operation types of the base edit script, the
operation types of the extended script, and the immutable
:class:`ExtendedDiff` result.  All types are plain dataclasses with no
behaviour beyond what is needed for structural equality, hashing, and
read-only sequence access.

Two index spaces appear here and must not be confused:

* **Sequence positions** -- ``at``, ``from_index`` and ``to_index`` address
  elements of the *original* or *other* sequence.
* **Script indices** -- positions of entries within the base script.  They
  appear only in :attr:`ExtendedDiff.move_indices` and
  :attr:`ExtendedDiff.reordered_index`, never on an operation.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class DiffOpType(str, Enum):
    """Operation types of the base (insert/delete) edit script."""

    INSERT = "insert"
    """An element of *other* with no counterpart in *original*."""

    DELETE = "delete"
    """An element of *original* with no counterpart in *other*."""


class ExtendedOpType(str, Enum):
    """Operation types emitted in an extended script."""

    INSERT = "insert"
    """Carried over unchanged from the base script."""

    DELETE = "delete"
    """Carried over unchanged from the base script."""

    MOVE = "move"
    """A delete/insert pair that refers to the same logical element."""


# ---------------------------------------------------------------------------
# Base script
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DiffOp:
    """A single entry of the base edit script.

    Attributes
    ----------
    op_type:
        :attr:`DiffOpType.DELETE` or :attr:`DiffOpType.INSERT`.
    at:
        Position in *original* (deletes) or in *other* (inserts).
    """

    op_type: DiffOpType
    at: int

    @classmethod
    def insert(cls, at: int) -> DiffOp:
        return cls(DiffOpType.INSERT, at)

    @classmethod
    def delete(cls, at: int) -> DiffOp:
        return cls(DiffOpType.DELETE, at)


# ---------------------------------------------------------------------------
# Extended script
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExtendedOp:
    """A single operation in an extended script.

    Inserts and deletes carry only ``at``; moves carry only ``from_index``
    (a position in *original*) and ``to_index`` (a position in *other*).
    None of these are positions in the transformed sequence.

    Attributes
    ----------
    op_type:
        The kind of operation (insert, delete, move).
    at:
        Sequence position of an insert or delete.
    from_index:
        Position of a moved element in *original*.
    to_index:
        Position of a moved element in *other*.
    """

    op_type: ExtendedOpType
    at: int | None = None
    from_index: int | None = None
    to_index: int | None = None

    @classmethod
    def insert(cls, at: int) -> ExtendedOp:
        return cls(ExtendedOpType.INSERT, at=at)

    @classmethod
    def delete(cls, at: int) -> ExtendedOp:
        return cls(ExtendedOpType.DELETE, at=at)

    @classmethod
    def move(cls, from_index: int, to_index: int) -> ExtendedOp:
        return cls(ExtendedOpType.MOVE, from_index=from_index, to_index=to_index)

    @classmethod
    def from_diff_op(cls, op: DiffOp) -> ExtendedOp:
        """Carry a base-script entry over unchanged."""
        if op.op_type == DiffOpType.DELETE:
            return cls.delete(op.at)
        return cls.insert(op.at)

    @property
    def is_move(self) -> bool:
        return self.op_type == ExtendedOpType.MOVE


@dataclass(frozen=True)
class ExtendedDiff:
    """Result of upgrading a base edit script with move detection.

    Instances behave as a read-only sequence of their :attr:`elements`.

    Attributes
    ----------
    source:
        The base script the result was built from, kept for traceability.
    elements:
        Ordered operations: unmatched inserts/deletes carried over
        unchanged, matched pairs collapsed into a single move placed where
        the earlier (candidate) entry stood.
    move_indices:
        Script indices of the candidate side of every move.
    reordered_index:
        For each script index ``k`` of :attr:`source`, the position at which
        entry ``k`` was recorded during the build.  Candidates are recorded
        when visited; the match side of a move is recorded immediately after
        its candidate.  Always a permutation of ``range(len(source))``.
    """

    source: tuple[DiffOp, ...] = ()
    elements: tuple[ExtendedOp, ...] = ()
    move_indices: frozenset[int] = field(default_factory=frozenset)
    reordered_index: tuple[int, ...] = ()

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[ExtendedOp]:
        return iter(self.elements)

    def __getitem__(self, index: int | slice) -> ExtendedOp | tuple[ExtendedOp, ...]:
        return self.elements[index]

    def index_after(self, index: int) -> int:
        """Return the position immediately after *index*."""
        return index + 1

    @property
    def moves(self) -> tuple[ExtendedOp, ...]:
        return tuple(op for op in self.elements if op.is_move)

    def counts(self) -> dict[ExtendedOpType, int]:
        """Number of elements per operation type (absent types omitted)."""
        return dict(Counter(op.op_type for op in self.elements))
