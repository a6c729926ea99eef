"""Move matching over a base insert/delete script.

A *candidate* entry is paired with the first later, unconsumed entry of the
opposite kind whose element is equal to its own.  The search is greedy and
forward-only: once a candidate is paired it is never revisited, and a later
entry that would have been a better partner is not considered.  This keeps
the whole pass at O(d^2) in the script length ``d`` and makes the result
deterministic.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from extdiff.bounds import element_at
from extdiff.models import DiffOp, DiffOpType, ExtendedOp


def pair_move(
    candidate: DiffOp,
    match: DiffOp,
    original: Sequence[Any],
    other: Sequence[Any],
) -> ExtendedOp | None:
    """Return a move if *candidate* and *match* refer to the same element.

    The pair must be one delete and one insert, in either order.  Equality
    is the element type's own ``==``; identity plays no part.

    Returns
    -------
    ExtendedOp | None
        A move from the delete's position to the insert's position, or
        ``None`` when the pair is not a move.
    """
    if candidate.op_type == match.op_type:
        return None

    if candidate.op_type == DiffOpType.DELETE:
        deleted, inserted = candidate, match
    else:
        deleted, inserted = match, candidate

    if element_at(original, deleted.at, "original") == element_at(other, inserted.at, "other"):
        return ExtendedOp.move(deleted.at, inserted.at)
    return None


def first_match(
    script: Sequence[DiffOp],
    consumed: set[int] | frozenset[int],
    candidate_index: int,
    original: Sequence[Any],
    other: Sequence[Any],
) -> tuple[ExtendedOp, int] | None:
    """Find the first later entry that pairs with ``script[candidate_index]``.

    Parameters
    ----------
    script:
        The base edit script.
    consumed:
        Script indices already used as the match side of a move.
    candidate_index:
        Script index of the candidate.
    original, other:
        The two sequences the script was computed between.

    Returns
    -------
    tuple[ExtendedOp, int] | None
        The move and the script index of its match, or ``None`` if no later
        unconsumed entry pairs with the candidate.
    """
    candidate = script[candidate_index]
    for match_index in range(candidate_index + 1, len(script)):
        if match_index in consumed:
            continue
        move = pair_move(candidate, script[match_index], original, other)
        if move is not None:
            return move, match_index
    return None
