"""Extended script builder: upgrade a base edit script with moves.

Given two sequences and an insert/delete script already computed between
them, the builder drives :func:`~extdiff.matcher.first_match` over every
script entry and assembles an :class:`ExtendedDiff`.  It never computes a
base script itself.
"""

from __future__ import annotations

import json
import sys
import time
from collections import Counter
from collections.abc import Sequence
from typing import Any

from extdiff.bounds import validate_script
from extdiff.config import ExtDiffConfig
from extdiff.errors import ExtDiffInvalidScriptError
from extdiff.matcher import first_match
from extdiff.models import DiffOp, ExtendedDiff, ExtendedOp
from extdiff.observability import NoopMetricsHook, get_logger

log = get_logger("extdiff.builder")


class ExtendedDiffBuilder:
    """Builds extended scripts.

    The builder holds no per-call state, so one instance may be shared
    freely across threads.

    Parameters
    ----------
    config:
        Builder configuration.  Defaults to ``ExtDiffConfig()``.
    """

    def __init__(self, config: ExtDiffConfig | None = None) -> None:
        self._config = config if config is not None else ExtDiffConfig()
        self._metrics = (
            self._config.metrics if self._config.metrics is not None else NoopMetricsHook()
        )

    def build(
        self,
        original: Sequence[Any],
        other: Sequence[Any],
        script: Sequence[DiffOp],
    ) -> ExtendedDiff:
        """Upgrade *script* into an extended script with moves.

        Script entries are visited in order.  Each entry not already used as
        the match side of a move becomes a candidate: if a later entry pairs
        with it, a single move is emitted in the candidate's place;
        otherwise the candidate is carried over unchanged.

        Parameters
        ----------
        original:
            The sequence deletes refer to.
        other:
            The sequence inserts refer to.
        script:
            A minimal insert/delete script transforming *original* into
            *other*.

        Returns
        -------
        ExtendedDiff

        Raises
        ------
        ExtDiffOutOfBoundsError
            If a script position does not address an element of its
            sequence.
        ExtDiffInvalidScriptError
            If *script* contains anything other than :class:`DiffOp`
            entries, or is longer than ``max_script_length``.
        """
        t0 = time.monotonic()
        self._check_length(script)
        source = validate_script(script, original, other)

        elements: list[ExtendedOp] = []
        consumed: set[int] = set()
        recorded: list[int] = []
        move_indices: set[int] = set()

        for candidate_index, candidate in enumerate(source):
            if candidate_index in consumed:
                continue
            found = (
                first_match(source, consumed, candidate_index, original, other)
                if self._config.detect_moves
                else None
            )
            if found is not None:
                move, match_index = found
                recorded.append(candidate_index)
                recorded.append(match_index)
                move_indices.add(candidate_index)
                consumed.add(match_index)
                elements.append(move)
            else:
                recorded.append(candidate_index)
                elements.append(ExtendedOp.from_diff_op(candidate))

        result = ExtendedDiff(
            source=source,
            elements=tuple(elements),
            move_indices=frozenset(move_indices),
            reordered_index=reorder(recorded),
        )

        elapsed_ms = (time.monotonic() - t0) * 1000
        _emit_build_metrics(self._metrics, result, elapsed_ms)
        log.debug(
            "extended diff built",
            extra={
                "extra_fields": {
                    "op": "extended_diff",
                    "script_length": len(source),
                    "elements": len(result.elements),
                    "moves": len(move_indices),
                    "move_indices": result.move_indices,
                }
            },
        )
        if self._config.debug_dump_diff:
            print(
                "[extdiff] Extended script:",
                json.dumps(_dump(result), indent=2),
                file=sys.stderr,
            )
        return result

    def _check_length(self, script: Sequence[DiffOp]) -> None:
        limit = self._config.max_script_length
        if limit is not None and len(script) > limit:
            raise ExtDiffInvalidScriptError(
                message=f"Base script has {len(script)} entries, limit is {limit}",
                context={"length": len(script), "limit": limit},
            )


def reorder(recorded: Sequence[int]) -> tuple[int, ...]:
    """Map each script index to the position it was recorded at.

    *recorded* lists script indices in the order the builder accounted for
    them.  The pairs ``(script_index, position)`` are sorted by script index
    and the positions are returned in that order.
    """
    ranked = sorted(zip(recorded, range(len(recorded))), key=lambda pair: pair[0])
    return tuple(position for _, position in ranked)


def compute_extended_diff(
    original: Sequence[Any],
    other: Sequence[Any],
    script: Sequence[DiffOp],
    config: ExtDiffConfig | None = None,
) -> ExtendedDiff:
    """Upgrade *script* between *original* and *other* with moves.

    Convenience wrapper around :meth:`ExtendedDiffBuilder.build`.
    """
    return ExtendedDiffBuilder(config).build(original, other, script)


def _emit_build_metrics(metrics: Any, result: ExtendedDiff, elapsed_ms: float) -> None:
    """Emit build counters, ``ops_total`` grouped by type, and timings."""
    metrics.increment("extdiff.builds_total")
    op_counts: Counter[str] = Counter(op.op_type.value for op in result.elements)
    for op_type_val, count in op_counts.items():
        metrics.increment("extdiff.ops_total", count, tags={"op_type": op_type_val})
    metrics.timing("extdiff.build_duration_ms", elapsed_ms)
    metrics.gauge("extdiff.script_length", float(len(result.source)))


def _dump(result: ExtendedDiff) -> dict[str, Any]:
    ops = []
    for op in result.elements:
        if op.is_move:
            ops.append({"op": op.op_type.value, "from": op.from_index, "to": op.to_index})
        else:
            ops.append({"op": op.op_type.value, "at": op.at})
    return {
        "elements": ops,
        "move_indices": sorted(result.move_indices),
        "reordered_index": list(result.reordered_index),
    }
