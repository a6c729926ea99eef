"""Configuration for extdiff.

:class:`ExtDiffConfig` is a dataclass that captures every tuneable knob of
the extended-diff builder.  Instances are passed to
:class:`~extdiff.builder.ExtendedDiffBuilder` and
:func:`~extdiff.builder.compute_extended_diff`; omitting one uses the
defaults below.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class ExtDiffConfig:
    """Complete configuration for the extended-diff builder.

    Every parameter has a default, so ``ExtDiffConfig()`` is a valid
    configuration.

    Parameters
    ----------
    detect_moves:
        Pair equal delete/insert entries into moves.  When ``False`` every
        base-script entry is carried over unchanged; bounds are still
        validated and ``reordered_index`` is still built.
    max_script_length:
        Upper bound on the base-script length.  Move detection is quadratic
        in that length, so callers diffing untrusted input can cap it here.
        ``None`` disables the check.
    metrics:
        A :class:`~extdiff.observability.MetricsHook` backend.  Defaults to
        the no-op hook.
    debug_dump_diff:
        Write each built extended script to *stderr* as JSON.
    """

    # ── Matching ────────────────────────────────────────────────────────
    detect_moves: bool = True

    max_script_length: int | None = None

    # ── Observability ──────────────────────────────────────────────────
    metrics: Any | None = None

    # ── Debug ───────────────────────────────────────────────────────────
    debug_dump_diff: bool = False

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.max_script_length is not None and self.max_script_length < 0:
            raise ValueError(
                f"max_script_length must be >= 0, got {self.max_script_length}"
            )
