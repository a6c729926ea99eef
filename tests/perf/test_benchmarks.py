"""Performance benchmarks for extdiff.

Run with: pytest tests/perf/ -v -s
"""
import subprocess
import sys
import time

from extdiff.builder import ExtendedDiffBuilder
from extdiff.config import ExtDiffConfig
from extdiff.models import DiffOp


def _rotation_inputs(n: int) -> tuple[list[int], list[int], list[DiffOp]]:
    """Reverse *n* distinct elements; every delete has exactly one partner."""
    original = list(range(n))
    other = list(reversed(original))
    script = [DiffOp.delete(i) for i in range(n)]
    script.extend(DiffOp.insert(i) for i in range(n))
    return original, other, script


def _no_move_inputs(n: int) -> tuple[list[int], list[int], list[DiffOp]]:
    """Disjoint sequences: every candidate scans the whole remaining script."""
    original = list(range(n))
    other = list(range(n, 2 * n))
    script = [DiffOp.delete(i) for i in range(n)]
    script.extend(DiffOp.insert(i) for i in range(n))
    return original, other, script


class TestImportTime:
    """Package import stays cheap."""

    def test_import_time_under_500ms(self):
        times = []
        for _ in range(3):
            proc = subprocess.run(
                [
                    sys.executable,
                    "-c",
                    "import time; t=time.perf_counter(); import extdiff; "
                    "print((time.perf_counter()-t)*1000)",
                ],
                capture_output=True,
                text=True,
                check=True,
            )
            times.append(float(proc.stdout.strip()))
        best_ms = min(times)
        print(f"\n  Import extdiff: best {best_ms:.2f}ms")
        assert best_ms < 500, f"Import too slow: best {best_ms:.2f}ms of {times} (limit: 500ms)"


class TestBuildPerformance:
    """Quadratic move search on realistic script sizes."""

    def test_400_moves_under_2s(self):
        builder = ExtendedDiffBuilder(ExtDiffConfig())
        original, other, script = _rotation_inputs(200)

        start = time.perf_counter()
        result = builder.build(original, other, script)
        elapsed_ms = (time.perf_counter() - start) * 1000

        print(f"\n  Build {len(script)}-entry script with moves: {elapsed_ms:.2f}ms")
        assert len(result.moves) == 200
        assert elapsed_ms < 2000, f"Move build too slow: {elapsed_ms:.2f}ms"

    def test_worst_case_no_moves_under_3s(self):
        builder = ExtendedDiffBuilder(ExtDiffConfig())
        original, other, script = _no_move_inputs(200)

        start = time.perf_counter()
        result = builder.build(original, other, script)
        elapsed_ms = (time.perf_counter() - start) * 1000

        print(f"\n  Build {len(script)}-entry script without moves: {elapsed_ms:.2f}ms")
        assert result.moves == ()
        assert elapsed_ms < 3000, f"No-move build too slow: {elapsed_ms:.2f}ms"
