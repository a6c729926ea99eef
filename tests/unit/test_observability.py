"""Tests for observability/logger.py and observability/metrics.py"""
import io
import json
import logging

import pytest

from extdiff.builder import ExtendedDiffBuilder
from extdiff.errors import ExtDiffOutOfBoundsError
from extdiff.models import DiffOp
from extdiff.observability import MetricsHook, NoopMetricsHook, StructuredFormatter, get_logger


class TestStructuredFormatter:
    def _get_record(self, msg, level=logging.INFO, exc_info=None, extra_fields=None):
        record = logging.LogRecord(
            name="test",
            level=level,
            pathname="",
            lineno=0,
            msg=msg,
            args=(),
            exc_info=exc_info,
        )
        if extra_fields is not None:
            record.extra_fields = extra_fields
        return record

    def test_basic_format(self):
        result = json.loads(StructuredFormatter().format(self._get_record("hello world")))
        assert result["message"] == "hello world"
        assert result["level"] == "INFO"
        assert result["logger"] == "test"
        assert "ts" in result

    def test_extra_fields_merged(self):
        record = self._get_record("msg", extra_fields={"op": "extended_diff", "moves": 2})
        result = json.loads(StructuredFormatter().format(record))
        assert result["op"] == "extended_diff"
        assert result["moves"] == 2


class TestGetLogger:
    def test_idempotent(self):
        first = get_logger("extdiff.test_idempotent")
        second = get_logger("extdiff.test_idempotent")
        assert first is second
        assert len(first.handlers) == 1

    def test_writes_json_to_stream(self):
        stream = io.StringIO()
        log = get_logger("extdiff.test_stream", level="debug", stream=stream)
        log.debug("built", extra={"extra_fields": {"elements": 3}})
        line = json.loads(stream.getvalue().strip())
        assert line["message"] == "built"
        assert line["elements"] == 3
        assert line["logger"] == "extdiff.test_stream"

    def test_default_level_is_warning(self):
        assert get_logger("extdiff.test_default_level").level == logging.WARNING

    def test_does_not_propagate(self):
        assert get_logger("extdiff.test_propagate").propagate is False


class TestMetricsHook:
    def test_noop_satisfies_protocol(self):
        assert isinstance(NoopMetricsHook(), MetricsHook)

    def test_noop_accepts_all_calls(self):
        hook = NoopMetricsHook()
        hook.increment("extdiff.builds_total")
        hook.increment("extdiff.ops_total", 3, tags={"op_type": "move"})
        hook.timing("extdiff.build_duration_ms", 1.5)
        hook.gauge("extdiff.script_length", 4.0)

    def test_recording_hook_satisfies_protocol(self, metrics):
        assert isinstance(metrics, MetricsHook)

    def test_object_without_methods_is_not_a_hook(self):
        assert not isinstance(object(), MetricsHook)


def test_sets_serialised_sorted():
    record = logging.LogRecord("t", logging.INFO, "", 0, "m", (), None)
    record.extra_fields = {"move_indices": frozenset({3, 0, 2})}
    assert json.loads(StructuredFormatter().format(record))["move_indices"] == [0, 2, 3]


@pytest.fixture
def library_logs():
    """Redirect the builder and bounds loggers to in-memory streams."""
    streams: dict[str, io.StringIO] = {}
    restore = []
    for name in ("extdiff.builder", "extdiff.bounds"):
        logger = logging.getLogger(name)
        handler = logger.handlers[0]
        stream = io.StringIO()
        restore.append((logger, logger.level, handler, handler.setStream(stream)))
        streams[name] = stream
    yield streams
    for logger, level, handler, old_stream in restore:
        logger.setLevel(level)
        handler.setStream(old_stream)


def _records(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestLibraryRecords:
    """Records written by the builder and the bounds checks."""

    def test_build_writes_debug_record(self, library_logs):
        logging.getLogger("extdiff.builder").setLevel(logging.DEBUG)
        ExtendedDiffBuilder().build(
            ["a", "b", "x"], ["y", "b", "a"],
            [DiffOp.delete(0), DiffOp.delete(2), DiffOp.insert(0), DiffOp.insert(2)],
        )
        [record] = _records(library_logs["extdiff.builder"])
        assert record["level"] == "DEBUG"
        assert record["logger"] == "extdiff.builder"
        assert record["message"] == "extended diff built"
        assert record["op"] == "extended_diff"
        assert record["script_length"] == 4
        assert record["elements"] == 3
        assert record["moves"] == 1
        assert record["move_indices"] == [0]

    def test_debug_record_lists_move_indices_sorted(self, library_logs):
        logging.getLogger("extdiff.builder").setLevel(logging.DEBUG)
        original = ["A", "B", "C", "D"]
        other = ["B", "A", "D", "C"]
        script = [DiffOp.delete(2), DiffOp.insert(3), DiffOp.delete(0), DiffOp.insert(1)]
        ExtendedDiffBuilder().build(original, other, script)
        [record] = _records(library_logs["extdiff.builder"])
        assert record["move_indices"] == [0, 2]

    def test_debug_record_silent_at_default_level(self, library_logs):
        ExtendedDiffBuilder().build(["A", "B"], ["B", "A"], [DiffOp.delete(0), DiffOp.insert(1)])
        assert library_logs["extdiff.builder"].getvalue() == ""

    def test_out_of_bounds_writes_warning(self, library_logs):
        with pytest.raises(ExtDiffOutOfBoundsError) as exc_info:
            ExtendedDiffBuilder().build([], [], [DiffOp.delete(0)])
        [record] = _records(library_logs["extdiff.bounds"])
        assert record["level"] == "WARNING"
        assert record["op"] == "check_position"
        for key, value in exc_info.value.context.items():
            assert record[key] == value
        assert record["length"] == 0
        assert record["sequence"] == "original"

    def test_valid_script_writes_no_warning(self, library_logs):
        ExtendedDiffBuilder().build(["A"], ["A"], [DiffOp.delete(0), DiffOp.insert(0)])
        assert library_logs["extdiff.bounds"].getvalue() == ""
