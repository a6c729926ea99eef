"""Shared test fixtures for the extdiff test suite."""

from __future__ import annotations

import pytest

from extdiff.builder import ExtendedDiffBuilder
from extdiff.config import ExtDiffConfig


class RecordingMetricsHook:
    """Metrics backend that keeps every data point for inspection."""

    def __init__(self) -> None:
        self.counters: list[tuple[str, int, dict[str, str] | None]] = []
        self.timings: list[tuple[str, float, dict[str, str] | None]] = []
        self.gauges: list[tuple[str, float, dict[str, str] | None]] = []

    def increment(self, name, value=1, tags=None):
        self.counters.append((name, value, tags))

    def timing(self, name, ms, tags=None):
        self.timings.append((name, ms, tags))

    def gauge(self, name, value, tags=None):
        self.gauges.append((name, value, tags))


@pytest.fixture
def config() -> ExtDiffConfig:
    """Default test configuration."""
    return ExtDiffConfig()


@pytest.fixture
def builder(config: ExtDiffConfig) -> ExtendedDiffBuilder:
    """Extended-diff builder using the default test config."""
    return ExtendedDiffBuilder(config)


@pytest.fixture
def metrics() -> RecordingMetricsHook:
    return RecordingMetricsHook()
