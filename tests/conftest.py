"""
Pytest configuration and fixtures for the logger registry test suite.
"""

import io
from typing import Callable

import pytest

from src.core.logging import LoggerRegistry, LoggingConfig, set_default_registry


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory sink capturing everything a registry writes."""
    return io.StringIO()


@pytest.fixture
def make_registry(stream: io.StringIO) -> Callable[..., LoggerRegistry]:
    """Factory for isolated registries writing to the ``stream`` fixture."""
    def _make(min_level: str = "DEBUG", timestamps: bool = False) -> LoggerRegistry:
        config = LoggingConfig(min_level=min_level, timestamps=timestamps)
        return LoggerRegistry(config, stream=stream)
    return _make


@pytest.fixture
def registry(make_registry) -> LoggerRegistry:
    """Registry with every level enabled."""
    return make_registry()


@pytest.fixture
def fresh_default_registry(monkeypatch):
    """Drop the process-wide registry for one test and restore it afterwards."""
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_TIMESTAMPS", raising=False)
    previous = set_default_registry(None)
    yield
    set_default_registry(previous)


def output_lines(stream: io.StringIO):
    """Lines written so far, without trailing newlines."""
    return stream.getvalue().splitlines()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Mark API tests as integration tests."""
    for item in items:
        if "api" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


pytest.output_lines = output_lines
