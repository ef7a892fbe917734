"""
Tests for Logger output: line format, threshold filtering, ordering, and the
guarantee that emitting never raises.
"""

import io
import re

import pytest

from src.core.logging import LoggerRegistry, LoggingConfig, LogLevel


class TestLineFormat:
    """Each emitted call becomes one ``[LEVEL] name: message`` line."""

    def test_end_to_end_app_scenario(self, make_registry, stream):
        logger = make_registry(min_level="DEBUG").get_logger("app")

        logger.error("boom")
        logger.debug("trace")
        logger.info("ready")

        assert stream.getvalue() == "[ERROR] app: boom\n[DEBUG] app: trace\n[INFO] app: ready\n"

    def test_warn_label(self, registry, stream):
        logger = registry.get_logger("app")
        logger.warn("careful")
        logger.warning("careful again")
        assert pytest.output_lines(stream) == ["[WARN] app: careful", "[WARN] app: careful again"]

    def test_empty_message_is_allowed(self, registry, stream):
        registry.get_logger("app").info("")
        assert stream.getvalue() == "[INFO] app: \n"

    def test_percent_signs_are_not_interpolated(self, registry, stream):
        registry.get_logger("app").info("100% done %s %(name)s")
        assert pytest.output_lines(stream) == ["[INFO] app: 100% done %s %(name)s"]

    def test_line_breaks_are_escaped(self, registry, stream):
        registry.get_logger("app").error("first\nsecond\r\n")
        assert pytest.output_lines(stream) == ["[ERROR] app: first\\nsecond\\r\\n"]

    def test_non_string_message_is_converted(self, registry, stream):
        registry.get_logger("app").info(42)
        assert pytest.output_lines(stream) == ["[INFO] app: 42"]

    def test_timestamp_prefix(self, make_registry, stream):
        make_registry(timestamps=True).get_logger("app").info("x")
        line = pytest.output_lines(stream)[0]
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2} \[INFO\] app: x", line)

    def test_sequential_calls_keep_order(self, registry, stream):
        logger = registry.get_logger("app")
        logger.info("a")
        logger.info("b")
        assert pytest.output_lines(stream) == ["[INFO] app: a", "[INFO] app: b"]


class TestThreshold:
    """Messages below the configured threshold are discarded."""

    def test_info_threshold_drops_debug(self, make_registry, stream):
        logger = make_registry(min_level="INFO").get_logger("app")

        logger.debug("x")
        assert stream.getvalue() == ""

        logger.info("x")
        logger.warn("x")
        logger.error("x")
        lines = pytest.output_lines(stream)
        assert lines == ["[INFO] app: x", "[WARN] app: x", "[ERROR] app: x"]
        assert all("x" in line for line in lines)

    def test_error_threshold_only_emits_errors(self, make_registry, stream):
        logger = make_registry(min_level="ERROR").get_logger("app")
        logger.debug("d")
        logger.info("i")
        logger.warn("w")
        logger.error("e")
        assert pytest.output_lines(stream) == ["[ERROR] app: e"]

    def test_is_enabled_for(self, make_registry):
        logger = make_registry(min_level="WARN").get_logger("app")
        assert logger.is_enabled_for(LogLevel.ERROR)
        assert logger.is_enabled_for("warn")
        assert not logger.is_enabled_for("info")
        assert not logger.is_debug_enabled()

    def test_level_ordering(self):
        assert LogLevel.ERROR.allows(LogLevel.ERROR)
        assert LogLevel.DEBUG.allows(LogLevel.ERROR)
        assert not LogLevel.ERROR.allows(LogLevel.WARN)
        assert not LogLevel.INFO.allows(LogLevel.DEBUG)


class TestSinkFailures:
    """Logging never crashes the caller."""

    def test_closed_stream_is_swallowed(self):
        closed = io.StringIO()
        logger = LoggerRegistry(LoggingConfig(), stream=closed).get_logger("app")
        closed.close()

        logger.error("still fine")
        logger.info("still fine")

    def test_failing_stream_is_swallowed(self):
        class BrokenStream:
            def write(self, data):
                raise BrokenPipeError("pipe closed")

            def flush(self):
                raise BrokenPipeError("pipe closed")

        logger = LoggerRegistry(LoggingConfig(), stream=BrokenStream()).get_logger("app")
        logger.error("ignored")


class TestRequestContext:
    """The request_context helper used by the HTTP middleware."""

    def test_success_logs_start_and_completion(self, registry, stream):
        logger = registry.get_logger("http")
        with logger.request_context("GET /", "req-1"):
            logger.debug("inside")

        lines = pytest.output_lines(stream)
        assert lines[0] == "[INFO] http: Request: GET / | request_id=req-1"
        assert lines[1] == "[DEBUG] http: inside"
        assert re.fullmatch(r"\[INFO\] http: Completed: GET / \| request_id=req-1 \| duration=\d+ms", lines[2])

    def test_failure_is_logged_and_reraised(self, registry, stream):
        logger = registry.get_logger("http")
        with pytest.raises(RuntimeError):
            with logger.request_context("GET /", "req-2"):
                raise RuntimeError("kaput")

        lines = pytest.output_lines(stream)
        assert "[ERROR] http: GET / failed: kaput | request_id=req-2" in lines
        assert lines[-1].startswith("[INFO] http: Completed: GET / | request_id=req-2")
