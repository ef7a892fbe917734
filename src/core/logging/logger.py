"""
Named logger handle returned by the registry.

A Logger is bound to one subsystem name and a fixed threshold. It wraps a
standalone stdlib ``logging.Logger`` that is never registered with the global
``logging`` manager, so two registries can hand out loggers with the same
name without sharing handlers or levels.
"""

import logging
import time
from contextlib import contextmanager
from typing import Any

from .levels import LogLevel


class Logger:
    """
    Leveled logger bound to a name.

    Messages at or above the threshold in severity are written to the sink,
    the rest are discarded silently.
    """

    def __init__(self, name: str, threshold: LogLevel, handler: logging.Handler):
        self._name = name
        self._threshold = threshold
        self._logger = logging.Logger(name, threshold.stdlib_level)
        self._logger.propagate = False
        self._logger.addHandler(handler)

    def __repr__(self):
        return f"<Logger {self._name} ({self._threshold.name})>"

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> LogLevel:
        return self._threshold

    def is_enabled_for(self, level) -> bool:
        return self._threshold.allows(LogLevel.parse(level))

    def is_debug_enabled(self) -> bool:
        """Check if debug logging is enabled."""
        return self.is_enabled_for(LogLevel.DEBUG)

    def _emit(self, level: LogLevel, message: Any):
        if not self._threshold.allows(level):
            return
        if not isinstance(message, str):
            message = str(message)
        # No args, so '%' in the message is never interpolated
        self._logger.log(level.stdlib_level, message)

    def error(self, message: str):
        """Log an error message."""
        self._emit(LogLevel.ERROR, message)

    def warn(self, message: str):
        """Log a warning message."""
        self._emit(LogLevel.WARN, message)

    warning = warn

    def info(self, message: str):
        """Log an info message."""
        self._emit(LogLevel.INFO, message)

    def debug(self, message: str):
        """Log a debug message."""
        self._emit(LogLevel.DEBUG, message)

    @contextmanager
    def request_context(self, operation: str, request_id: str):
        """
        Log the start, failure and completion of a unit of work.

        Exceptions raised inside the block are logged and re-raised.
        """
        start_time = time.time()
        self.info(f"Request: {operation} | request_id={request_id}")

        try:
            yield
        except Exception as e:
            self.error(f"{operation} failed: {e} | request_id={request_id}")
            raise
        finally:
            duration_ms = int((time.time() - start_time) * 1000)
            self.info(f"Completed: {operation} | request_id={request_id} | duration={duration_ms}ms")
