"""
Logging configuration and output sink for the logger registry.

Every emitted record becomes exactly one plain-text line of the form
``[<LEVEL>] <name>: <message>``, optionally prefixed with an ISO-8601
timestamp, written to the process's standard error stream.
"""

import logging
import os
import sys
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping, Optional, TextIO

from .levels import LogLevel, level_label

TRUTHY = {"1", "true", "yes", "on"}


def parse_flag(value) -> bool:
    """Interpret a YAML or environment value as a boolean switch."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Process-wide settings read once when a registry is created.

    ``min_level`` is the least severe level still emitted; the default lets
    every level through.
    """

    min_level: str = "DEBUG"
    timestamps: bool = False

    def __post_init__(self):
        # Fail at construction rather than on the first emit
        LogLevel.parse(self.min_level)

    @property
    def threshold(self) -> LogLevel:
        return LogLevel.parse(self.min_level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LoggingConfig":
        """
        Build a config from ``LOG_LEVEL`` and ``LOG_TIMESTAMPS``.

        Args:
            environ: Mapping to read instead of ``os.environ``

        Returns:
            LoggingConfig: Config with unset variables left at their defaults
        """
        env = os.environ if environ is None else environ
        min_level = (env.get("LOG_LEVEL") or "").strip() or cls.min_level
        timestamps = parse_flag(env.get("LOG_TIMESTAMPS") or "")
        return cls(min_level=min_level, timestamps=timestamps)


class LineFormatter(logging.Formatter):
    """
    Formats a record as a single ``[LEVEL] name: message`` line.

    Line breaks inside the message are escaped so one call never spans
    several output lines.
    """

    def __init__(self, timestamps: bool = False, datefmt: Optional[str] = None):
        super().__init__(datefmt=datefmt)
        self.timestamps = timestamps

    def formatTime(self, record, datefmt=None):
        if datefmt:
            return super().formatTime(record, datefmt)
        # Local time with a colon-separated UTC offset, e.g. 2024-05-01T12:00:00+02:00
        return datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="seconds")

    def format(self, record):
        message = record.getMessage().replace("\r", "\\r").replace("\n", "\\n")
        line = f"[{level_label(record.levelno)}] {record.name}: {message}"
        if self.timestamps:
            line = f"{self.formatTime(record, self.datefmt)} {line}"
        return line


class DiagnosticStreamHandler(logging.StreamHandler):
    """
    Stream handler bound to stderr that never lets a write failure escape.

    Without an explicit stream the current ``sys.stderr`` is looked up on every
    write, so redirections made after the handler was created are honoured.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        logging.Handler.__init__(self)
        self._target = stream

    @property
    def stream(self):
        return self._target if self._target is not None else sys.stderr

    @stream.setter
    def stream(self, value):
        self._target = value

    def handleError(self, record):
        # Logging must not crash the caller; drop the record.
        pass


def setup_handler(config: LoggingConfig, stream: Optional[TextIO] = None) -> logging.Handler:
    """
    Create the sink shared by all loggers of one registry.

    Args:
        config: Logging configuration
        stream: Explicit output stream, ``None`` for stderr

    Returns:
        logging.Handler: Configured handler
    """
    handler = DiagnosticStreamHandler(stream)
    handler.setFormatter(LineFormatter(timestamps=config.timestamps))
    handler.setLevel(logging.DEBUG)
    return handler
